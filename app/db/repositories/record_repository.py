from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.user import User as UserModel
from app.domains.records.entities import AuthorSummary
from app.domains.records.query import RecordQuery
from app.domains.records.versioning import as_utc

RecordT = TypeVar("RecordT")


class RecordRepository(Generic[RecordT]):
    """Хранилище записей одного вида.

    Владеет каноническими копиями записей. Каждая операция касается
    ровно одной записи; обновление выполняется как read-modify-write
    в одной транзакции с блокировкой строки.
    """

    model = None
    # Колонки, по которым идет полнотекстовый (подстрочный) поиск
    search_columns: Tuple[str, ...] = ("title",)
    # Колонки, которые копируются из сущности в модель
    fields: Tuple[str, ...] = ()

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: RecordT, author: Optional[AuthorSummary] = None) -> RecordT:
        """Сохранение новой записи"""
        db_record = self.model(
            uuid=record.uuid,
            author_id=record.author_id,
            version=record.version,
            created_at=record.created_at,
            updated_at=record.updated_at,
            **self._values(record)
        )

        self.session.add(db_record)
        await self.session.commit()
        return self._to_domain(db_record, author)

    async def get_by_uuid(self, record_uuid: uuid.UUID, for_update: bool = False) -> Optional[RecordT]:
        """Получение записи по UUID"""
        stmt = self._select().where(self.model.uuid == record_uuid)
        if for_update:
            stmt = stmt.with_for_update(of=self.model)

        result = await self.session.execute(stmt)
        row = result.one_or_none()
        return self._to_domain(*row) if row else None

    async def query(self, record_query: RecordQuery) -> List[RecordT]:
        """Выборка по фильтру, новые изменения первыми"""
        stmt = self._select()
        for condition in record_query.conditions(self.model, self.search_columns):
            stmt = stmt.where(condition)
        stmt = stmt.order_by(self.model.updated_at.desc(), self.model.created_at.desc())

        result = await self.session.execute(stmt)
        records = [self._to_domain(*row) for row in result.all()]
        return [record for record in records if record_query.accepts(record)]

    async def update(self, record: RecordT) -> RecordT:
        """Запись изменений и фиксация транзакции"""
        db_record = await self.session.get(self.model, record.uuid)

        for field, value in self._values(record).items():
            setattr(db_record, field, value)
        db_record.version = record.version
        db_record.updated_at = record.updated_at

        await self.session.commit()
        return self._to_domain(db_record, record.author)

    async def delete(self, record_uuid: uuid.UUID) -> bool:
        """Удаление записи без возможности восстановления"""
        stmt = delete(self.model).where(self.model.uuid == record_uuid)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _select(self):
        # Автор может отсутствовать, поэтому outer join
        return select(self.model, UserModel).outerjoin(UserModel, self.model.author_id == UserModel.uuid)

    def _values(self, record: RecordT) -> Dict[str, Any]:
        return {field: getattr(record, field) for field in self.fields}

    def _to_domain(self, db_record, author=None) -> RecordT:
        """Преобразование модели БД в доменную сущность"""
        if isinstance(author, UserModel):
            author = AuthorSummary(id=author.uuid, username=author.username, email=author.email)

        return self._build(
            db_record,
            uuid=db_record.uuid,
            author_id=db_record.author_id,
            version=db_record.version,
            created_at=as_utc(db_record.created_at),
            updated_at=as_utc(db_record.updated_at),
            author=author,
        )

    def _build(self, db_record, **common) -> RecordT:
        raise NotImplementedError
