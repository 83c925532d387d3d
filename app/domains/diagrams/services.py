import logging
from typing import List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.db.repositories.diagram_repository import DiagramRepository
from app.domains.diagrams.entities import DEFAULT_CATEGORY, Diagram
from app.domains.diagrams.schemas import DiagramCreate, DiagramUpdate
from app.domains.identity.entities import Principal
from app.domains.records.entities import AuthorSummary
from app.domains.records.query import RecordQuery
from app.domains.records.versioning import check_expected_version

logger = logging.getLogger(__name__)


class DiagramService:
    """Сервис для работы с диаграммами и шаблонами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.diagram_repository = DiagramRepository(session)

    async def create_diagram(self, diagram_data: DiagramCreate, author: Principal) -> Diagram:
        data = diagram_data.model_dump(exclude_unset=True)

        diagram = Diagram.create_diagram(
            title=diagram_data.title,
            diagram_data=diagram_data.diagram_data,
            author_id=author.user_id,
            description=data.get("description", ""),
            category=data.get("category", DEFAULT_CATEGORY),
            tags=data.get("tags"),
            is_template=data.get("is_template", False)
        )

        created = await self.diagram_repository.create(diagram, AuthorSummary.from_principal(author))
        logger.info(f"Diagram {created.uuid} created by {author.user_id} (template={created.is_template})")
        return created

    async def get_diagram(self, diagram_uuid: uuid.UUID) -> Diagram:
        diagram = await self.diagram_repository.get_by_uuid(diagram_uuid)

        if not diagram:
            raise NotFound("Diagram not found")

        return diagram

    async def list_diagrams(self, record_query: Optional[RecordQuery] = None) -> List[Diagram]:
        return await self.diagram_repository.query(record_query or RecordQuery())

    async def update_diagram(
        self,
        diagram_uuid: uuid.UUID,
        update_data: DiagramUpdate,
        principal: Principal,
        expected_version: Optional[int] = None
    ) -> Diagram:
        """Частичное обновление диаграммы"""
        data = update_data.model_dump(exclude_unset=True)

        diagram = await self.diagram_repository.get_by_uuid(diagram_uuid, for_update=True)

        if not diagram:
            raise NotFound("Diagram not found")

        check_expected_version(diagram, expected_version)
        diagram.apply_patch(data)

        updated = await self.diagram_repository.update(diagram)
        logger.info(f"Diagram {diagram_uuid} updated to version {updated.version} by {principal.user_id}")
        return updated

    async def delete_diagram(self, diagram_uuid: uuid.UUID, principal: Principal) -> None:
        if not await self.diagram_repository.delete(diagram_uuid):
            raise NotFound("Diagram not found")

        logger.info(f"Diagram {diagram_uuid} deleted by {principal.user_id}")

    async def duplicate_diagram(self, diagram_uuid: uuid.UUID, author: Principal) -> Diagram:
        """Создание копии диаграммы (обычно из шаблона).

        Это создание, а не обновление: версия исходной записи не меняется.
        Чтение и создание не атомарны вместе; если исходник удалят между
        ними, копия создается из уже прочитанных данных.
        """
        source = await self.diagram_repository.get_by_uuid(diagram_uuid)

        if not source:
            raise NotFound("Diagram not found")

        copy = source.duplicate(author_id=author.user_id)
        created = await self.diagram_repository.create(copy, AuthorSummary.from_principal(author))
        logger.info(f"Diagram {diagram_uuid} duplicated as {created.uuid} by {author.user_id}")
        return created
