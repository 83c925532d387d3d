import logging
from typing import List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.db.repositories.document_repository import DocumentRepository
from app.domains.documents.entities import Document
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate
from app.domains.identity.entities import Principal
from app.domains.records.entities import AuthorSummary
from app.domains.records.query import RecordQuery
from app.domains.records.versioning import check_expected_version

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами.

    Права и форма полей проверяются до вызова сервиса; здесь учет
    версий и обращение к хранилищу.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)

    async def create_document(self, document_data: DocumentCreate, author: Principal) -> Document:
        """Создание нового документа"""
        data = document_data.model_dump(exclude_unset=True)

        document = Document.create_document(
            title=document_data.title,
            content=document_data.content,
            author_id=author.user_id,
            category=data.get("category"),
            tags=data.get("tags")
        )

        created = await self.document_repository.create(document, AuthorSummary.from_principal(author))
        logger.info(f"Document {created.uuid} created by {author.user_id}")
        return created

    async def get_document(self, document_uuid: uuid.UUID) -> Document:
        """Получение документа по UUID"""
        document = await self.document_repository.get_by_uuid(document_uuid)

        if not document:
            raise NotFound("Document not found")

        return document

    async def list_documents(self, record_query: Optional[RecordQuery] = None) -> List[Document]:
        """Документы по фильтру, отсортированные по updated_at"""
        return await self.document_repository.query(record_query or RecordQuery())

    async def update_document(
        self,
        document_uuid: uuid.UUID,
        update_data: DocumentUpdate,
        principal: Principal,
        expected_version: Optional[int] = None
    ) -> Document:
        """Частичное обновление документа"""
        # Только переданные поля; false и пустая строка тоже применяются
        data = update_data.model_dump(exclude_unset=True)

        document = await self.document_repository.get_by_uuid(document_uuid, for_update=True)

        if not document:
            raise NotFound("Document not found")

        check_expected_version(document, expected_version)
        document.apply_patch(data)

        updated = await self.document_repository.update(document)
        logger.info(f"Document {document_uuid} updated to version {updated.version} by {principal.user_id}")
        return updated

    async def delete_document(self, document_uuid: uuid.UUID, principal: Principal) -> None:
        """Удаление документа"""
        if not await self.document_repository.delete(document_uuid):
            raise NotFound("Document not found")

        logger.info(f"Document {document_uuid} deleted by {principal.user_id}")

