from app.db.models.document import Document as DocumentModel
from app.db.repositories.record_repository import RecordRepository
from app.domains.documents.entities import Document


class DocumentRepository(RecordRepository[Document]):
    """Репозиторий для работы с документами"""

    model = DocumentModel
    search_columns = ("title", "content")
    fields = ("title", "content", "category", "tags")

    def _build(self, db_document: DocumentModel, **common) -> Document:
        return Document(
            title=db_document.title,
            content=db_document.content,
            category=db_document.category,
            tags=db_document.tags,
            **common
        )
