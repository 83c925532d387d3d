import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.domains.records.entities import AuthorSummary
from app.domains.records.versioning import INITIAL_VERSION, stamp_created, stamp_updated


class Document:
    """Сущность документа: markdown-текст с категорией и тегами"""

    def __init__(
        self,
        uuid: uuid.UUID,
        title: str,
        content: str,
        author_id: uuid.UUID,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
        version: int = INITIAL_VERSION,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        author: Optional[AuthorSummary] = None
    ):
        self.uuid = uuid
        self.title = title
        self.content = content
        self.author_id = author_id
        self.category = category
        self.tags = list(tags or [])
        self.version = version
        self.created_at = created_at
        self.updated_at = updated_at
        self.author = author

    def apply_patch(self, patch: Dict[str, Any]) -> None:
        """Применение проверенного частичного обновления.

        Меняются только присутствующие поля; author и created_at
        обновлением не затрагиваются.
        """
        for field in ("title", "content", "category", "tags"):
            if field in patch:
                setattr(self, field, patch[field])
        stamp_updated(self)

    @classmethod
    def create_document(
        cls,
        title: str,
        content: str,
        author_id: uuid.UUID,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> "Document":
        """Создание нового документа"""
        document = cls(
            uuid=uuid.uuid4(),
            title=title,
            content=content,
            author_id=author_id,
            category=category,
            tags=tags
        )
        stamp_created(document)
        return document

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Document(uuid={self.uuid}, title={self.title}, version={self.version})"
