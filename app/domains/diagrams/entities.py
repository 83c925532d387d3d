import copy
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.domains.records.entities import AuthorSummary
from app.domains.records.versioning import INITIAL_VERSION, stamp_created, stamp_updated

DEFAULT_CATEGORY = "General"
COPY_SUFFIX = " (Copy)"


class Diagram:
    """Сущность диаграммы.

    diagram_data - непрозрачный граф узлов и связей из редактора; ядро
    хранит его как есть и не проверяет его структуру.
    """

    def __init__(
        self,
        uuid: uuid.UUID,
        title: str,
        diagram_data: Any,
        author_id: uuid.UUID,
        description: str = "",
        category: str = DEFAULT_CATEGORY,
        tags: Optional[List[str]] = None,
        is_template: bool = False,
        version: int = INITIAL_VERSION,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        author: Optional[AuthorSummary] = None
    ):
        self.uuid = uuid
        self.title = title
        self.description = description
        self.diagram_data = diagram_data
        self.category = category
        self.tags = list(tags or [])
        self.is_template = is_template
        self.author_id = author_id
        self.version = version
        self.created_at = created_at
        self.updated_at = updated_at
        self.author = author

    def apply_patch(self, patch: Dict[str, Any]) -> None:
        """Применение проверенного частичного обновления"""
        for field in ("title", "description", "diagram_data", "category", "tags", "is_template"):
            # is_template=False тоже применяется, если поле передано
            if field in patch:
                setattr(self, field, patch[field])
        stamp_updated(self)

    def duplicate(self, author_id: uuid.UUID) -> "Diagram":
        """Новая диаграмма на основе этой: свежие id, автор и линия версий.

        Копия никак не связана с исходной записью и всегда не шаблон.
        """
        return Diagram.create_diagram(
            title=f"{self.title}{COPY_SUFFIX}",
            diagram_data=copy.deepcopy(self.diagram_data),
            author_id=author_id,
            description=self.description,
            category=self.category,
            tags=list(self.tags),
            is_template=False
        )

    @classmethod
    def create_diagram(
        cls,
        title: str,
        diagram_data: Any,
        author_id: uuid.UUID,
        description: str = "",
        category: str = DEFAULT_CATEGORY,
        tags: Optional[List[str]] = None,
        is_template: bool = False
    ) -> "Diagram":
        diagram = cls(
            uuid=uuid.uuid4(),
            title=title,
            diagram_data=diagram_data,
            author_id=author_id,
            description=description,
            category=category,
            tags=tags,
            is_template=is_template
        )
        stamp_created(diagram)
        return diagram

    def __eq__(self, other) -> bool:
        if not isinstance(other, Diagram):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"Diagram(uuid={self.uuid}, title={self.title}, version={self.version})"
