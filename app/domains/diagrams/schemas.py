from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.domains.records.schemas import AuthorResponse, CamelModel, RecordResponse
from app.domains.records.validation import TagList, Trimmed, is_empty_graph, reject_null


class DiagramCreate(CamelModel):
    """Схема для создания диаграммы; diagramData хранится как есть"""
    title: Optional[Trimmed] = Field(None, max_length=255, validate_default=True)
    description: Optional[str] = None
    diagram_data: Any = Field(None, validate_default=True)
    category: Optional[Trimmed] = Field(None, max_length=100)
    tags: Optional[TagList] = None
    is_template: Optional[bool] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v:
            raise ValueError('Title is required')
        return v

    @field_validator('diagram_data')
    @classmethod
    def validate_diagram_data(cls, v):
        if is_empty_graph(v):
            raise ValueError('Diagram data is required')
        return v

    @field_validator('description', 'category', 'tags', 'is_template')
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info)


class DiagramUpdate(CamelModel):
    """Схема для частичного обновления диаграммы"""
    title: Optional[Trimmed] = Field(None, max_length=255)
    description: Optional[str] = None
    diagram_data: Any = None
    category: Optional[Trimmed] = Field(None, max_length=100)
    tags: Optional[TagList] = None
    # False применяется так же, как True
    is_template: Optional[bool] = None

    @field_validator('title', 'description', 'diagram_data', 'category', 'tags', 'is_template')
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v == "":
            raise ValueError('Title cannot be empty')
        return v

    @field_validator('diagram_data')
    @classmethod
    def validate_diagram_data(cls, v):
        if v is not None and is_empty_graph(v):
            raise ValueError('Diagram data cannot be empty')
        return v


class DiagramResponse(RecordResponse):
    title: str
    description: str
    diagram_data: Any
    category: str
    tags: List[str]
    is_template: bool

    @classmethod
    def from_entity(cls, diagram) -> "DiagramResponse":
        author = diagram.author
        return cls(
            id=diagram.uuid,
            title=diagram.title,
            description=diagram.description,
            diagram_data=diagram.diagram_data,
            category=diagram.category,
            tags=diagram.tags,
            is_template=diagram.is_template,
            author=AuthorResponse(id=author.id, username=author.username, email=author.email) if author else None,
            created_at=diagram.created_at,
            updated_at=diagram.updated_at,
            version=diagram.version
        )


class DiagramEnvelope(BaseModel):
    diagram: DiagramResponse


class DiagramMessageEnvelope(DiagramEnvelope):
    message: str


class DiagramListResponse(BaseModel):
    diagrams: List[DiagramResponse]
