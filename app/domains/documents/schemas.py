from typing import List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from app.domains.records.schemas import AuthorResponse, CamelModel, RecordResponse
from app.domains.records.validation import TagList, Trimmed, reject_null


class DocumentCreate(CamelModel):
    """Схема для создания документа.

    title и content обязательны; отсутствие поля и null дают одну и ту же
    ошибку "is required", поэтому они проверяются и для значения по умолчанию.
    """
    title: Optional[Trimmed] = Field(None, max_length=255, validate_default=True)
    content: Optional[str] = Field(None, max_length=1000000, validate_default=True)  # 1MB max content
    category: Optional[Trimmed] = Field(None, max_length=100)
    tags: Optional[TagList] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v:
            raise ValueError('Title is required')
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v:
            raise ValueError('Content is required')
        return v

    @field_validator('category', 'tags')
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info)


class DocumentUpdate(CamelModel):
    """Схема для частичного обновления документа"""
    title: Optional[Trimmed] = Field(None, max_length=255)
    content: Optional[str] = Field(None, max_length=1000000)
    category: Optional[Trimmed] = Field(None, max_length=100)
    tags: Optional[TagList] = None

    @field_validator('title', 'content', 'category', 'tags')
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        return reject_null(v, info)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v == "":
            raise ValueError('Title cannot be empty')
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if v == "":
            raise ValueError('Content cannot be empty')
        return v


class DocumentResponse(RecordResponse):
    """Схема для ответа с данными документа"""
    title: str
    content: str
    category: Optional[str] = None
    tags: List[str]

    @classmethod
    def from_entity(cls, document) -> "DocumentResponse":
        author = document.author
        return cls(
            id=document.uuid,
            title=document.title,
            content=document.content,
            category=document.category,
            tags=document.tags,
            author=AuthorResponse(id=author.id, username=author.username, email=author.email) if author else None,
            created_at=document.created_at,
            updated_at=document.updated_at,
            version=document.version
        )


class DocumentEnvelope(BaseModel):
    document: DocumentResponse


class DocumentMessageEnvelope(DocumentEnvelope):
    message: str


class DocumentListResponse(BaseModel):
    """Схема для списка документов"""
    documents: List[DocumentResponse]
