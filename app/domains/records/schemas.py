from datetime import datetime
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Схемы записей отдаются и принимаются в camelCase"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class AuthorResponse(CamelModel):
    id: uuid.UUID
    username: str
    email: str


class RecordResponse(CamelModel):
    """Общие поля всех записей"""
    id: uuid.UUID
    author: Optional[AuthorResponse] = None
    created_at: datetime
    updated_at: datetime
    version: int


class MessageResponse(BaseModel):
    message: str
