import uuid

from sqlalchemy import Column, DateTime, UUID
from sqlalchemy.orm import declarative_base

# Базовый класс для моделей
Base = declarative_base()


class BaseModel(Base):
    """Общие колонки: идентификатор и временные метки"""
    __abstract__ = True

    uuid = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)
