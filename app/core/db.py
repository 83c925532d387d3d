import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Хэндл хранилища: движок и фабрика сессий.

    Создается при старте приложения и закрывается при остановке,
    глобального движка на уровне модуля нет.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def connect(self, create_schema: bool = True) -> None:
        """Открытие соединения и (опционально) создание таблиц"""
        # Регистрируем модели в метаданных
        import app.db.models  # noqa: F401

        async with self.engine.begin() as conn:
            if create_schema:
                await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Database connected ({self.engine.url.render_as_string(hide_password=True)})")

    async def disconnect(self) -> None:
        await self.engine.dispose()
        logger.info("Database disconnected")

    def session(self) -> AsyncSession:
        return self.session_factory()


# Функция для dependency injection в FastAPI
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
