import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http import (
    health_router, auth_router, users_router, documents_router, diagrams_router
)
from app.core.config import Settings, get_settings
from app.core.db import Database
from app.core.errors import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Хранилище открывается при старте и закрывается при остановке"""
    settings: Settings = app.state.settings
    database = Database(settings.database_url, echo=settings.database_echo)
    await database.connect(create_schema=settings.create_schema)
    app.state.database = database

    try:
        yield
    finally:
        await database.disconnect()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="DocCollab",
        description="Хранилище документов и диаграмм с ролевым доступом",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["ETag"],
    )

    register_exception_handlers(app)

    # Подключаем роутеры
    for router in (health_router, auth_router, users_router, documents_router, diagrams_router):
        app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
