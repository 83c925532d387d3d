"""Pytest configuration and fixtures."""

import asyncio
import os

import pytest

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_records.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.db import Database  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.db.repositories.user_repository import UserRepository  # noqa: E402
from app.domains.identity.entities import Role, User  # noqa: E402
from app.main import create_app  # noqa: E402

PASSWORD = "Secret123"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'records.db'}",
        jwt_secret="test-secret",
        log_level="WARNING",
    )


async def _seed_users(settings):
    database = Database(settings.database_url)
    await database.connect()
    users = {}
    try:
        async with database.session() as session:
            repo = UserRepository(session)
            for role in Role:
                users[role] = await repo.create(User.create_user(
                    email=f"{role.value}@example.com",
                    username=f"{role.value}_user",
                    password=PASSWORD,
                    role=role
                ))
    finally:
        await database.disconnect()
    return users


@pytest.fixture
def users(settings):
    """Admin, editor and viewer, keyed by Role."""
    return asyncio.run(_seed_users(settings))


@pytest.fixture
def client(settings, users):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def bearer(user, settings):
    token = create_access_token({"sub": str(user.uuid)}, settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(users, settings):
    return bearer(users[Role.ADMIN], settings)


@pytest.fixture
def editor_headers(users, settings):
    return bearer(users[Role.EDITOR], settings)


@pytest.fixture
def viewer_headers(users, settings):
    return bearer(users[Role.VIEWER], settings)


@pytest.fixture
def sample_document():
    return {
        "title": "HDMI Signal Flow",
        "content": "# HDMI\n\nUse certified cables for 4K content.",
        "category": "Video",
        "tags": ["HDMI", "Video"],
    }


@pytest.fixture
def sample_diagram():
    return {
        "title": "Conference Room",
        "description": "Basic huddle room layout",
        "diagramData": {
            "nodes": [{"id": "1", "data": {"label": "Display"}}],
            "edges": [],
        },
        "category": "Conference Room",
        "tags": ["Template", "Conference"],
        "isTemplate": True,
    }
