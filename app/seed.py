"""Наполнение базы демонстрационными данными.

ТОЛЬКО ДЛЯ РАЗРАБОТКИ: все пользователи, документы и диаграммы удаляются.
Учетные данные администратора берутся из SEED_ADMIN_EMAIL,
SEED_ADMIN_PASSWORD и SEED_ADMIN_USERNAME.

    python -m app.seed
"""

import asyncio
import logging

from sqlalchemy import delete

from app.core.config import Settings, get_settings
from app.core.db import Database
from app.db.models import Diagram as DiagramModel, Document as DocumentModel, User as UserModel
from app.db.repositories.user_repository import UserRepository
from app.domains.diagrams.schemas import DiagramCreate
from app.domains.diagrams.services import DiagramService
from app.domains.documents.schemas import DocumentCreate
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import Role, User

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENTS = [
    {
        "title": "HDMI Signal Flow Best Practices",
        "content": (
            "# HDMI Signal Flow Best Practices\n\n"
            "## Key Considerations\n"
            "- Maximum cable length: 50 feet for standard HDMI cables\n"
            "- Use certified cables for 4K/HDR content\n\n"
            "## Common Issues\n"
            "- Signal degradation over long distances\n"
            "- HDCP handshake failures\n"
        ),
        "category": "Video",
        "tags": ["HDMI", "Video", "Troubleshooting"],
    },
    {
        "title": "Dante Audio Network Setup",
        "content": (
            "# Dante Audio Network Setup\n\n"
            "- Use a dedicated VLAN for Dante traffic\n"
            "- Enable QoS with DSCP priorities\n"
            "- Disable EEE (Energy Efficient Ethernet) on switches\n"
        ),
        "category": "Audio",
        "tags": ["Dante", "Audio", "Network", "Setup"],
    },
]

SAMPLE_DIAGRAMS = [
    {
        "title": "Basic Conference Room",
        "description": "Display, camera and soundbar around a room PC",
        "diagram_data": {
            "nodes": [
                {"id": "1", "type": "default", "position": {"x": 250, "y": 50}, "data": {"label": "Room PC"}},
                {"id": "2", "type": "default", "position": {"x": 100, "y": 200}, "data": {"label": "Display"}},
                {"id": "3", "type": "default", "position": {"x": 400, "y": 200}, "data": {"label": "Soundbar"}},
            ],
            "edges": [
                {"id": "e1-2", "source": "1", "target": "2", "label": "HDMI"},
                {"id": "e1-3", "source": "1", "target": "3", "label": "USB"},
            ],
        },
        "category": "Conference Room",
        "tags": ["Template", "Conference", "Basic"],
        "is_template": True,
    },
]


async def seed_database(settings: Settings) -> None:
    database = Database(settings.database_url, echo=settings.database_echo)
    await database.connect(create_schema=True)

    try:
        async with database.session() as session:
            for model in (DiagramModel, DocumentModel, UserModel):
                await session.execute(delete(model))
            await session.commit()
            logger.info("Cleared existing data")

            admin = await UserRepository(session).create(User.create_user(
                email=settings.seed_admin_email,
                username=settings.seed_admin_username,
                password=settings.seed_admin_password,
                role=Role.ADMIN
            ))
            logger.info(f"Created admin user {admin.email}")

            principal = admin.to_principal()
            for payload in SAMPLE_DOCUMENTS:
                await DocumentService(session).create_document(DocumentCreate(**payload), principal)
            for payload in SAMPLE_DIAGRAMS:
                await DiagramService(session).create_diagram(DiagramCreate(**payload), principal)

            logger.info(f"Created {len(SAMPLE_DOCUMENTS)} documents and {len(SAMPLE_DIAGRAMS)} diagrams")
    finally:
        await database.disconnect()


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    asyncio.run(seed_database(settings))


if __name__ == "__main__":
    main()
