"""Service-level tests against a throwaway SQLite database."""

import uuid

import pytest

from app.core.db import Database
from app.core.errors import NotFound, VersionConflict
from app.db.repositories.user_repository import UserRepository
from app.domains.diagrams.schemas import DiagramCreate
from app.domains.diagrams.services import DiagramService
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate
from app.domains.documents.services import DocumentService
from app.domains.identity.entities import Role, User
from app.domains.records.query import RecordQuery


@pytest.fixture
async def database(settings):
    db = Database(settings.database_url)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
async def author(session):
    user = await UserRepository(session).create(User.create_user(
        email="author@example.com",
        username="author",
        password="Secret123",
        role=Role.EDITOR
    ))
    return user.to_principal()


GRAPH = {"nodes": [{"id": "1"}], "edges": []}


async def test_duplicate_survives_source_deleted_after_read(session, author):
    service = DiagramService(session)
    source = await service.create_diagram(DiagramCreate(title="T", diagram_data=GRAPH, is_template=True), author)

    # Copy is built from the record as it was read
    loaded = await service.get_diagram(source.uuid)
    await service.delete_diagram(source.uuid, author)
    copy = loaded.duplicate(author_id=author.user_id)

    assert copy.title == "T (Copy)"
    assert copy.is_template is False
    assert copy.diagram_data == GRAPH
    assert copy.diagram_data is not loaded.diagram_data

    with pytest.raises(NotFound):
        await service.duplicate_diagram(source.uuid, author)


async def test_duplicate_does_not_touch_source(session, author):
    service = DiagramService(session)
    source = await service.create_diagram(DiagramCreate(title="T", diagram_data=GRAPH), author)

    copy = await service.duplicate_diagram(source.uuid, author)

    reloaded = await service.get_diagram(source.uuid)
    assert reloaded.version == 1
    assert reloaded.updated_at == source.updated_at
    assert copy.uuid != source.uuid
    assert copy.author.username == "author"


async def test_update_with_stale_version(session, author):
    service = DocumentService(session)
    document = await service.create_document(DocumentCreate(title="A", content="B"), author)
    await service.update_document(document.uuid, DocumentUpdate(content="C"), author, expected_version=1)

    with pytest.raises(VersionConflict) as exc_info:
        await service.update_document(document.uuid, DocumentUpdate(content="D"), author, expected_version=1)

    assert exc_info.value.actual == 2
    assert (await service.get_document(document.uuid)).content == "C"


async def test_update_of_missing_document(session, author):
    service = DocumentService(session)

    with pytest.raises(NotFound):
        await service.update_document(uuid.uuid4(), DocumentUpdate(title="New"), author)


async def test_updated_at_moves_forward(session, author):
    service = DocumentService(session)
    document = await service.create_document(DocumentCreate(title="A", content="B"), author)

    updated = await service.update_document(document.uuid, DocumentUpdate(tags=["x"]), author)

    assert updated.updated_at >= document.updated_at
    assert updated.created_at == document.created_at


async def test_list_filters(session, author):
    service = DocumentService(session)
    await service.create_document(
        DocumentCreate(title="Dante", content="x", category="Audio", tags=["net"]), author
    )
    await service.create_document(DocumentCreate(title="HDMI", content="x", category="Video"), author)

    everything = await service.list_documents()
    audio = await service.list_documents(RecordQuery.from_params(category="Audio"))
    tagged = await service.list_documents(RecordQuery.from_params(tags="net, other"))

    assert len(everything) == 2
    assert [d.title for d in audio] == ["Dante"]
    assert [d.title for d in tagged] == ["Dante"]
