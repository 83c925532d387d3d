from app.db.repositories.user_repository import UserRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.diagram_repository import DiagramRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "DiagramRepository"
]
