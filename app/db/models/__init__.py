from app.db.models.user import User
from app.db.models.document import Document
from app.db.models.diagram import Diagram

__all__ = [
    "User",
    "Document",
    "Diagram"
]
