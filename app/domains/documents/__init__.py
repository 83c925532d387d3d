from app.domains.documents.entities import Document
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentEnvelope,
    DocumentMessageEnvelope, DocumentListResponse
)

__all__ = [
    "Document",
    "DocumentCreate", "DocumentUpdate", "DocumentResponse", "DocumentEnvelope",
    "DocumentMessageEnvelope", "DocumentListResponse"
]
