from app.domains.diagrams.entities import Diagram
from app.domains.diagrams.schemas import (
    DiagramCreate, DiagramUpdate, DiagramResponse, DiagramEnvelope,
    DiagramMessageEnvelope, DiagramListResponse
)

__all__ = [
    "Diagram",
    "DiagramCreate", "DiagramUpdate", "DiagramResponse", "DiagramEnvelope",
    "DiagramMessageEnvelope", "DiagramListResponse"
]
