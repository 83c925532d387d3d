import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthorSummary:
    """Автор записи в том виде, в котором он отдается клиенту"""
    id: uuid.UUID
    username: str
    email: str

    @classmethod
    def from_principal(cls, principal) -> "AuthorSummary":
        return cls(id=principal.user_id, username=principal.username, email=principal.email)
