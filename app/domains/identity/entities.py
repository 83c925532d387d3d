import enum
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.core.security import get_password_hash, verify_password
from app.domains.records.versioning import utcnow


class Role(str, enum.Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Role"]:
        """Роль из строки хранилища; неизвестная строка дает None"""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Principal:
    """Аутентифицированный участник запроса.

    role=None означает роль, неизвестную приложению: политика доступа
    не выдает такой роли никаких прав.
    """
    user_id: uuid.UUID
    username: str
    email: str
    role: Optional[Role]


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        uuid: uuid.UUID,
        email: str,
        username: str,
        password_hash: str,
        role: str = Role.VIEWER.value,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.uuid = uuid
        self.email = email
        self.username = username
        self.password_hash = password_hash
        self.role = role
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def assign_role(self, role: Role) -> None:
        self.role = role.value
        self.updated_at = utcnow()

    def to_principal(self) -> Principal:
        return Principal(
            user_id=self.uuid,
            username=self.username,
            email=self.email,
            role=Role.parse(self.role)
        )

    @classmethod
    def create_user(cls, email: str, username: str, password: str, role: Role = Role.VIEWER) -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            uuid=uuid.uuid4(),
            email=email,
            username=username,
            password_hash=get_password_hash(password),
            role=role.value
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.uuid == other.uuid

    def __repr__(self) -> str:
        return f"User(uuid={self.uuid}, email={self.email}, role={self.role})"
