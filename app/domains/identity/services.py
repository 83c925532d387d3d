import logging
from typing import List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import NotFound, PrincipalNotFound, Unauthenticated
from app.core.security import create_access_token, decode_access_token
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import Principal, Role, User
from app.domains.identity.schemas import UserCreate, UserLogin

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repository = UserRepository(session)

    async def register_user(self, user_data: UserCreate) -> User:
        """Регистрация нового пользователя (всегда viewer)"""
        if await self.user_repository.email_exists(user_data.email):
            raise ValueError("Email already registered")

        if await self.user_repository.username_exists(user_data.username):
            raise ValueError("Username already taken")

        user = User.create_user(
            email=user_data.email,
            username=user_data.username,
            password=user_data.password,
            role=Role.VIEWER
        )

        created = await self.user_repository.create(user)
        logger.info(f"Registered user {created.uuid} ({created.username}) with role {created.role}")
        return created

    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = await self.user_repository.get_by_email(login_data.email)

        if not user or not user.authenticate(login_data.password):
            return None

        return user

    async def login_user(self, login_data: UserLogin) -> Optional[tuple]:
        """Вход пользователя и создание JWT токена"""
        user = await self.authenticate_user(login_data)

        if not user:
            logger.warning(f"Failed login attempt for {login_data.email}")
            return None

        return self.issue_token(user), user

    def issue_token(self, user: User) -> str:
        token_data = {
            "sub": str(user.uuid),
            "username": user.username,
        }
        return create_access_token(token_data, self.settings)

    async def resolve_principal(self, token: str) -> Principal:
        """Токен -> аутентифицированный участник.

        Unauthenticated: токен не читается, подделан или просрочен.
        PrincipalNotFound: токен валиден, но пользователя больше нет.
        """
        try:
            payload = decode_access_token(token, self.settings)
        except Unauthenticated as e:
            logger.warning(f"Rejected token: {e.message}")
            raise

        try:
            user_uuid = uuid.UUID(str(payload.get("sub")))
        except ValueError:
            logger.warning("Rejected token: malformed subject")
            raise Unauthenticated()

        user = await self.user_repository.get_by_uuid(user_uuid)
        if user is None:
            logger.warning(f"Rejected token: user {user_uuid} no longer exists")
            raise PrincipalNotFound()

        principal = user.to_principal()
        if principal.role is None:
            logger.warning(f"User {user.uuid} has unrecognized role {user.role!r}; no permissions granted")
        return principal

    async def get_user_by_uuid(self, user_uuid: uuid.UUID) -> Optional[User]:
        """Получение пользователя по UUID"""
        return await self.user_repository.get_by_uuid(user_uuid)

    async def assign_role(self, user_uuid: uuid.UUID, role: Role) -> User:
        """Назначение роли пользователю"""
        user = await self.user_repository.get_by_uuid(user_uuid)

        if not user:
            raise NotFound("User not found")

        user.assign_role(role)
        updated = await self.user_repository.update(user)
        logger.info(f"User {user_uuid} now has role {role.value}")
        return updated

    async def list_users(self) -> List[User]:
        """Получение списка пользователей"""
        return await self.user_repository.get_all()
