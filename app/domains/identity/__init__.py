from app.domains.identity.entities import Principal, Role, User
from app.domains.identity.schemas import (
    UserBase, UserCreate, UserLogin, RoleUpdate, UserResponse, Token
)

__all__ = [
    "Principal", "Role", "User",
    "UserBase", "UserCreate", "UserLogin", "RoleUpdate", "UserResponse", "Token"
]
