from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.db import get_db
from app.core.errors import Unauthenticated
from app.domains.access.policy import Operation, authorize
from app.domains.identity.entities import Principal
from app.domains.identity.services import IdentityService

# auto_error=False: отсутствие заголовка - наш Unauthenticated, а не 403 FastAPI
bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_identity_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
) -> IdentityService:
    return IdentityService(db, settings)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    identity_service: IdentityService = Depends(get_identity_service)
) -> Principal:
    """Зависимость для получения текущего участника"""
    if credentials is None:
        raise Unauthenticated("No authentication token provided")

    return await identity_service.resolve_principal(credentials.credentials)


def require(operation: Operation):
    """Зависимость: участник, которому политика разрешает операцию"""

    async def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        return authorize(principal, operation)

    return dependency
