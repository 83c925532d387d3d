from typing import List

from fastapi import APIRouter, Depends
import uuid

from app.core.auth import get_identity_service, require
from app.domains.access.policy import Operation
from app.domains.identity.entities import Principal
from app.domains.identity.schemas import RoleUpdate, UserResponse
from app.domains.identity.services import IdentityService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def get_users(
    principal: Principal = Depends(require(Operation.MANAGE_USERS)),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Получение списка пользователей"""
    users = await identity_service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.put("/{user_uuid}/role", response_model=UserResponse)
async def update_user_role(
    user_uuid: uuid.UUID,
    role_data: RoleUpdate,
    principal: Principal = Depends(require(Operation.MANAGE_USERS)),
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Назначение роли пользователю"""
    user = await identity_service.assign_role(user_uuid, role_data.role)
    return UserResponse.model_validate(user)
