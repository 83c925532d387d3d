"""Политика доступа: чистая функция (роль, операция) -> разрешено/запрещено.

Решение не зависит от конкретной записи: авторство информационное,
любой editor/admin может менять любую запись.
"""

import enum
import logging
from typing import Dict, FrozenSet, Optional

from app.core.errors import AccessDenied
from app.domains.identity.entities import Principal, Role

logger = logging.getLogger(__name__)


class Operation(str, enum.Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    DUPLICATE = "duplicate"
    MANAGE_USERS = "manage_users"


_WRITE = frozenset({Operation.CREATE, Operation.UPDATE, Operation.DELETE, Operation.DUPLICATE})

PERMISSIONS: Dict[Role, FrozenSet[Operation]] = {
    Role.VIEWER: frozenset({Operation.READ}),
    Role.EDITOR: frozenset({Operation.READ}) | _WRITE,
    Role.ADMIN: frozenset(Operation),
}


def _check_table_is_total() -> None:
    missing = [role.value for role in Role if role not in PERMISSIONS]
    if missing:
        raise RuntimeError(f"Access policy has no row for roles: {', '.join(missing)}")
    for role, operations in PERMISSIONS.items():
        unknown = [op for op in operations if not isinstance(op, Operation)]
        if unknown:
            raise RuntimeError(f"Access policy row {role.value} has unknown operations: {unknown}")


_check_table_is_total()


def is_allowed(role: Optional[Role], operation: Operation) -> bool:
    # Неизвестная роль (None) не имеет прав, включая чтение
    if role is None:
        return False
    return operation in PERMISSIONS[role]


def authorize(principal: Principal, operation: Operation) -> Principal:
    """Проверка прав; при отказе поднимает AccessDenied"""
    if not is_allowed(principal.role, operation):
        role = principal.role.value if principal.role else "unknown"
        logger.warning(f"Access denied: user {principal.user_id} (role={role}) attempted {operation.value}")
        raise AccessDenied()
    return principal
