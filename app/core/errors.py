"""Таксономия ошибок хранилища записей и их отображение в HTTP-ответы."""

import logging
from dataclasses import dataclass, asdict
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


class RecordStoreError(Exception):
    """Базовая ошибка, которую можно вернуть клиенту"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationError(RecordStoreError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class Unauthenticated(AuthenticationError):
    """Токен отсутствует, поврежден или просрочен"""
    default_message = "Invalid or expired token"


class PrincipalNotFound(AuthenticationError):
    """Токен валиден, но пользователь больше не существует"""
    default_message = "User not found"


class AccessDenied(RecordStoreError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied. Insufficient permissions."


class ValidationFailed(RecordStoreError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, violations: List[FieldViolation], message: Optional[str] = None):
        super().__init__(message)
        self.violations = list(violations)


class NotFound(RecordStoreError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class VersionConflict(RecordStoreError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Record was modified by another request"

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Version mismatch: expected {expected}, current is {actual}")
        self.expected = expected
        self.actual = actual


class StorageUnavailable(RecordStoreError):
    pass


def error_response(exc: RecordStoreError) -> JSONResponse:
    body = {"error": exc.message}
    headers = None

    if isinstance(exc, ValidationFailed):
        body["errors"] = [asdict(v) for v in exc.violations]
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    if isinstance(exc, VersionConflict):
        body["currentVersion"] = exc.actual

    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


async def record_store_error_handler(request: Request, exc: RecordStoreError) -> JSONResponse:
    if isinstance(exc, StorageUnavailable):
        logger.error(f"Storage unavailable on {request.method} {request.url.path}: {exc.message}")
        return error_response(StorageUnavailable())
    return error_response(exc)


def _wire_name(part) -> str:
    # Ошибки значений по умолчанию приходят с именем поля, а не с алиасом
    part = str(part)
    return to_camel(part) if "_" in part else part


def _error_message(error: dict) -> str:
    # ValueError из field_validator: без префикса "Value error, "
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error.get("msg", "Invalid value")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = []
    for error in exc.errors():
        # loc: ("body", "title") / ("query", "tags") / ("path", ...)
        loc = [_wire_name(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
        violations.append(FieldViolation(field=".".join(loc) or "body", message=_error_message(error)))
    return error_response(ValidationFailed(violations))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(StorageUnavailable())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Storage failure on {request.method} {request.url.path}", exc_info=exc)
    return error_response(StorageUnavailable())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordStoreError, record_store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
