import uuid

from fastapi import Response

from app.core.errors import NotFound


def parse_record_id(raw: str, kind: str) -> uuid.UUID:
    """Неразбираемый идентификатор ведет себя как отсутствующая запись"""
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise NotFound(f"{kind} not found")


def set_etag(response: Response, version: int) -> None:
    response.headers["ETag"] = f'"{version}"'
