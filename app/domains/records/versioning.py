"""Учет версий и временных меток записей.

Отдельного хранилища нет: это дисциплина, которую соблюдает хранилище
записей. Создание (в том числе дублирование) начинает линию версий с 1,
каждое успешное обновление увеличивает версию ровно на 1.
"""

from datetime import datetime, timezone
from typing import Optional

from app.core.errors import VersionConflict

INITIAL_VERSION = 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite теряет tzinfo; считаем такие значения UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def stamp_created(record, now: Optional[datetime] = None) -> None:
    now = now or utcnow()
    record.version = INITIAL_VERSION
    record.created_at = now
    record.updated_at = now


def stamp_updated(record, now: Optional[datetime] = None) -> None:
    now = now or utcnow()
    record.version += 1
    # updated_at >= created_at даже при скачке часов назад
    record.updated_at = max(now, as_utc(record.created_at))


def check_expected_version(record, expected: Optional[int]) -> None:
    """Проверка предусловия If-Match; None означает last-write-wins"""
    if expected is not None and record.version != expected:
        raise VersionConflict(expected=expected, actual=record.version)
