"""Общие правила полей для схем записей и разбор If-Match.

Схемы записей собираются из этих кусков: обрезка строк, запрет null
и проверка "пустого" графа диаграммы.
"""

from typing import Annotated, Any, List, Optional

from pydantic import StringConstraints, ValidationInfo
from pydantic.alias_generators import to_camel

from app.core.errors import FieldViolation, ValidationFailed

# Строка без пробелов по краям
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]
TagList = List[Trimmed]


def reject_null(value: Any, info: ValidationInfo) -> Any:
    """Явный null недопустим: поле либо не передается, либо имеет значение"""
    if value is None:
        raise ValueError(f"{to_camel(info.field_name)} cannot be null")
    return value


def is_empty_graph(value: Any) -> bool:
    # Граф не разбираем: пустым считается только отсутствие данных
    return value is None or value == "" or value == {} or value == []


def parse_expected_version(if_match: Optional[str]) -> Optional[int]:
    """Значение заголовка If-Match -> ожидаемая версия.

    "*" подходит к любой текущей версии, то есть предусловия нет.
    """
    if if_match is None:
        return None
    raw = if_match.strip()
    if raw == "*":
        return None
    if raw.startswith("W/"):
        raw = raw[2:]
    raw = raw.strip('"')
    try:
        version = int(raw)
    except ValueError:
        version = 0
    if version < 1:
        raise ValidationFailed([FieldViolation(field="If-Match", message="If-Match must be a record version")])
    return version
