"""Построение предиката выборки из необязательных фильтров.

Все переданные фильтры объединяются через AND, пропущенные ничего не
ограничивают. Пагинации, лимита и ранжирования нет.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

from sqlalchemy import or_

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Экранирование %, _ и самого escape-символа для LIKE"""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def split_tags(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    return tuple(tag.strip() for tag in raw.split(",") if tag.strip())


@dataclass(frozen=True)
class RecordQuery:
    category: Optional[str] = None
    tags: Tuple[str, ...] = ()
    is_template: Optional[bool] = None
    search: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        category: Optional[str] = None,
        tags: Optional[str] = None,
        is_template: Optional[str] = None,
        search: Optional[str] = None
    ) -> "RecordQuery":
        """Фильтр из query-параметров запроса"""
        return cls(
            category=category or None,
            tags=split_tags(tags),
            # Любое значение, кроме "true", означает false
            is_template=None if is_template is None else is_template == "true",
            search=search or None,
        )

    def conditions(self, model, search_columns: Sequence[str]) -> List[Any]:
        """Условия WHERE для скалярных полей модели"""
        clauses = []

        if self.category:
            clauses.append(model.category == self.category)

        if self.is_template is not None:
            clauses.append(model.is_template == self.is_template)

        if self.search:
            pattern = f"%{escape_like(self.search)}%"
            clauses.append(or_(*[
                getattr(model, column).ilike(pattern, escape=LIKE_ESCAPE)
                for column in search_columns
            ]))

        return clauses

    def accepts(self, record) -> bool:
        """Пересечение тегов (логическое OR) проверяется над загруженной записью"""
        if not self.tags:
            return True
        return any(tag in self.tags for tag in record.tags or ())
