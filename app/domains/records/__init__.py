from app.domains.records.entities import AuthorSummary
from app.domains.records.query import RecordQuery
from app.domains.records.validation import Trimmed, TagList, reject_null, is_empty_graph, parse_expected_version
from app.domains.records.versioning import (
    INITIAL_VERSION, stamp_created, stamp_updated, check_expected_version, utcnow
)

__all__ = [
    "AuthorSummary", "RecordQuery",
    "Trimmed", "TagList", "reject_null", "is_empty_graph", "parse_expected_version",
    "INITIAL_VERSION", "stamp_created", "stamp_updated", "check_expected_version", "utcnow"
]
