"""Input Validation — identifier coercion and required-field checks shared by all handlers.

Invariants:
    - parse_id runs before any database access and accepts only ASCII digits
      (optionally signed with "+"), so "1_0", "1e3" or non-Latin digits are rejected
    - A field is missing when absent, None, or a blank string; 0 and False are values
    - Missing fields are reported in declaration order, all at once

Design Decisions:
    - Pure functions raising domain errors: handlers stay a flat sequence of checks
    - Request schemas keep every field optional so these checks (not Pydantic)
      decide which fields are missing and word the message
"""

import re
from typing import Any, Sequence

from store_api.core.errors import (
    ErrorKind,
    InvalidParameterError,
    MissingFieldsError,
)

# (attribute name, label used in the error message)
FieldSpec = Sequence[tuple[str, str]]

ID_PATTERN = re.compile(r"\+?[0-9]+")


def parse_id(raw: str, message: str = "Invalid ID parameter.") -> int:
    """Coerce a path segment to a non-negative integer or raise 400."""
    if not isinstance(raw, str) or not ID_PATTERN.fullmatch(raw.strip()):
        raise InvalidParameterError(message)
    return int(raw.strip())


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def find_missing_fields(payload: Any, fields: FieldSpec) -> list[str]:
    """Labels of every required field the payload lacks."""
    return [
        label for attr, label in fields
        if is_missing(getattr(payload, attr, None))
    ]


def require_fields(
    payload: Any,
    fields: FieldSpec,
    kind: ErrorKind = ErrorKind.UNPROCESSABLE,
) -> None:
    """Raise MissingFieldsError listing every missing field, if any."""
    missing = find_missing_fields(payload, fields)
    if missing:
        raise MissingFieldsError(missing, kind)
