"""Error Hierarchy — tagged exceptions for every Store API failure mode.

Invariants:
    - Every error carries a kind (ErrorKind), a code (str) and a human-readable message
    - status_for() is the only place an ErrorKind becomes an HTTP status
    - to_response() always produces {"message": str}, success bodies never do

Design Decisions:
    - Single hierarchy with StoreError base: one FastAPI handler renders all of them (ADR: uniform error shape)
    - Kind tag instead of an optional status attribute: the normalizer matches it exhaustively
    - Raw messages for internal errors are exposed to clients (ADR: wire compatibility
      with existing API consumers, not a recommendation)
"""

from enum import Enum

from store_api.core.messages import (
    invalid_fields_message,
    missing_fields_message,
)


class ErrorKind(str, Enum):
    """Failure classes, each mapped to exactly one HTTP status."""
    VALIDATION = "validation"
    UNPROCESSABLE = "unprocessable"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


def status_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    match kind:
        case ErrorKind.VALIDATION:
            return 400
        case ErrorKind.UNAUTHORIZED:
            return 401
        case ErrorKind.NOT_FOUND:
            return 404
        case ErrorKind.CONFLICT:
            return 409
        case ErrorKind.UNPROCESSABLE:
            return 422
        case ErrorKind.INTERNAL:
            return 500
    raise ValueError(f"Unknown error kind: {kind!r}")


class StoreError(Exception):
    """Base exception for all Store API errors."""

    def __init__(self, message: str, kind: ErrorKind, code: str):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.code = code

    @property
    def http_status(self) -> int:
        return status_for(self.kind)

    def to_response(self) -> dict:
        """Convert to the client-facing error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidParameterError(StoreError):
    """Path parameter could not be coerced to a non-negative integer."""
    def __init__(self, message: str = "Invalid ID parameter."):
        super().__init__(message, ErrorKind.VALIDATION, "INVALID_PARAMETER")


class MissingFieldsError(StoreError):
    """Required body fields were absent, null or blank."""
    def __init__(
        self, fields: list[str], kind: ErrorKind = ErrorKind.UNPROCESSABLE,
    ):
        super().__init__(missing_fields_message(fields), kind, "MISSING_FIELDS")
        self.fields = fields


class InvalidBodyError(StoreError):
    """Request body was not valid JSON or had wrongly typed fields."""
    def __init__(self, fields: list[str] | None = None, malformed: bool = False):
        if malformed:
            message = "Malformed JSON body."
        elif fields:
            message = invalid_fields_message(fields)
        else:
            message = "Invalid request data."
        super().__init__(message, ErrorKind.UNPROCESSABLE, "INVALID_BODY")
        self.fields = fields or []


class AuthError(StoreError):
    """Credentials or access token rejected."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.UNAUTHORIZED, "UNAUTHORIZED")


class NotFoundError(StoreError):
    """Requested entity does not exist."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NOT_FOUND, "NOT_FOUND")


class ConflictError(StoreError):
    """Uniqueness or reference rule would be violated."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.CONFLICT, "CONFLICT")


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(StoreError):
    """Anything unanticipated: database failures, bugs."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INTERNAL, "INTERNAL_ERROR")

    @classmethod
    def wrap(cls, exc: BaseException) -> "InternalError":
        """Wrap an arbitrary exception, keeping its raw message."""
        return cls(str(exc) or exc.__class__.__name__)
