"""Authentication Gate — resolves the caller's user id from the Authorization header.

Invariants:
    - Header absent/empty -> 401 "Access token not found."
    - Any verification failure -> 401 "Access token is invalid or has expired."
    - Stateless: nothing is stored between requests

Design Decisions:
    - The header carries the raw token (existing clients send no scheme); a leading
      "Bearer " is stripped too so standard clients work unchanged
    - APIKeyHeader with auto_error=False: the gate words its own 401, and the
      header still shows up in the OpenAPI docs
"""

import logging

from fastapi import Security
from fastapi.security import APIKeyHeader

from store_api.config import get_settings
from store_api.core.domain_types import UserId
from store_api.core.errors import AuthError
from store_api.core.messages import ACCESS_TOKEN_NOT_FOUND
from store_api.infrastructure.security import verify_token

logger = logging.getLogger(__name__)

authorization_header = APIKeyHeader(name="Authorization", auto_error=False)

BEARER_PREFIX = "Bearer "


def extract_token(header_value: str | None) -> str | None:
    if not header_value or not header_value.strip():
        return None
    token = header_value.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    return token


async def ensure_authenticated(
    header_value: str | None = Security(authorization_header),
) -> UserId:
    """FastAPI dependency: verified user id or AuthError."""
    token = extract_token(header_value)
    if token is None:
        raise AuthError(ACCESS_TOKEN_NOT_FOUND)
    user_id = verify_token(token, get_settings().access_token_secret)
    logger.debug("Authenticated request", extra={"user_id": user_id})
    return user_id
