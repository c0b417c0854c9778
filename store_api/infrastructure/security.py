"""Credential Service — bcrypt password hashing and JWT access tokens.

Invariants:
    - Passwords hashed with bcrypt at a fixed work factor (10 rounds)
    - Tokens carry userId, sub="accessApi", iat, exp; signed HS256 with the server secret
    - verify_token fails uniformly: every rejection raises the same AuthError message

Design Decisions:
    - passlib CryptContext + python-jose: same pairing the login flow used before
    - Secret passed in by the caller (from Settings): module has no import-time env reads
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from store_api.core.domain_types import (
    ACCESS_TOKEN_TTL, BCRYPT_ROUNDS, TOKEN_ALGORITHM, TOKEN_SUBJECT, UserId,
)
from store_api.core.errors import AuthError
from store_api.core.messages import ACCESS_TOKEN_INVALID

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def issue_token(
    user_id: int,
    secret: str,
    expires_in: timedelta = ACCESS_TOKEN_TTL,
    now: datetime | None = None,
) -> str:
    """Sign an access token for user_id, valid for expires_in."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "userId": user_id,
        "sub": TOKEN_SUBJECT,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(claims, secret, algorithm=TOKEN_ALGORITHM)


def verify_token(token: str, secret: str) -> UserId:
    """Return the user id a valid token was issued for.

    Raises AuthError for malformed, foreign-signed, expired, wrong-subject
    tokens and for tokens without an integer userId claim.
    """
    try:
        claims = jwt.decode(
            token, secret, algorithms=[TOKEN_ALGORITHM], subject=TOKEN_SUBJECT,
        )
    except JWTError:
        raise AuthError(ACCESS_TOKEN_INVALID)

    user_id = claims.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise AuthError(ACCESS_TOKEN_INVALID)
    return UserId(user_id)
