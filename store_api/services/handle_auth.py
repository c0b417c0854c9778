"""Auth Handlers — registration and login.

Invariants:
    - Register: required fields (422) -> email uniqueness (409) -> insert with bcrypt hash
    - Login: required fields (422) -> unknown email and wrong password give the same 401 text
    - Passwords never leave this module in plaintext or hashed form

Design Decisions:
    - bcrypt runs in the threadpool: hashing blocks for tens of milliseconds
"""

import logging
from datetime import timedelta

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.errors import AuthError, ConflictError
from store_api.core.messages import EMAIL_EXISTS, INVALID_CREDENTIALS
from store_api.core.validation import require_fields
from store_api.infrastructure.security import (
    hash_password, issue_token, verify_password,
)
from store_api.models.user import User
from store_api.schemas.auth import LoginPayload, LoginResponse, RegisterPayload

logger = logging.getLogger(__name__)

REGISTER_FIELDS = (
    ("name", "name"),
    ("email", "email"),
    ("password", "password"),
)
LOGIN_FIELDS = (
    ("email", "email"),
    ("password", "password"),
)


class AuthHandlers:
    """Registration and credential exchange."""

    def __init__(self, db: AsyncSession, secret: str, token_ttl: timedelta):
        self.db = db
        self.secret = secret
        self.token_ttl = token_ttl

    async def register(self, payload: RegisterPayload) -> User:
        require_fields(payload, REGISTER_FIELDS)
        if await self._find_by_email(payload.email) is not None:
            raise ConflictError(EMAIL_EXISTS)

        hashed = await run_in_threadpool(hash_password, payload.password)
        user = User(name=payload.name, email=payload.email, password=hashed)
        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(EMAIL_EXISTS)
        await self.db.commit()
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def login(self, payload: LoginPayload) -> LoginResponse:
        require_fields(payload, LOGIN_FIELDS)
        user = await self._find_by_email(payload.email)
        if user is None:
            raise AuthError(INVALID_CREDENTIALS)

        matches = await run_in_threadpool(
            verify_password, payload.password, user.password,
        )
        if not matches:
            raise AuthError(INVALID_CREDENTIALS)

        token = issue_token(user.id, self.secret, expires_in=self.token_ttl)
        return LoginResponse(
            id=user.id, name=user.name, email=user.email, accessToken=token,
        )

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
