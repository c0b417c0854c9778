"""Auth Routes — /api/auth/register and /api/auth/login."""

from datetime import timedelta

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.config import get_settings
from store_api.core.messages import USER_REGISTERED
from store_api.infrastructure.database import get_db
from store_api.schemas.auth import (
    LoginPayload, LoginResponse, MessageResponse, RegisterPayload,
)
from store_api.services.handle_auth import AuthHandlers

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _handlers(db: AsyncSession) -> AuthHandlers:
    settings = get_settings()
    return AuthHandlers(
        db,
        secret=settings.access_token_secret,
        token_ttl=timedelta(minutes=settings.access_token_expire_minutes),
    )


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterPayload | None = None, db: AsyncSession = Depends(get_db),
):
    await _handlers(db).register(body or RegisterPayload())
    return MessageResponse(message=USER_REGISTERED)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginPayload | None = None, db: AsyncSession = Depends(get_db),
):
    return await _handlers(db).login(body or LoginPayload())
