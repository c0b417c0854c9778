"""User Routes — /api/users listing and the authenticated /api/users/current."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.api.dependencies import ensure_authenticated
from store_api.core.domain_types import UserId
from store_api.infrastructure.database import get_db
from store_api.schemas.auth import UserResponse
from store_api.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).list_users()


@router.get("/current", response_model=UserResponse)
async def current_user(
    user_id: UserId = Depends(ensure_authenticated),
    db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).current_user(user_id)
