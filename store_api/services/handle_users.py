"""User Handlers — list users and resolve the authenticated caller."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.domain_types import UserId
from store_api.core.errors import AuthError
from store_api.core.messages import ACCESS_TOKEN_INVALID
from store_api.models.user import User


class UserHandlers:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def current_user(self, user_id: UserId) -> User:
        """User the token was issued for; a deleted user invalidates the token."""
        user = await self.db.get(User, user_id)
        if user is None:
            raise AuthError(ACCESS_TOKEN_INVALID)
        return user
