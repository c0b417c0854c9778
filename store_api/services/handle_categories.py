"""Category Handlers — list, get, create, update, delete.

Invariants:
    - Check order: id coercion (400) -> required fields (422) -> preconditions (409) -> mutation (404)
    - Name uniqueness checked against every category, the updated one included
    - Delete refused while any product references the category
    - Every write commits once; nothing is committed when a check fails

Design Decisions:
    - Precondition reads produce the client message; the UNIQUE/FK constraints catch
      the race between read and write, translated to the same ConflictError
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.domain_types import CategoryId
from store_api.core.errors import ConflictError, NotFoundError
from store_api.core.messages import (
    category_exists_message,
    category_in_use_message,
    not_found_message,
)
from store_api.core.validation import parse_id, require_fields
from store_api.models.category import Category
from store_api.models.product import Product
from store_api.schemas.category import CategoryPayload

logger = logging.getLogger(__name__)

CATEGORY_FIELDS = (("name", "name"),)


async def category_exists(db: AsyncSession, category_id: CategoryId) -> bool:
    """Shared with product handlers."""
    found = await db.scalar(
        select(Category.id).where(Category.id == category_id),
    )
    return found is not None


class CategoryHandlers:
    """CRUD handlers for categories."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_categories(self) -> list[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def get_category(self, raw_id: str) -> Category:
        category_id = CategoryId(parse_id(raw_id))
        category = await self.db.get(Category, category_id)
        if category is None:
            raise NotFoundError(not_found_message("Category", category_id))
        return category

    async def create_category(self, payload: CategoryPayload) -> Category:
        require_fields(payload, CATEGORY_FIELDS)
        await self._ensure_name_free(payload.name)

        category = Category(name=payload.name)
        self.db.add(category)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(category_exists_message(payload.name))
        await self.db.refresh(category)
        await self.db.commit()
        logger.info(f"Category {category.id} created")
        return category

    async def update_category(
        self, raw_id: str, payload: CategoryPayload,
    ) -> Category:
        category_id = CategoryId(parse_id(raw_id))
        require_fields(payload, CATEGORY_FIELDS)
        await self._ensure_name_free(payload.name)

        stmt = (
            update(Category)
            .where(Category.id == category_id)
            .values(name=payload.name, updated_date=func.now())
            .returning(Category)
        )
        try:
            category = (await self.db.execute(stmt)).scalar_one_or_none()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(category_exists_message(payload.name))
        if category is None:
            raise NotFoundError(not_found_message("Category", category_id))
        await self.db.commit()
        logger.info(f"Category {category_id} updated")
        return category

    async def delete_category(self, raw_id: str) -> None:
        category_id = CategoryId(parse_id(raw_id))
        in_use = await self._count_products(category_id)
        if in_use:
            raise ConflictError(category_in_use_message(category_id, in_use))

        try:
            result = await self.db.execute(
                delete(Category).where(Category.id == category_id),
            )
        except IntegrityError:
            # A product was attached after the count above
            await self.db.rollback()
            in_use = await self._count_products(category_id)
            raise ConflictError(category_in_use_message(category_id, in_use))
        if not result.rowcount:
            raise NotFoundError(not_found_message("Category", category_id))
        await self.db.commit()
        logger.info(f"Category {category_id} deleted")

    async def _ensure_name_free(self, name: str) -> None:
        taken = await self.db.scalar(
            select(Category.id).where(Category.name == name).limit(1),
        )
        if taken is not None:
            raise ConflictError(category_exists_message(name))

    async def _count_products(self, category_id: CategoryId) -> int:
        count = await self.db.scalar(
            select(func.count())
            .select_from(Product)
            .where(Product.category_id == category_id),
        )
        return count or 0
