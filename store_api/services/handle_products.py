"""Product Handlers — list, get, list by category, create, update, delete.

Invariants:
    - Create requires name, price, category ID (422); update requires every field (400)
    - Referenced category must exist before any write (404, no row touched)
    - Create defaults: currency "USD", quantity 0, active true; explicit false/0 honored
    - Reads embed the owning category as {id, name}

Design Decisions:
    - Update is a single UPDATE ... RETURNING: zero rows returned means the product is gone
    - FK violation on write (category deleted after the existence check) reported
      as the same 404 the check would have produced
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.domain_types import (
    DEFAULT_ACTIVE, DEFAULT_CURRENCY, DEFAULT_QUANTITY, CategoryId, ProductId,
)
from store_api.core.errors import ErrorKind, NotFoundError
from store_api.core.messages import not_found_message
from store_api.core.validation import is_missing, parse_id, require_fields
from store_api.models.product import Product
from store_api.schemas.product import ProductPayload
from store_api.services.handle_categories import category_exists

logger = logging.getLogger(__name__)

CREATE_FIELDS = (
    ("name", "name"),
    ("price", "price"),
    ("category_id", "category ID"),
)
UPDATE_FIELDS = (
    ("name", "name"),
    ("description", "description"),
    ("price", "price"),
    ("currency", "currency"),
    ("quantity", "quantity"),
    ("active", "active"),
    ("category_id", "category ID"),
)


class ProductHandlers:
    """CRUD handlers for products."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self) -> list[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def get_product(self, raw_id: str) -> Product:
        product_id = ProductId(parse_id(raw_id))
        result = await self.db.execute(
            select(Product).where(Product.id == product_id),
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundError(not_found_message("Product", product_id))
        return product

    async def list_by_category(self, raw_category_id: str) -> list[Product]:
        category_id = CategoryId(
            parse_id(raw_category_id, "Invalid category ID parameter."),
        )
        await self._ensure_category(category_id)
        result = await self.db.execute(
            select(Product)
            .where(Product.category_id == category_id)
            .order_by(Product.id)
        )
        return list(result.scalars().all())

    async def create_product(self, payload: ProductPayload) -> Product:
        require_fields(payload, CREATE_FIELDS)
        await self._ensure_category(payload.category_id)

        product = Product(
            name=payload.name,
            description=payload.description,
            price=payload.price,
            currency=_or_default(payload.currency, DEFAULT_CURRENCY),
            quantity=_or_default(payload.quantity, DEFAULT_QUANTITY),
            active=_or_default(payload.active, DEFAULT_ACTIVE),
            category_id=payload.category_id,
        )
        self.db.add(product)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise NotFoundError(
                not_found_message("Category", payload.category_id),
            )
        await self.db.refresh(product)
        await self.db.commit()
        logger.info(f"Product {product.id} created")
        return product

    async def update_product(
        self, raw_id: str, payload: ProductPayload,
    ) -> Product:
        product_id = ProductId(parse_id(raw_id))
        require_fields(payload, UPDATE_FIELDS, kind=ErrorKind.VALIDATION)
        await self._ensure_category(payload.category_id)

        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(
                name=payload.name,
                description=payload.description,
                price=payload.price,
                currency=payload.currency,
                quantity=payload.quantity,
                active=payload.active,
                category_id=payload.category_id,
                updated_date=func.now(),
            )
            .returning(Product)
        )
        try:
            product = (await self.db.execute(stmt)).scalar_one_or_none()
        except IntegrityError:
            await self.db.rollback()
            raise NotFoundError(
                not_found_message("Category", payload.category_id),
            )
        if product is None:
            raise NotFoundError(not_found_message("Product", product_id))
        await self.db.commit()
        logger.info(f"Product {product_id} updated")
        return product

    async def delete_product(self, raw_id: str) -> None:
        product_id = ProductId(parse_id(raw_id))
        result = await self.db.execute(
            delete(Product).where(Product.id == product_id),
        )
        if not result.rowcount:
            raise NotFoundError(not_found_message("Product", product_id))
        await self.db.commit()
        logger.info(f"Product {product_id} deleted")

    async def _ensure_category(self, category_id: CategoryId) -> None:
        if not await category_exists(self.db, category_id):
            raise NotFoundError(not_found_message("Category", category_id))


def _or_default(value, default):
    return default if is_missing(value) else value
