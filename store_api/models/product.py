"""Product ORM — sellable item belonging to exactly one Category.

Invariants:
    - category_id is required and must reference an existing category
    - currency defaults to "USD", quantity to 0, active to true
    - price is a fixed-point decimal (Numeric(10, 2))

Design Decisions:
    - category relationship loaded with selectin: product reads embed {id, name}
      without a lazy load in async context
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean, DateTime, ForeignKey, Integer, Numeric, String, Text, func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_api.core.domain_types import (
    DEFAULT_ACTIVE, DEFAULT_CURRENCY, DEFAULT_QUANTITY,
)
from store_api.db.base import Base


class Product(Base):
    """Product entity."""
    __tablename__ = "product"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, default=DEFAULT_CURRENCY,
    )
    quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=DEFAULT_QUANTITY,
    )
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=DEFAULT_ACTIVE,
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("category.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
    updated_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )

    category: Mapped["Category"] = relationship(
        "Category", lazy="selectin",
    )
