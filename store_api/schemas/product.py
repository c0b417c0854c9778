"""Product Schemas — request payload, stored-row and read shapes.

Invariants:
    - ProductPayload fields are optional so required-field checks can list every missing one
    - ProductRow mirrors the table (category_id); ProductDetail embeds category {id, name}

Design Decisions:
    - Two response shapes: writes return the stored row, reads return the joined view
    - Decimal price serializes as a string, so clients never see float rounding
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from store_api.schemas.category import CategoryRef


class ProductPayload(BaseModel):
    """Create/update body. Create requires name, price, category_id; update requires all."""
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    currency: str | None = None
    quantity: int | None = None
    active: bool | None = None
    category_id: int | None = None


class ProductRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    price: Decimal
    currency: str
    quantity: int
    active: bool
    category_id: int
    created_date: datetime
    updated_date: datetime


class ProductDetail(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    price: Decimal
    currency: str
    quantity: int
    active: bool
    created_date: datetime
    updated_date: datetime
    category: CategoryRef | None
