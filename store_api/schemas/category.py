"""Category Schemas — request payload and response shapes.

Invariants:
    - CategoryPayload fields are optional: missing-field wording is decided by core.validation
    - Responses are built from ORM rows (from_attributes)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CategoryPayload(BaseModel):
    """Create/update body."""
    name: str | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_date: datetime
    updated_date: datetime


class CategoryRef(BaseModel):
    """Category as embedded in product reads."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
