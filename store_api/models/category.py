"""Category ORM — named product grouping.

Invariants:
    - name is globally unique
    - created_date/updated_date are set by the database; updates bump updated_date
    - Cannot be deleted while a Product references it (FK RESTRICT on product.category_id)
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from store_api.db.base import Base


class Category(Base):
    """Category entity — referenced by products."""
    __tablename__ = "category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
    updated_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
