"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from store_api.models.user import User  # noqa: F401
from store_api.models.category import Category  # noqa: F401
from store_api.models.product import Product  # noqa: F401
