"""Domain Types — identity wrappers and fixed constants of the store domain.

Invariants:
    - UserId, CategoryId, ProductId wrap database integer keys
    - Token subject and lifetime are fixed, not configurable per request

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from datetime import timedelta
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
ProductId = NewType("ProductId", int)


# ─── Constants ───────────────────────────────────────────────────

TOKEN_SUBJECT = "accessApi"
TOKEN_ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(hours=1)
BCRYPT_ROUNDS = 10

DEFAULT_CURRENCY = "USD"
DEFAULT_QUANTITY = 0
DEFAULT_ACTIVE = True
