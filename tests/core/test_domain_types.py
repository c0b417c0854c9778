"""Domain Types — identity wrappers and fixed constants.

Tests:
    - NewType wrappers are transparent ints
    - Token and product defaults hold their documented values
"""

from datetime import timedelta

from store_api.core.domain_types import (
    ACCESS_TOKEN_TTL, BCRYPT_ROUNDS, DEFAULT_ACTIVE, DEFAULT_CURRENCY,
    DEFAULT_QUANTITY, TOKEN_SUBJECT, CategoryId, ProductId, UserId,
)
from store_api.core.validation import parse_id


def test_identity_types_wrap_parsed_ids():
    assert CategoryId(parse_id("3")) == 3
    assert ProductId(parse_id("+7")) == 7
    assert UserId(1) == 1


def test_token_constants():
    assert TOKEN_SUBJECT == "accessApi"
    assert ACCESS_TOKEN_TTL == timedelta(hours=1)
    assert BCRYPT_ROUNDS == 10


def test_product_defaults():
    assert (DEFAULT_CURRENCY, DEFAULT_QUANTITY, DEFAULT_ACTIVE) == ("USD", 0, True)
