"""Client Messages — every user-visible error string, built in one place.

Invariants:
    - Singular/plural wording follows the count ("field"/"fields", "product"/"products")
    - Field lists keep caller order and are comma-joined
    - Pure functions only: no IO, no exceptions

Design Decisions:
    - Messages are part of the wire contract: tests assert them verbatim, so they
      live apart from the error classes that carry them
"""

ACCESS_TOKEN_NOT_FOUND = "Access token not found."
ACCESS_TOKEN_INVALID = "Access token is invalid or has expired."
INVALID_CREDENTIALS = "Email or password is invalid."
EMAIL_EXISTS = "Email already exists."
PAGE_NOT_FOUND = "Page not found."
USER_REGISTERED = "User registered successfully."


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Pick the noun form for count."""
    if count == 1:
        return singular
    return plural or f"{singular}s"


def missing_fields_message(fields: list[str]) -> str:
    """'Missing field: name' / 'Missing fields: name, price'."""
    return f"Missing {pluralize(len(fields), 'field')}: {', '.join(fields)}"


def invalid_fields_message(fields: list[str]) -> str:
    return f"Invalid {pluralize(len(fields), 'field')}: {', '.join(fields)}"


def not_found_message(entity: str, entity_id: int) -> str:
    return f"{entity} with an ID of {entity_id} does not exist."


def category_exists_message(name: str) -> str:
    return f"Category '{name}' already exists."


def category_in_use_message(category_id: int, product_count: int) -> str:
    """Delete-blocked message, e.g. 'is being used in 2 products.'"""
    noun = pluralize(product_count, "product")
    return (
        f"Category with an ID of {category_id} "
        f"is being used in {product_count} {noun}."
    )
