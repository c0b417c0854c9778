"""Auth & User Schemas — registration/login bodies and public user shapes.

Invariants:
    - No response schema has a password field
    - LoginResponse uses the camelCase accessToken key clients already depend on
"""

from pydantic import BaseModel, ConfigDict


class RegisterPayload(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginPayload(BaseModel):
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """Public view of a user."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class LoginResponse(UserResponse):
    accessToken: str


class MessageResponse(BaseModel):
    message: str
