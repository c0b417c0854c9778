"""User ORM — registered account with a bcrypt-hashed password.

Invariants:
    - email is unique (database constraint, backs the register precondition)
    - password holds a bcrypt hash, never plaintext
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from store_api.db.base import Base


class User(Base):
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
