"""
Irenet Backend — User SQLAlchemy Model
======================================

What:  ORM model for the `users` table.
Who:   Donors, organization owners and operators all live here; `role` is a
       free-text tag and is not validated.

The password hash is stored but never selected by the API projections.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from irenet.database import Base


class User(Base):
    """A registered identity. Created via registration; never deleted."""

    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Uniqueness is enforced by storage only; a duplicate surfaces as a DatabaseError
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, email='{self.email}', role='{self.role}')>"
