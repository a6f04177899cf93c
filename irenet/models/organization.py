"""ORM model for the `organizations` table."""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from irenet.database import Base


class Organization(Base):
    """
    An organization that posts requests.

    One organization per owning user by convention; nothing enforces it.
    """

    __tablename__ = "organizations"

    org_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.user_id"), nullable=False, index=True
    )
    org_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_info: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Organization(org_id={self.org_id}, org_name='{self.org_name}')>"
