"""
Irenet Backend — Request SQLAlchemy Model
=========================================

What:  ORM model for the `requests` table: an item need posted by an
       organization.

The class is named ItemRequest so it never collides with Starlette's
Request inside route modules. Status behaves exactly like Donation.status:
'open' on creation, 'matched' after match creation, otherwise free text.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from irenet.database import Base


class RequestStatus:
    """Conventional request status values. Not enforced."""

    OPEN = "open"
    MATCHED = "matched"


class ItemRequest(Base):
    """An item need an organization posts."""

    __tablename__ = "requests"

    request_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    org_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("organizations.org_id"), nullable=False, index=True
    )
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=RequestStatus.OPEN,
        server_default=text(f"'{RequestStatus.OPEN}'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_requests_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<ItemRequest(request_id={self.request_id}, item_name='{self.item_name}', "
            f"status='{self.status}')>"
        )
