"""
Irenet Backend — Donation SQLAlchemy Model
==========================================

What:  ORM model for the `donations` table.

Lifecycle:
    1. Created with status 'available' (or whatever the donor supplied)
    2. Set to 'matched' as a side effect of match creation
    3. Set to any caller-supplied string via PATCH /api/donations/{id}

    There is no validated state machine: `status` is free text and any
    value is reachable from any other.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from irenet.database import Base


class DonationStatus:
    """Conventional donation status values. Not enforced."""

    AVAILABLE = "available"
    MATCHED = "matched"


class Donation(Base):
    """An item a donor offers."""

    __tablename__ = "donations"

    donation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    donor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.user_id"), nullable=False, index=True
    )
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default=DonationStatus.AVAILABLE,
        server_default=text(f"'{DonationStatus.AVAILABLE}'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # GET /api/donations/status/{status} filters on this column
    __table_args__ = (
        Index("idx_donations_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Donation(donation_id={self.donation_id}, item_name='{self.item_name}', "
            f"status='{self.status}')>"
        )
