"""
Irenet Backend — Match SQLAlchemy Model
=======================================

What:  ORM model for the `matches` join table pairing one donation with one
       request.

There is deliberately no unique constraint on donation_id or request_id:
the same donation can be matched against several requests, and each call
to POST /api/matches adds a new row.
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, text
from sqlalchemy.orm import Mapped, mapped_column

from irenet.database import Base


class Match(Base):
    """A pairing of a donation to a request, dated on creation."""

    __tablename__ = "matches"

    match_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    donation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("donations.donation_id"), nullable=False, index=True
    )
    request_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("requests.request_id"), nullable=False, index=True
    )
    match_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        default=date.today,
        server_default=text("CURRENT_DATE"),
    )

    def __repr__(self) -> str:
        return (
            f"<Match(match_id={self.match_id}, donation_id={self.donation_id}, "
            f"request_id={self.request_id})>"
        )
