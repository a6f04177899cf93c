"""
Irenet Backend — Donation Schemas
=================================

Listing rows are every donation column plus the donor's name and email,
taken from an inner join on users.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class DonationCreate(BaseModel):
    """
    POST /api/donations body.

    donor_id, item_name, category and quantity are required (falsy counts as
    missing). An absent or empty status becomes 'available'.
    """
    donor_id: Optional[int] = None
    item_name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    status: Optional[str] = None


class DonationOut(BaseModel):
    donation_id: int
    donor_id: int
    item_name: str
    category: str
    quantity: int
    status: str
    created_at: Optional[datetime] = None
    donor_name: str = Field(description="Name of the donating user")
    donor_email: Optional[str] = None


class DonationListResponse(BaseModel):
    success: bool = True
    data: List[DonationOut]


class DonationCreated(BaseModel):
    success: bool = True
    donation_id: int
