"""
Irenet Backend — Match Schemas
==============================

MatchOut is the denormalized view returned by GET /api/matches: the match
row itself plus item names from both sides, the donor's name and the
organization's name.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class MatchCreate(BaseModel):
    """POST /api/matches body. Both identifiers are required."""
    donation_id: Optional[int] = None
    request_id: Optional[int] = None


class MatchOut(BaseModel):
    match_id: int
    donation_id: int
    request_id: int
    match_date: date
    donation_item: str = Field(description="item_name of the matched donation")
    donor_id: int
    request_item: str = Field(description="item_name of the matched request")
    org_id: int
    donor_name: str
    org_name: str


class MatchListResponse(BaseModel):
    success: bool = True
    data: List[MatchOut]


class MatchCreated(BaseModel):
    success: bool = True
    match_id: int
