"""Pydantic schemas for the requests resource (mirrors donation.py)."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class RequestCreate(BaseModel):
    """
    POST /api/requests body.

    org_id, item_name, category and quantity are required; an absent or
    empty status becomes 'open'.
    """
    org_id: Optional[int] = None
    item_name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    status: Optional[str] = None


class RequestOut(BaseModel):
    request_id: int
    org_id: int
    item_name: str
    category: str
    quantity: int
    status: str
    created_at: Optional[datetime] = None
    org_name: str
    contact_info: Optional[str] = None


class RequestListResponse(BaseModel):
    success: bool = True
    data: List[RequestOut]


class RequestCreated(BaseModel):
    success: bool = True
    request_id: int
