"""Pydantic schemas for the organizations resource."""

from typing import List, Optional

from pydantic import BaseModel


class OrganizationCreate(BaseModel):
    """POST /api/organizations body. `user_id` and `org_name` are required."""
    user_id: Optional[int] = None
    org_name: Optional[str] = None
    contact_info: Optional[str] = None


class OrganizationOut(BaseModel):
    """An organization joined with its owning user."""
    org_id: int
    org_name: str
    contact_info: Optional[str] = None
    user_name: str
    email: str


class OrganizationListResponse(BaseModel):
    success: bool = True
    data: List[OrganizationOut]


class OrganizationCreated(BaseModel):
    success: bool = True
    org_id: int
