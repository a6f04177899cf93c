"""Pydantic schemas for the users resource."""

from typing import List, Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """POST /api/users body. All four fields are required and checked by UserService."""
    name: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
    role: Optional[str] = None


class UserOut(BaseModel):
    """Public projection of a user: the password hash is never included."""
    user_id: int
    name: str
    email: str
    role: str

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserOut]


class UserResponse(BaseModel):
    success: bool = True
    data: UserOut


class UserCreated(BaseModel):
    success: bool = True
    user_id: int = Field(description="Generated identifier of the new user")
