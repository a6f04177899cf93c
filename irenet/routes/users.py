"""
Irenet Backend — User Route Handlers
====================================

GET  /api/users        all users (no password hashes)
GET  /api/users/{id}   one user, 404 when absent
POST /api/users        register; 400 when any of name, email,
                       password_hash, role is missing
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.database import get_db_session
from irenet.routes.body import parsed_body
from irenet.schemas.common import ErrorResponse
from irenet.schemas.user import UserCreate, UserCreated, UserListResponse, UserResponse
from irenet.services.user_service import user_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get(
    "",
    response_model=UserListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List users",
)
async def list_users(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserListResponse:
    return UserListResponse(data=await user_service.list_users(db))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a user by ID",
)
async def get_user(
    user_id: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserResponse:
    return UserResponse(data=await user_service.get_user(db, user_id))


@router.post(
    "",
    response_model=UserCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Register a user",
)
async def create_user(
    payload: UserCreate = Depends(parsed_body(UserCreate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserCreated:
    user_id = await user_service.create_user(db, payload)
    return UserCreated(user_id=user_id)
