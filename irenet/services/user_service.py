"""
Irenet Backend — User Service
=============================

What:  List, fetch and register users.
Who:   Called by the /api/users route handlers.

Projection:
    Every read selects user_id, name, email and role only. The password
    hash is written on registration and never read back.
"""

import logging
from typing import List, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.exceptions import NotFoundError
from irenet.models.user import User
from irenet.schemas.user import UserCreate, UserOut
from irenet.services.base import require_fields, row_id, storage_error

logger = logging.getLogger(__name__)

_PUBLIC_COLUMNS = (User.user_id, User.name, User.email, User.role)


class UserService:
    """Stateless operations on the users table."""

    async def list_users(self, db: AsyncSession) -> List[UserOut]:
        """All users in storage order. No pagination or filtering."""
        try:
            result = await db.execute(select(*_PUBLIC_COLUMNS))
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise storage_error(e, "list_users")
        return [UserOut.model_validate(dict(row)) for row in rows]

    async def get_user(self, db: AsyncSession, user_id: Union[int, str]) -> UserOut:
        """
        Fetch one user. A non-numeric or out-of-range id is simply absent.

        Raises:
            NotFoundError: no user with this id (→ 404 "User not found")
            DatabaseError: the query failed (→ 500)
        """
        key = row_id(user_id)
        if key is None:
            raise NotFoundError(resource="User", resource_id=user_id)

        try:
            result = await db.execute(
                select(*_PUBLIC_COLUMNS).where(User.user_id == key)
            )
            row = result.mappings().one_or_none()
        except SQLAlchemyError as e:
            raise storage_error(e, "get_user")

        if row is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        return UserOut.model_validate(dict(row))

    async def create_user(self, db: AsyncSession, payload: UserCreate) -> int:
        """
        Register a user and return the generated user_id.

        All four fields must be non-empty. Email format and uniqueness are
        not checked here; a duplicate email fails in storage and comes back
        as a DatabaseError carrying the driver's message.
        """
        require_fields(payload, ("name", "email", "password_hash", "role"))

        user = User(
            name=payload.name,
            email=payload.email,
            password_hash=payload.password_hash,
            role=payload.role,
        )
        try:
            db.add(user)
            await db.flush()  # Assigns user_id; commit happens in get_db_session
        except SQLAlchemyError as e:
            raise storage_error(e, "create_user")

        logger.info("User created: %s (role=%s)", user.user_id, user.role)
        return user.user_id


user_service = UserService()
