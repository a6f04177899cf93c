"""Organization listing and creation."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.models.organization import Organization
from irenet.models.user import User
from irenet.schemas.organization import OrganizationCreate, OrganizationOut
from irenet.services.base import require_fields, storage_error

logger = logging.getLogger(__name__)


class OrganizationService:

    async def list_organizations(self, db: AsyncSession) -> List[OrganizationOut]:
        """
        Organizations inner-joined with their owning user.

        An organization whose user_id matches no user is left out.
        """
        query = select(
            Organization.org_id,
            Organization.org_name,
            Organization.contact_info,
            User.name.label("user_name"),
            User.email,
        ).join(User, Organization.user_id == User.user_id)

        try:
            result = await db.execute(query)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise storage_error(e, "list_organizations")
        return [OrganizationOut.model_validate(dict(row)) for row in rows]

    async def create_organization(self, db: AsyncSession, payload: OrganizationCreate) -> int:
        """Requires user_id and org_name; contact_info may be omitted."""
        require_fields(payload, ("user_id", "org_name"))

        org = Organization(
            user_id=payload.user_id,
            org_name=payload.org_name,
            contact_info=payload.contact_info,
        )
        try:
            db.add(org)
            await db.flush()
        except SQLAlchemyError as e:
            raise storage_error(e, "create_organization")

        logger.info("Organization created: %s for user %s", org.org_id, org.user_id)
        return org.org_id


organization_service = OrganizationService()
