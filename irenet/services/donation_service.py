"""
Irenet Backend — Donation Service
=================================

What:  List, filter, create and re-status donations.
Who:   Called by the /api/donations route handlers; MatchService sets
       donations to 'matched' through `mark_status`.

Status contract:
    `status` is free text. Filtering is an exact, case-sensitive match, and
    updates accept any non-empty string. An update of a donation that does
    not exist affects zero rows and still reports success.
"""

import logging
from typing import List, Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.models.donation import Donation, DonationStatus
from irenet.models.user import User
from irenet.schemas.common import StatusUpdate
from irenet.schemas.donation import DonationCreate, DonationOut
from irenet.services.base import require_fields, row_id, storage_error

logger = logging.getLogger(__name__)


class DonationService:
    """Stateless operations on the donations table."""

    async def list_donations(
        self,
        db: AsyncSession,
        status: Optional[str] = None,
    ) -> List[DonationOut]:
        """
        Every donation with its donor's name and email.

        Args:
            status: when given, only donations whose status equals it exactly
        """
        query = select(
            Donation,
            User.name.label("donor_name"),
            User.email.label("donor_email"),
        ).join(User, Donation.donor_id == User.user_id)

        if status is not None:
            query = query.where(Donation.status == status)

        try:
            result = await db.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            raise storage_error(e, "list_donations")

        return [
            DonationOut.model_validate(
                {**donation.to_dict(), "donor_name": donor_name, "donor_email": donor_email}
            )
            for donation, donor_name, donor_email in rows
        ]

    async def list_donations_by_status(self, db: AsyncSession, status: str) -> List[DonationOut]:
        """Donations whose status is exactly `status`; unknown values give []."""
        return await self.list_donations(db, status=status)

    async def create_donation(self, db: AsyncSession, payload: DonationCreate) -> int:
        """Insert a donation and return its donation_id. Status defaults to 'available'."""
        require_fields(payload, ("donor_id", "item_name", "category", "quantity"))

        donation = Donation(
            donor_id=payload.donor_id,
            item_name=payload.item_name,
            category=payload.category,
            quantity=payload.quantity,
            status=payload.status or DonationStatus.AVAILABLE,
        )
        try:
            db.add(donation)
            await db.flush()
        except SQLAlchemyError as e:
            raise storage_error(e, "create_donation")

        logger.info(
            "Donation created: %s (%s x%d, status=%s)",
            donation.donation_id, donation.item_name, donation.quantity, donation.status,
        )
        return donation.donation_id

    async def update_status(
        self,
        db: AsyncSession,
        donation_id: Union[int, str],
        payload: StatusUpdate,
    ) -> None:
        """
        Set a donation's status. Requires a non-empty status; no existence
        check, and an id that cannot match a row updates nothing.
        """
        require_fields(payload, ("status",), message="Status is required")
        key = row_id(donation_id)
        if key is None:
            logger.info("Donation %r status -> %s (0 row(s))", donation_id, payload.status)
            return
        await self.mark_status(db, key, payload.status)

    async def mark_status(self, db: AsyncSession, donation_id: int, status: str) -> int:
        """Unconditional UPDATE; returns the number of rows affected."""
        try:
            result = await db.execute(
                update(Donation)
                .where(Donation.donation_id == donation_id)
                .values(status=status)
            )
        except SQLAlchemyError as e:
            raise storage_error(e, "update_donation_status")

        logger.info(
            "Donation %s status -> %s (%s row(s))", donation_id, status, result.rowcount
        )
        return result.rowcount


donation_service = DonationService()
