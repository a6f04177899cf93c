"""
Irenet Backend — Match Service
==============================

What:  Lists matches and pairs a donation with a request.
Who:   Called by the /api/matches route handlers.

Match creation:
    ┌──────────────┐    ┌──────────────────────┐    ┌──────────────────────┐
    │ INSERT match │───▶│ donation → 'matched' │───▶│ request → 'matched'  │
    │ (today)      │    │                      │    │                      │
    └──────────────┘    └──────────────────────┘    └──────────────────────┘

    All three statements run on the caller's session, which is one
    transaction (see get_db_session): they commit together when the request
    completes, and a failure in any of them rolls back the others.

    There is no check that the donation or request exists or is still
    unmatched. Matching one donation against two requests produces two
    match rows.
"""

import logging
from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.models.donation import Donation, DonationStatus
from irenet.models.item_request import ItemRequest, RequestStatus
from irenet.models.match import Match
from irenet.models.organization import Organization
from irenet.models.user import User
from irenet.schemas.match import MatchCreate, MatchOut
from irenet.services.base import require_fields, storage_error
from irenet.services.donation_service import donation_service
from irenet.services.item_request_service import request_service

logger = logging.getLogger(__name__)


class MatchService:
    """Stateless operations on the matches table."""

    async def list_matches(self, db: AsyncSession) -> List[MatchOut]:
        """
        Every match, denormalized across donations, requests, users and
        organizations. Matches whose donation, request, donor or
        organization is missing are left out by the inner joins.
        """
        query = (
            select(
                Match,
                Donation.item_name.label("donation_item"),
                Donation.donor_id,
                ItemRequest.item_name.label("request_item"),
                ItemRequest.org_id,
                User.name.label("donor_name"),
                Organization.org_name,
            )
            .join(Donation, Match.donation_id == Donation.donation_id)
            .join(ItemRequest, Match.request_id == ItemRequest.request_id)
            .join(User, Donation.donor_id == User.user_id)
            .join(Organization, ItemRequest.org_id == Organization.org_id)
        )

        try:
            result = await db.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            raise storage_error(e, "list_matches")

        return [
            MatchOut.model_validate(
                {
                    **match.to_dict(),
                    "donation_item": donation_item,
                    "donor_id": donor_id,
                    "request_item": request_item,
                    "org_id": org_id,
                    "donor_name": donor_name,
                    "org_name": org_name,
                }
            )
            for match, donation_item, donor_id, request_item, org_id, donor_name, org_name in rows
        ]

    async def create_match(self, db: AsyncSession, payload: MatchCreate) -> int:
        """
        Record a match dated today and mark both sides 'matched'.

        Returns:
            The generated match_id

        Raises:
            ValidationError: donation_id or request_id missing (nothing written)
            DatabaseError: any of the three statements failed; the request's
                transaction is rolled back by get_db_session
        """
        require_fields(payload, ("donation_id", "request_id"))

        # ── Step 1: Insert the match row ──────────────────────────────────
        match = Match(
            donation_id=payload.donation_id,
            request_id=payload.request_id,
            match_date=date.today(),
        )
        try:
            db.add(match)
            await db.flush()
        except SQLAlchemyError as e:
            raise storage_error(e, "create_match")

        # ── Steps 2 & 3: Mark both sides matched ──────────────────────────
        await donation_service.mark_status(db, payload.donation_id, DonationStatus.MATCHED)
        await request_service.mark_status(db, payload.request_id, RequestStatus.MATCHED)

        logger.info(
            "Match %s created: donation %s <-> request %s",
            match.match_id, payload.donation_id, payload.request_id,
        )
        return match.match_id


match_service = MatchService()
