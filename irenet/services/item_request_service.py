"""
Irenet Backend — Request Service
================================

What:  List, filter, create and re-status organization requests.

Same contract as DonationService, with organizations in place of donors
and 'open' as the default status.
"""

import logging
from typing import List, Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.models.item_request import ItemRequest, RequestStatus
from irenet.models.organization import Organization
from irenet.schemas.common import StatusUpdate
from irenet.schemas.item_request import RequestCreate, RequestOut
from irenet.services.base import require_fields, row_id, storage_error

logger = logging.getLogger(__name__)


class RequestService:
    """Stateless operations on the requests table."""

    async def list_requests(
        self,
        db: AsyncSession,
        status: Optional[str] = None,
    ) -> List[RequestOut]:
        """Every request with its organization's name and contact info."""
        query = select(
            ItemRequest,
            Organization.org_name,
            Organization.contact_info,
        ).join(Organization, ItemRequest.org_id == Organization.org_id)

        if status is not None:
            query = query.where(ItemRequest.status == status)

        try:
            result = await db.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            raise storage_error(e, "list_requests")

        return [
            RequestOut.model_validate(
                {**item.to_dict(), "org_name": org_name, "contact_info": contact_info}
            )
            for item, org_name, contact_info in rows
        ]

    async def list_requests_by_status(self, db: AsyncSession, status: str) -> List[RequestOut]:
        return await self.list_requests(db, status=status)

    async def create_request(self, db: AsyncSession, payload: RequestCreate) -> int:
        """Insert a request and return its request_id. Status defaults to 'open'."""
        require_fields(payload, ("org_id", "item_name", "category", "quantity"))

        item = ItemRequest(
            org_id=payload.org_id,
            item_name=payload.item_name,
            category=payload.category,
            quantity=payload.quantity,
            status=payload.status or RequestStatus.OPEN,
        )
        try:
            db.add(item)
            await db.flush()
        except SQLAlchemyError as e:
            raise storage_error(e, "create_request")

        logger.info(
            "Request created: %s by org %s (%s x%d)",
            item.request_id, item.org_id, item.item_name, item.quantity,
        )
        return item.request_id

    async def update_status(
        self,
        db: AsyncSession,
        request_id: Union[int, str],
        payload: StatusUpdate,
    ) -> None:
        require_fields(payload, ("status",), message="Status is required")
        key = row_id(request_id)
        if key is None:
            logger.info("Request %r status -> %s (0 row(s))", request_id, payload.status)
            return
        await self.mark_status(db, key, payload.status)

    async def mark_status(self, db: AsyncSession, request_id: int, status: str) -> int:
        try:
            result = await db.execute(
                update(ItemRequest)
                .where(ItemRequest.request_id == request_id)
                .values(status=status)
            )
        except SQLAlchemyError as e:
            raise storage_error(e, "update_request_status")

        logger.info("Request %s status -> %s (%s row(s))", request_id, status, result.rowcount)
        return result.rowcount


request_service = RequestService()
