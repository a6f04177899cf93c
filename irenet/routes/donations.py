"""
Irenet Backend — Donation Route Handlers
========================================

GET   /api/donations                   all donations with donor name/email
GET   /api/donations/status/{status}   exact, case-sensitive status filter
POST  /api/donations                   create; status defaults to 'available'
PATCH /api/donations/{id}              set status; succeeds even if the id
                                       does not exist
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.database import get_db_session
from irenet.routes.body import parsed_body
from irenet.schemas.common import ErrorResponse, MessageResponse, StatusUpdate
from irenet.schemas.donation import DonationCreate, DonationCreated, DonationListResponse
from irenet.services.donation_service import donation_service

router = APIRouter(prefix="/api/donations", tags=["Donations"])


@router.get(
    "",
    response_model=DonationListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List donations",
)
async def list_donations(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> DonationListResponse:
    return DonationListResponse(data=await donation_service.list_donations(db))


@router.get(
    "/status/{status}",
    response_model=DonationListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List donations with a given status",
)
async def list_donations_by_status(
    status: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> DonationListResponse:
    return DonationListResponse(
        data=await donation_service.list_donations_by_status(db, status)
    )


@router.post(
    "",
    response_model=DonationCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a donation",
)
async def create_donation(
    payload: DonationCreate = Depends(parsed_body(DonationCreate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> DonationCreated:
    donation_id = await donation_service.create_donation(db, payload)
    return DonationCreated(donation_id=donation_id)


@router.patch(
    "/{donation_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Update a donation's status",
)
async def update_donation_status(
    donation_id: str,
    payload: StatusUpdate = Depends(parsed_body(StatusUpdate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await donation_service.update_status(db, donation_id, payload)
    return MessageResponse(message="Donation updated")
