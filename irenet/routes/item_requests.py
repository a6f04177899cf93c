"""Request routes under /api/requests; same shape as the donation routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.database import get_db_session
from irenet.routes.body import parsed_body
from irenet.schemas.common import ErrorResponse, MessageResponse, StatusUpdate
from irenet.schemas.item_request import RequestCreate, RequestCreated, RequestListResponse
from irenet.services.item_request_service import request_service

router = APIRouter(prefix="/api/requests", tags=["Requests"])


@router.get(
    "",
    response_model=RequestListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List requests",
)
async def list_requests(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> RequestListResponse:
    return RequestListResponse(data=await request_service.list_requests(db))


@router.get(
    "/status/{status}",
    response_model=RequestListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List requests with a given status",
)
async def list_requests_by_status(
    status: str,
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> RequestListResponse:
    return RequestListResponse(data=await request_service.list_requests_by_status(db, status))


@router.post(
    "",
    response_model=RequestCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a request",
)
async def create_request(
    payload: RequestCreate = Depends(parsed_body(RequestCreate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> RequestCreated:
    request_id = await request_service.create_request(db, payload)
    return RequestCreated(request_id=request_id)


@router.patch(
    "/{request_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Update a request's status",
)
async def update_request_status(
    request_id: str,
    payload: StatusUpdate = Depends(parsed_body(StatusUpdate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MessageResponse:
    await request_service.update_status(db, request_id, payload)
    return MessageResponse(message="Request updated")
