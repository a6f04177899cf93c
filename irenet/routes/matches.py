"""
Irenet Backend — Match Route Handlers
=====================================

GET  /api/matches   every match with item, donor and organization names
POST /api/matches   pair donation_id with request_id; both sides become
                    'matched' in the same transaction as the insert
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.database import get_db_session
from irenet.routes.body import parsed_body
from irenet.schemas.common import ErrorResponse
from irenet.schemas.match import MatchCreate, MatchCreated, MatchListResponse
from irenet.services.match_service import match_service

router = APIRouter(prefix="/api/matches", tags=["Matches"])


@router.get(
    "",
    response_model=MatchListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List matches",
)
async def list_matches(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MatchListResponse:
    return MatchListResponse(data=await match_service.list_matches(db))


@router.post(
    "",
    response_model=MatchCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Match a donation to a request",
)
async def create_match(
    payload: MatchCreate = Depends(parsed_body(MatchCreate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> MatchCreated:
    match_id = await match_service.create_match(db, payload)
    return MatchCreated(match_id=match_id)
