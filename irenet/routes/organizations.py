"""Organization routes: GET and POST /api/organizations."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from irenet.database import get_db_session
from irenet.routes.body import parsed_body
from irenet.schemas.common import ErrorResponse
from irenet.schemas.organization import (
    OrganizationCreate,
    OrganizationCreated,
    OrganizationListResponse,
)
from irenet.services.organization_service import organization_service

router = APIRouter(prefix="/api/organizations", tags=["Organizations"])


@router.get(
    "",
    response_model=OrganizationListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List organizations with their owning user",
)
async def list_organizations(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> OrganizationListResponse:
    return OrganizationListResponse(data=await organization_service.list_organizations(db))


@router.post(
    "",
    response_model=OrganizationCreated,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create an organization",
)
async def create_organization(
    payload: OrganizationCreate = Depends(parsed_body(OrganizationCreate)),
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> OrganizationCreated:
    org_id = await organization_service.create_organization(db, payload)
    return OrganizationCreated(org_id=org_id)
