"""Venue completion API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from stamprally.api.dependencies import get_catalog, get_completion_service
from stamprally.exceptions import InvalidRequest
from stamprally.schemas.completion import CompleteRequest, CompleteResponse, VenueSummaryResponse
from stamprally.services.catalog import RallyCatalog
from stamprally.services.completion_service import CompletionService

router = APIRouter(prefix="/venues", tags=["venues"])


@router.post("/complete", response_model=CompleteResponse)
async def complete_venue(
    request: CompleteRequest,
    service: Annotated[CompletionService, Depends(get_completion_service)],
):
    """Record that a user completed a venue."""
    completion = service.record_completion(request.venuesid, request.userid, request.complate)
    return CompleteResponse(
        venuesid=completion.venues_id,
        userid=completion.user_id,
        complate=1 if completion.complate else 0,
        created_at=completion.created_at,
    )


@router.get("/", response_model=VenueSummaryResponse, include_in_schema=False)
async def get_venues_without_user():
    """Reject a summary request with no user id."""
    raise InvalidRequest("Invalid userId")


@router.get("/{user_id}", response_model=VenueSummaryResponse)
async def get_user_venues(
    user_id: str,
    service: Annotated[CompletionService, Depends(get_completion_service)],
    catalog: Annotated[RallyCatalog, Depends(get_catalog)],
):
    """Get a user's completed venues alongside the required catalog."""
    return service.summarize(user_id, catalog)
