"""Selected profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_service
from api.v1.schemas.profile import ProfileResponse, SelectionResponse, SelectionUpdate
from core.rate_limit import limiter, read_limit, write_limit
from domain.entities.profile import Profile
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/selection", tags=["selection"])


@router.get(
    "",
    response_model=SelectionResponse,
    summary="Get the selected profile",
)
@limiter.limit(read_limit)  # type: ignore[untyped-decorator]
async def get_selection(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> SelectionResponse:
    """Get the profile in focus for the detail and map views, or null."""
    return _build_selection_response(service.current_selection())


@router.put(
    "",
    response_model=SelectionResponse,
    summary="Select a profile",
)
@limiter.limit(write_limit)  # type: ignore[untyped-decorator]
async def put_selection(
    request: Request,
    body: SelectionUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> SelectionResponse:
    """Select a profile by ID. An unknown ID or null clears the selection."""
    return _build_selection_response(service.select(body.profile_id))


def _build_selection_response(profile: Profile | None) -> SelectionResponse:
    return SelectionResponse(
        data=ProfileResponse.model_validate(profile) if profile else None,
    )
