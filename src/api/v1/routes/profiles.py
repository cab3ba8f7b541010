"""Profile API routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.mutation import SubmissionDetailResponse, SubmissionResponse
from api.v1.schemas.profile import (
    ProfileDeleteResponse,
    ProfileDetailResponse,
    ProfileForm,
    ProfileListResponse,
    ProfileResponse,
)
from core.rate_limit import limiter, read_limit, write_limit
from domain.entities.profile import Profile, ProfileFilters
from domain.services.mutation_pipeline import Submission
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])

WAIT_DESCRIPTION = "Wait for the mutation to settle. With false, respond 202 with the submission."


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List profiles",
)
@limiter.limit(read_limit)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
    search: str = Query("", description="Match name, description or interests"),
    location: str | None = Query(None, description="Match city, state or country"),
) -> ProfileListResponse:
    """Get profiles in directory order, optionally narrowed by search and location."""
    profiles = service.list_profiles(ProfileFilters(search_term=search, location=location))
    return ProfileListResponse(
        data=[_build_profile_response(p) for p in profiles],
        total=len(profiles),
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(read_limit)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a single profile for the detail view."""
    return ProfileDetailResponse(data=_build_profile_response(service.get_profile(profile_id)))


@router.post(
    "",
    response_model=ProfileDetailResponse | SubmissionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created"},
        202: {"description": "Creation submitted, not yet settled"},
        422: {"description": "Form data failed validation"},
    },
)
@limiter.limit(write_limit)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    response: Response,
    body: ProfileForm,
    service: ProfileService = Depends(get_profile_service),
    wait: bool = Query(True, description=WAIT_DESCRIPTION),
) -> ProfileDetailResponse | SubmissionDetailResponse:
    """Create a profile. The write is applied after the simulated latency."""
    submission = service.submit_create(body.to_domain())
    if not wait:
        return _accepted(response, submission)

    profile = await _settled_value(submission)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.put(
    "/{profile_id}",
    response_model=ProfileDetailResponse | SubmissionDetailResponse,
    summary="Replace a profile",
    responses={
        200: {"description": "Profile updated"},
        202: {"description": "Update submitted, not yet settled"},
        404: {"description": "Profile not found"},
        422: {"description": "Form data failed validation"},
    },
)
@limiter.limit(write_limit)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    response: Response,
    profile_id: str,
    body: ProfileForm,
    service: ProfileService = Depends(get_profile_service),
    wait: bool = Query(True, description=WAIT_DESCRIPTION),
) -> ProfileDetailResponse | SubmissionDetailResponse:
    """Replace every content field of a profile. ID and creation time are kept."""
    submission = service.submit_update(profile_id, body.to_domain())
    if not wait:
        return _accepted(response, submission)

    profile = await _settled_value(submission)
    return ProfileDetailResponse(data=_build_profile_response(profile))


@router.delete(
    "/{profile_id}",
    response_model=ProfileDeleteResponse | SubmissionDetailResponse,
    summary="Delete a profile",
    responses={
        200: {"description": "Delete settled; `deleted` is false if nothing matched"},
        202: {"description": "Delete submitted, not yet settled"},
    },
)
@limiter.limit(write_limit)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    response: Response,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
    wait: bool = Query(True, description=WAIT_DESCRIPTION),
) -> ProfileDeleteResponse | SubmissionDetailResponse:
    """Delete a profile. Deleting a missing profile is not an error."""
    submission = service.submit_delete(profile_id)
    if not wait:
        return _accepted(response, submission)

    deleted = await _settled_value(submission)
    return ProfileDeleteResponse(deleted=deleted)


async def _settled_value(submission: Submission) -> Any:
    """Wait for the submission and unwrap it, raising its error if it failed."""
    result = await submission.wait()
    if result.error is not None:
        raise result.error
    return result.value


def _accepted(response: Response, submission: Submission) -> SubmissionDetailResponse:
    response.status_code = status.HTTP_202_ACCEPTED
    return SubmissionDetailResponse(data=SubmissionResponse.from_submission(submission))


def _build_profile_response(profile: Profile) -> ProfileResponse:
    """Convert domain entity to response schema."""
    return ProfileResponse.model_validate(profile)
