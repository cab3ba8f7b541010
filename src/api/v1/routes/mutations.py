"""Mutation submission API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_profile_service
from api.v1.schemas.mutation import (
    PipelineStatusResponse,
    SubmissionDetailResponse,
    SubmissionResponse,
)
from core.rate_limit import limiter, read_limit
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/mutations", tags=["mutations"])


@router.get(
    "",
    response_model=PipelineStatusResponse,
    summary="Get pipeline status",
)
@limiter.limit(read_limit)  # type: ignore[untyped-decorator]
async def get_pipeline_status(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> PipelineStatusResponse:
    """Whether any submitted mutation is still in flight (drives spinners)."""
    pipeline = service.pipeline
    return PipelineStatusResponse(status=pipeline.status, pending_count=pipeline.pending_count)


@router.get(
    "/{submission_id}",
    response_model=SubmissionDetailResponse,
    summary="Get a submission",
    responses={404: {"description": "Submission not found"}},
)
@limiter.limit(read_limit)  # type: ignore[untyped-decorator]
async def get_submission(
    request: Request,
    submission_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> SubmissionDetailResponse:
    """Poll a submission made with `wait=false`."""
    submission = service.get_submission(submission_id)
    return SubmissionDetailResponse(data=SubmissionResponse.from_submission(submission))
