"""Pydantic schemas for mutation submissions."""

from datetime import datetime

from pydantic import BaseModel

from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import ProfileResponse
from domain.entities.mutation import MutationKind, MutationStatus
from domain.entities.profile import Profile
from domain.services.mutation_pipeline import Submission


class MutationResultResponse(BaseModel):
    """Settled outcome of a submission."""

    ok: bool
    profile: ProfileResponse | None = None
    deleted: bool | None = None
    error: ErrorResponse | None = None


class SubmissionResponse(BaseModel):
    """Schema for a submitted mutation."""

    id: str
    kind: MutationKind
    status: MutationStatus
    profile_id: str | None
    delay: float
    submitted_at: datetime
    settled_at: datetime | None = None
    result: MutationResultResponse | None = None

    @classmethod
    def from_submission(cls, submission: Submission) -> "SubmissionResponse":
        result = None
        if submission.result is not None:
            outcome = submission.result
            value = outcome.value
            result = MutationResultResponse(
                ok=outcome.ok,
                profile=ProfileResponse.model_validate(value)
                if isinstance(value, Profile)
                else None,
                deleted=value if isinstance(value, bool) else None,
                error=ErrorResponse(
                    error_code=outcome.error.error_code.value,
                    message=outcome.error.message,
                    details=outcome.error.details,
                )
                if outcome.error
                else None,
            )

        return cls(
            id=submission.id,
            kind=submission.kind,
            status=submission.status,
            profile_id=submission.operation.profile_id,
            delay=submission.delay,
            submitted_at=submission.submitted_at,
            settled_at=submission.settled_at,
            result=result,
        )


class SubmissionDetailResponse(BaseModel):
    """Schema for single submission."""

    data: SubmissionResponse


class PipelineStatusResponse(BaseModel):
    """Schema for the pipeline's aggregate state."""

    status: MutationStatus
    pending_count: int
