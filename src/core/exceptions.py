"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    SUBMISSION_NOT_FOUND = "SUBMISSION_NOT_FOUND"

    # Validation errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )
        self.profile_id = profile_id


class ProfileValidationError(AppException):
    """Submitted profile form data failed validation.

    ``field_errors`` maps dotted field paths (``address.street``) to messages.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Profile form data is invalid",
            status_code=422,
            details={"field_errors": dict(field_errors)},
        )
        self.field_errors = dict(field_errors)


class SubmissionNotFoundError(AppException):
    """Mutation submission not found."""

    def __init__(self, submission_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SUBMISSION_NOT_FOUND,
            message=f"Submission not found: {submission_id}",
            status_code=404,
            details={"submission_id": submission_id},
        )


class MutationFailedError(AppException):
    """A submitted mutation crashed while being applied."""

    def __init__(self, submission_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.INTERNAL_ERROR,
            message=f"Mutation failed unexpectedly: {submission_id}",
            status_code=500,
            details={"submission_id": submission_id},
        )
