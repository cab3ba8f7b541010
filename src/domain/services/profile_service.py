"""Profile service layer: the boundary between callers and the core."""

from collections.abc import Iterable

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.mutation import CreateProfile, DeleteProfile, UpdateProfile
from domain.entities.profile import Profile, ProfileFilters, ProfileFormData
from domain.repositories.profile_repository import IProfileRepository
from domain.services.mutation_pipeline import MutationPipeline, Submission
from domain.services.profile_filter import filter_profiles
from domain.services.profile_validation import validate_profile_form
from domain.services.selection_service import SelectionCoordinator

logger = structlog.get_logger()


class ProfileService:
    """Service layer for the profile directory.

    Reads are derived from the repository on every call. Writes are validated
    here and only then handed to the mutation pipeline, so invalid form data
    never reaches the repository.
    """

    def __init__(
        self,
        repository: IProfileRepository,
        selection: SelectionCoordinator,
        pipeline: MutationPipeline,
    ) -> None:
        self._repository = repository
        self._selection = selection
        self._pipeline = pipeline

    @property
    def pipeline(self) -> MutationPipeline:
        return self._pipeline

    def list_profiles(self, filters: ProfileFilters | None = None) -> list[Profile]:
        """Get the profiles matching ``filters`` in collection order."""
        return filter_profiles(self._repository.list(), filters)

    def get_profile(self, profile_id: str) -> Profile:
        """Get a profile by ID."""
        profile = self._repository.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def count(self) -> int:
        return self._repository.count()

    def submit_create(self, form: ProfileFormData, delay: float | None = None) -> Submission:
        """Validate ``form`` and submit a create. Raises ProfileValidationError."""
        self._validate(form)
        return self._pipeline.submit(CreateProfile(form=form), delay=delay)

    def submit_update(
        self, profile_id: str, form: ProfileFormData, delay: float | None = None
    ) -> Submission:
        """Validate ``form`` and submit an update.

        A missing profile is reported through the settled result, not here.
        """
        self._validate(form)
        return self._pipeline.submit(UpdateProfile(profile_id=profile_id, form=form), delay=delay)

    def submit_delete(self, profile_id: str, delay: float | None = None) -> Submission:
        """Submit a delete. Deleting a missing profile settles with False."""
        return self._pipeline.submit(DeleteProfile(profile_id=profile_id), delay=delay)

    def get_submission(self, submission_id: str) -> Submission:
        return self._pipeline.get(submission_id)

    def select(self, profile_id: str | None) -> Profile | None:
        return self._selection.select(profile_id)

    def current_selection(self) -> Profile | None:
        return self._selection.current_selection()

    def seed(self, profiles: Iterable[Profile]) -> int:
        """Bulk-load initial profiles."""
        return self._repository.load(profiles)

    def _validate(self, form: ProfileFormData) -> None:
        result = validate_profile_form(form)
        if not result.valid:
            logger.info("profile_form_rejected", fields=sorted(result.field_errors))
        result.raise_for_errors()
