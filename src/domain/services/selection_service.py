"""Tracking of the single active profile."""

import structlog

from domain.entities.profile import Profile
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


class SelectionCoordinator:
    """Holds at most one selected profile ID.

    Only the ID is stored. The profile is looked up in the repository on every
    read, so updates show through and a deleted profile reads as no selection.
    """

    def __init__(self, repository: IProfileRepository) -> None:
        self._repository = repository
        self._selected_id: str | None = None

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    def select(self, profile_id: str | None) -> Profile | None:
        """Select a profile. Unknown IDs and None clear the selection."""
        if profile_id is None:
            self._selected_id = None
            return None

        profile = self._repository.get(profile_id)
        self._selected_id = profile.id if profile else None

        logger.debug("profile_selected", profile_id=self._selected_id)
        return profile

    def current_selection(self) -> Profile | None:
        """Resolve the selected profile against the repository's current state."""
        if self._selected_id is None:
            return None

        profile = self._repository.get(self._selected_id)
        if profile is None:
            logger.debug("selection_cleared", profile_id=self._selected_id)
            self._selected_id = None
        return profile

    def clear(self) -> None:
        self._selected_id = None
