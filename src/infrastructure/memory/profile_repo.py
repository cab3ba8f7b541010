"""In-memory implementation of Profile repository."""

from collections.abc import Iterable
from copy import deepcopy

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import Profile, ProfileFormData, new_profile_id

logger = structlog.get_logger()


class InMemoryProfileRepository:
    """In-memory implementation of IProfileRepository.

    Profiles live in a dict keyed by ID; dicts keep insertion order, which is
    the collection order. Everything going in or out is deep-copied so the
    stored records can only change through the methods below. Data is lost
    when the process stops.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}

    def list(self) -> list[Profile]:
        """Get all profiles in insertion order."""
        return [deepcopy(profile) for profile in self._profiles.values()]

    def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        profile = self._profiles.get(id)
        return deepcopy(profile) if profile else None

    def create(self, form: ProfileFormData) -> Profile:
        """Create a new profile at the end of the collection."""
        assert isinstance(form, ProfileFormData), "create() expects ProfileFormData"

        profile = Profile.from_form(deepcopy(form))
        while profile.id in self._profiles:
            profile.id = new_profile_id()
        self._profiles[profile.id] = profile

        logger.info("profile_created", profile_id=profile.id, name=profile.name)
        return deepcopy(profile)

    def update(self, id: str, form: ProfileFormData) -> Profile:
        """Replace a profile's content in place, keeping ID and position."""
        assert isinstance(form, ProfileFormData), "update() expects ProfileFormData"

        profile = self._profiles.get(id)
        if profile is None:
            raise ProfileNotFoundError(id)

        profile.apply(deepcopy(form))

        logger.info("profile_updated", profile_id=id)
        return deepcopy(profile)

    def delete(self, id: str) -> bool:
        """Delete a profile. Missing IDs are a no-op returning False."""
        removed = self._profiles.pop(id, None) is not None
        if removed:
            logger.info("profile_deleted", profile_id=id)
        return removed

    def load(self, profiles: Iterable[Profile]) -> int:
        """Bulk-load profiles, all or nothing.

        Raises ValueError if any ID is already stored or repeats in the batch.
        """
        batch: dict[str, Profile] = {}
        for profile in profiles:
            assert isinstance(profile, Profile), "load() expects Profile records"
            if profile.id in self._profiles or profile.id in batch:
                raise ValueError(f"Duplicate profile id: {profile.id}")
            batch[profile.id] = deepcopy(profile)

        self._profiles.update(batch)

        logger.info("profiles_loaded", count=len(batch), total=len(self._profiles))
        return len(batch)

    def count(self) -> int:
        """Get the number of stored profiles."""
        return len(self._profiles)

    def clear(self) -> None:
        """Remove every profile."""
        self._profiles.clear()
