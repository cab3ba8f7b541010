"""Profile repository protocol."""

from collections.abc import Iterable
from typing import Protocol

from domain.entities.profile import Profile, ProfileFormData


class IProfileRepository(Protocol):
    """Repository interface for Profile entities.

    Implementations own the canonical, insertion-ordered collection. Reads
    return copies; callers never hold a reference into the stored records.
    """

    def list(self) -> list[Profile]:
        """Get all profiles in insertion order."""
        ...

    def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    def create(self, form: ProfileFormData) -> Profile:
        """Create a new profile, assigning its ID and creation time."""
        ...

    def update(self, id: str, form: ProfileFormData) -> Profile:
        """Replace a profile's content. Raises ProfileNotFoundError if absent."""
        ...

    def delete(self, id: str) -> bool:
        """Delete a profile and return whether one was removed."""
        ...

    def load(self, profiles: Iterable[Profile]) -> int:
        """Bulk-load fully formed profiles and return how many were added."""
        ...

    def count(self) -> int:
        """Get the number of stored profiles."""
        ...
