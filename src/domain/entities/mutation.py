"""Profile mutation operations and their outcomes."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from core.exceptions import AppException
from domain.entities.profile import Profile, ProfileFormData
from domain.repositories.profile_repository import IProfileRepository


class MutationKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class MutationStatus(StrEnum):
    """Lifecycle of a submitted mutation, also used for the pipeline as a whole."""

    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass(frozen=True)
class CreateProfile:
    """Append a new profile built from ``form``."""

    form: ProfileFormData
    kind: MutationKind = field(default=MutationKind.CREATE, init=False)

    @property
    def profile_id(self) -> str | None:
        return None

    def apply(self, repository: IProfileRepository) -> Profile:
        return repository.create(self.form)


@dataclass(frozen=True)
class UpdateProfile:
    """Replace the content of profile ``profile_id`` with ``form``."""

    profile_id: str
    form: ProfileFormData
    kind: MutationKind = field(default=MutationKind.UPDATE, init=False)

    def apply(self, repository: IProfileRepository) -> Profile:
        return repository.update(self.profile_id, self.form)


@dataclass(frozen=True)
class DeleteProfile:
    """Remove profile ``profile_id`` if it exists."""

    profile_id: str
    kind: MutationKind = field(default=MutationKind.DELETE, init=False)

    def apply(self, repository: IProfileRepository) -> bool:
        return repository.delete(self.profile_id)


MutationOperation = CreateProfile | UpdateProfile | DeleteProfile


@dataclass(frozen=True)
class MutationResult:
    """Settled outcome of a mutation: either a value or an application error.

    ``value`` is the stored Profile for create/update and the removal flag for
    delete.
    """

    value: Any = None
    error: AppException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
