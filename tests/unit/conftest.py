"""Shared fixtures for unit tests."""

from collections.abc import Callable
from typing import Any

import pytest

from domain.entities.profile import Address, Contact, Coordinates, ProfileFormData
from domain.services.mutation_pipeline import MutationDelays, MutationPipeline
from domain.services.profile_service import ProfileService
from domain.services.selection_service import SelectionCoordinator
from infrastructure.memory.profile_repo import InMemoryProfileRepository

FormFactory = Callable[..., ProfileFormData]


def build_form(
    name: str = "Ana",
    city: str = "Boston",
    state: str = "Massachusetts",
    country: str = "United States",
    email: str = "ana@example.com",
    lat: float = 42.36,
    lng: float = -71.06,
    **overrides: Any,
) -> ProfileFormData:
    """A valid form; keyword overrides replace top-level fields."""
    fields: dict[str, Any] = {
        "name": name,
        "description": f"{name} likes maps",
        "image": f"https://i.pravatar.cc/200?u={name.lower()}",
        "address": Address(
            street="1 Main St",
            city=city,
            state=state,
            country=country,
            zip_code="00001",
            coordinates=Coordinates(lat=lat, lng=lng),
        ),
        "contact": Contact(email=email, phone="555-0100"),
        "interests": ["reading"],
    }
    fields.update(overrides)
    return ProfileFormData(**fields)


@pytest.fixture
def make_form() -> FormFactory:
    """Factory for valid profile forms."""
    return build_form


@pytest.fixture
def repository() -> InMemoryProfileRepository:
    """Create a fresh, empty repository."""
    return InMemoryProfileRepository()


@pytest.fixture
def selection(repository: InMemoryProfileRepository) -> SelectionCoordinator:
    return SelectionCoordinator(repository)


@pytest.fixture
def pipeline(repository: InMemoryProfileRepository) -> MutationPipeline:
    """Pipeline with no default delay; tests pass explicit delays when timing matters."""
    return MutationPipeline(repository, delays=MutationDelays(create=0, update=0, delete=0))


@pytest.fixture
def service(
    repository: InMemoryProfileRepository,
    selection: SelectionCoordinator,
    pipeline: MutationPipeline,
) -> ProfileService:
    return ProfileService(repository=repository, selection=selection, pipeline=pipeline)
