"""Dependency wiring for API v1."""

from fastapi import Request

from core.config import Settings
from domain.services.mutation_pipeline import MutationDelays, MutationPipeline
from domain.services.profile_service import ProfileService
from domain.services.selection_service import SelectionCoordinator
from infrastructure.memory.profile_repo import InMemoryProfileRepository


def build_profile_service(app_settings: Settings) -> ProfileService:
    """Construct the repository, selection and pipeline for one application."""
    repository = InMemoryProfileRepository()
    pipeline = MutationPipeline(
        repository,
        delays=MutationDelays(
            create=app_settings.create_latency_seconds,
            update=app_settings.update_latency_seconds,
            delete=app_settings.delete_latency_seconds,
        ),
        history_limit=app_settings.mutation_history_limit,
    )
    return ProfileService(
        repository=repository,
        selection=SelectionCoordinator(repository),
        pipeline=pipeline,
    )


def get_profile_service(request: Request) -> ProfileService:
    """Get the Profile service owned by the running application."""
    return request.app.state.profile_service  # type: ignore[no-any-return]

