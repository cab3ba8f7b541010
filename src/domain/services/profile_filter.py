"""Derivation of the visible profile subset from filter criteria."""

from collections.abc import Iterable

from domain.entities.profile import Profile, ProfileFilters


def matches_search_term(profile: Profile, term: str) -> bool:
    """Case-insensitive match on name, description or any interest."""
    needle = term.lower()
    return (
        needle in profile.name.lower()
        or needle in profile.description.lower()
        or any(needle in interest.lower() for interest in profile.interests)
    )


def matches_location(profile: Profile, location: str) -> bool:
    """Case-insensitive match on city, state or country."""
    needle = location.lower()
    address = profile.address
    return (
        needle in address.city.lower()
        or needle in address.state.lower()
        or needle in address.country.lower()
    )


def filter_profiles(
    profiles: Iterable[Profile], filters: ProfileFilters | None = None
) -> list[Profile]:
    """Return the profiles matching ``filters``, preserving input order.

    Both criteria must match when both are given; empty criteria keep
    everything. The result is always a new list.
    """
    filters = filters or ProfileFilters()
    result = list(profiles)

    if filters.search_term:
        result = [p for p in result if matches_search_term(p, filters.search_term)]

    if filters.location:
        result = [p for p in result if matches_location(p, filters.location)]

    return result
