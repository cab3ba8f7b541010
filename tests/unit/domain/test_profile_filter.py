"""Unit tests for profile filtering."""

from collections.abc import Callable

import pytest

from domain.entities.profile import Profile, ProfileFilters, ProfileFormData
from domain.services.profile_filter import (
    filter_profiles,
    matches_location,
    matches_search_term,
)

FormFactory = Callable[..., ProfileFormData]


@pytest.fixture
def profiles(make_form: FormFactory) -> list[Profile]:
    return [
        Profile.from_form(
            make_form(
                name="Ana",
                description="Architect",
                city="Boston",
                state="Massachusetts",
                interests=["Cycling", "jazz"],
            )
        ),
        Profile.from_form(
            make_form(
                name="Ben",
                description="Brewer of coffee",
                city="Austin",
                state="Texas",
                interests=["climbing"],
            )
        ),
        Profile.from_form(
            make_form(
                name="Cora",
                description="Nurse",
                city="Toronto",
                state="Ontario",
                country="Canada",
                interests=["chess", "cycling"],
            )
        ),
    ]


def _names(result: list[Profile]) -> list[str]:
    return [p.name for p in result]


class TestFilterProfiles:
    def test_location_scenario(self, profiles: list[Profile]) -> None:
        result = filter_profiles(profiles[:2], ProfileFilters(location="aus"))

        assert _names(result) == ["Ben"]

    def test_no_criteria_is_identity(self, profiles: list[Profile]) -> None:
        assert filter_profiles(profiles, ProfileFilters()) == profiles
        assert filter_profiles(profiles) == profiles

    def test_empty_strings_are_identity(self, profiles: list[Profile]) -> None:
        result = filter_profiles(profiles, ProfileFilters(search_term="", location=""))

        assert result == profiles

    def test_result_is_a_new_list(self, profiles: list[Profile]) -> None:
        result = filter_profiles(profiles)
        result.clear()

        assert len(profiles) == 3

    def test_search_matches_name_case_insensitively(self, profiles: list[Profile]) -> None:
        assert _names(filter_profiles(profiles, ProfileFilters(search_term="ANA"))) == ["Ana"]

    def test_search_matches_description(self, profiles: list[Profile]) -> None:
        result = filter_profiles(profiles, ProfileFilters(search_term="coffee"))

        assert _names(result) == ["Ben"]

    def test_search_matches_any_interest_preserving_order(
        self, profiles: list[Profile]
    ) -> None:
        result = filter_profiles(profiles, ProfileFilters(search_term="cycl"))

        assert _names(result) == ["Ana", "Cora"]

    def test_search_does_not_match_address(self, profiles: list[Profile]) -> None:
        assert filter_profiles(profiles, ProfileFilters(search_term="Boston")) == []

    def test_location_matches_state_and_country(self, profiles: list[Profile]) -> None:
        assert _names(filter_profiles(profiles, ProfileFilters(location="texas"))) == ["Ben"]
        assert _names(filter_profiles(profiles, ProfileFilters(location="CANADA"))) == ["Cora"]

    def test_both_criteria_are_combined_with_and(self, profiles: list[Profile]) -> None:
        result = filter_profiles(
            profiles, ProfileFilters(search_term="cycling", location="canada")
        )

        assert _names(result) == ["Cora"]

    def test_no_match_returns_empty(self, profiles: list[Profile]) -> None:
        assert filter_profiles(profiles, ProfileFilters(search_term="zzz")) == []


class TestMatchers:
    def test_matches_search_term(self, profiles: list[Profile]) -> None:
        ana = profiles[0]

        assert matches_search_term(ana, "JAZZ")
        assert matches_search_term(ana, "arch")
        assert not matches_search_term(ana, "climb")

    def test_matches_location(self, profiles: list[Profile]) -> None:
        ana = profiles[0]

        assert matches_location(ana, "bos")
        assert matches_location(ana, "united")
        assert not matches_location(ana, "austin")
