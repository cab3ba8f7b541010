"""Unit tests for Profile domain entities."""

from collections.abc import Callable
from datetime import datetime, timezone

from domain.entities.profile import Coordinates, Profile, ProfileFilters, ProfileFormData

FormFactory = Callable[..., ProfileFormData]


class TestProfileFromForm:
    def test_generates_identity(self, make_form: FormFactory) -> None:
        profile = Profile.from_form(make_form(name="Cy"))

        assert profile.name == "Cy"
        assert profile.id
        assert profile.created_at.tzinfo is not None

    def test_keeps_given_identity(self, make_form: FormFactory) -> None:
        created = datetime(2024, 5, 1, tzinfo=timezone.utc)

        profile = Profile.from_form(make_form(), id="p-1", created_at=created)

        assert profile.id == "p-1"
        assert profile.created_at == created

    def test_ids_differ(self, make_form: FormFactory) -> None:
        form = make_form()

        assert Profile.from_form(form).id != Profile.from_form(form).id

    def test_interests_are_not_shared_with_form(self, make_form: FormFactory) -> None:
        form = make_form(interests=["chess"])
        profile = Profile.from_form(form)

        form.interests.append("jazz")

        assert profile.interests == ["chess"]


class TestProfileApply:
    def test_replaces_content_and_keeps_identity(self, make_form: FormFactory) -> None:
        profile = Profile.from_form(make_form(name="Cy", interests=["a", "b"]))
        original_id, original_created = profile.id, profile.created_at

        profile.apply(make_form(name="Cy2", city="Austin", interests=["b"]))

        assert profile.name == "Cy2"
        assert profile.address.city == "Austin"
        assert profile.interests == ["b"]
        assert profile.id == original_id
        assert profile.created_at == original_created

    def test_to_form_round_trips_content(self, make_form: FormFactory) -> None:
        form = make_form(name="Dee", interests=["x", "x"])

        assert Profile.from_form(form).to_form() == form


class TestValueObjects:
    def test_zero_pair_is_unset(self) -> None:
        assert Coordinates().is_unset
        assert Coordinates(lat=0.0, lng=0.0).is_unset

    def test_single_zero_is_set(self) -> None:
        assert not Coordinates(lat=0.0, lng=12.5).is_unset
        assert not Coordinates(lat=-3.0, lng=0.0).is_unset

    def test_filters_empty(self) -> None:
        assert ProfileFilters().is_empty
        assert ProfileFilters(search_term="", location="").is_empty
        assert not ProfileFilters(location="aus").is_empty
