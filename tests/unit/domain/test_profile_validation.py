"""Unit tests for profile form validation."""

from collections.abc import Callable

import pytest

from core.exceptions import ProfileValidationError
from domain.entities.profile import Address, Coordinates, ProfileFormData
from domain.services.profile_validation import validate_profile_form

FormFactory = Callable[..., ProfileFormData]


class TestValidProfileForm:
    def test_valid_form_has_no_errors(self, make_form: FormFactory) -> None:
        result = validate_profile_form(make_form())

        assert result.valid
        assert result.field_errors == {}

    def test_raise_for_errors_is_silent_when_valid(self, make_form: FormFactory) -> None:
        validate_profile_form(make_form()).raise_for_errors()

    def test_image_phone_country_and_interests_are_optional(
        self, make_form: FormFactory
    ) -> None:
        form = make_form(image="", interests=[], country="")
        form.contact.phone = ""

        assert validate_profile_form(form).valid

    def test_implausible_coordinates_are_accepted(self, make_form: FormFactory) -> None:
        assert validate_profile_form(make_form(lat=500.0, lng=-999.0)).valid

    def test_one_zero_coordinate_is_accepted(self, make_form: FormFactory) -> None:
        assert validate_profile_form(make_form(lat=0.0, lng=-71.0)).valid


class TestInvalidProfileForm:
    def test_empty_form_reports_every_rule(self) -> None:
        result = validate_profile_form(ProfileFormData())

        assert not result.valid
        assert set(result.field_errors) == {
            "name",
            "description",
            "address.street",
            "address.city",
            "address.state",
            "address.zip_code",
            "contact.email",
            "coordinates",
        }

    def test_whitespace_only_is_blank(self, make_form: FormFactory) -> None:
        result = validate_profile_form(make_form(name="   ", description="\t\n"))

        assert result.field_errors["name"] == "Name is required"
        assert result.field_errors["description"] == "Description is required"

    def test_address_fields_use_dotted_paths(self, make_form: FormFactory) -> None:
        form = make_form(
            address=Address(
                street=" ",
                city="",
                state="",
                zip_code="",
                coordinates=Coordinates(lat=1.0, lng=1.0),
            )
        )

        errors = validate_profile_form(form).field_errors

        assert errors == {
            "address.street": "Street is required",
            "address.city": "City is required",
            "address.state": "State is required",
            "address.zip_code": "Zip code is required",
        }

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "ana@example",
            "ana example@x.com",
            "@example.com",
            "ana@.com",
            "",
            "ana@example.com\n",
            " ana@example.com",
        ],
    )
    def test_rejects_malformed_email(self, make_form: FormFactory, email: str) -> None:
        errors = validate_profile_form(make_form(email=email)).field_errors

        assert errors == {"contact.email": "Valid email is required"}

    @pytest.mark.parametrize("email", ["ana@example.com", "a.b+c@mail.co.uk", "x@y.z"])
    def test_accepts_wellformed_email(self, make_form: FormFactory, email: str) -> None:
        assert validate_profile_form(make_form(email=email)).valid

    def test_zero_coordinates_are_unset(self, make_form: FormFactory) -> None:
        errors = validate_profile_form(make_form(lat=0.0, lng=0.0)).field_errors

        assert errors == {"coordinates": "Valid coordinates are required"}

    @pytest.mark.parametrize("interests", [[""], ["chess", "   "], ["\t"]])
    def test_rejects_blank_interests(self, make_form: FormFactory, interests: list[str]) -> None:
        errors = validate_profile_form(make_form(interests=interests)).field_errors

        assert errors == {"interests": "Interests cannot be blank"}

    def test_raise_for_errors_carries_field_errors(self, make_form: FormFactory) -> None:
        result = validate_profile_form(make_form(email="nope"))

        with pytest.raises(ProfileValidationError) as exc_info:
            result.raise_for_errors()

        assert exc_info.value.field_errors == {"contact.email": "Valid email is required"}
        assert exc_info.value.status_code == 422

    def test_non_form_input_is_a_contract_violation(self) -> None:
        with pytest.raises(AssertionError):
            validate_profile_form({"name": "Ana"})  # type: ignore[arg-type]
