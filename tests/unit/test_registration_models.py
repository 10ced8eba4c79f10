"""
Unit tests for the registration request models.

Tests verify:
- Mandatory fields are required
- Only present fields are rendered
- Affiliate data is flattened under its wire names
"""

import pytest
from pydantic import ValidationError

from coreg.models import AffiliateTracking, RegistrationRequest


def make_affiliate(**overrides: object) -> AffiliateTracking:
    """Build affiliate data with valid mandatory fields."""
    fields: dict[str, object] = {
        "aff_id": "1001",
        "aff_pg": "55",
        "_unique": True,
        "_domain": "www.domain.com",
    }
    fields.update(overrides)
    return AffiliateTracking.model_validate(fields)


class TestRegistrationRequestValidation:
    """Tests for presence validation."""

    def test_email_required(self) -> None:
        """Missing email raises ValidationError."""
        with pytest.raises(ValidationError):
            RegistrationRequest.model_validate({"ip_address": "1.2.3.4"})

    def test_ip_address_required(self) -> None:
        """Missing ip_address raises ValidationError."""
        with pytest.raises(ValidationError):
            RegistrationRequest.model_validate({"email": "a@b.com"})

    def test_unknown_field_rejected(self) -> None:
        """Typos in field names are caught."""
        with pytest.raises(ValidationError):
            RegistrationRequest.model_validate(
                {"email": "a@b.com", "ip_address": "1.2.3.4", "user_name": "x"}
            )

    def test_email_format_not_checked(self) -> None:
        """Email syntax is left to the remote API."""
        request = RegistrationRequest(email="not-an-email", ip_address="1.2.3.4")
        assert request.email == "not-an-email"

    def test_title_length_limit(self) -> None:
        """Title is limited to 255 characters."""
        with pytest.raises(ValidationError):
            RegistrationRequest(email="a@b.com", ip_address="1.2.3.4", title="x" * 256)


class TestRegistrationRequestParameters:
    """Tests for to_parameters rendering."""

    def test_minimal_request(self) -> None:
        """Only mandatory fields are rendered when nothing else is set."""
        request = RegistrationRequest(email="a@b.com", ip_address="1.2.3.4")

        assert request.to_parameters() == {"email": "a@b.com", "ip_address": "1.2.3.4"}

    def test_empty_strings_omitted(self) -> None:
        """Empty optional strings are not sent."""
        request = RegistrationRequest(email="a@b.com", ip_address="1.2.3.4", username="", city="")

        assert request.to_parameters() == {"email": "a@b.com", "ip_address": "1.2.3.4"}

    def test_zero_integers_omitted(self) -> None:
        """Integer fields set to zero are not sent."""
        request = RegistrationRequest(email="a@b.com", ip_address="1.2.3.4", gender=0, age=0, looking=0)

        assert request.to_parameters() == {"email": "a@b.com", "ip_address": "1.2.3.4"}

    def test_string_zero_omitted(self) -> None:
        """A "0" string counts as empty."""
        request = RegistrationRequest(email="a@b.com", ip_address="1.2.3.4", zip="0")

        assert "zip" not in request.to_parameters()

    def test_full_profile(self) -> None:
        """All populated fields are rendered."""
        request = RegistrationRequest(
            email="a@b.com",
            ip_address="1.2.3.4",
            username="geoffrey_83",
            birthdate="1983-02-10",
            age=32,
            gender=1,
            looking=2,
            title="I'm awesome",
            password="secret",
            password_re="secret",
            firstname="Geoffrey",
            country="BR",
            city="Sao Paolo",
            zip="24108",
        )

        parameters = request.to_parameters()
        assert parameters["birthdate"] == "1983-02-10"
        assert parameters["looking"] == 2
        assert parameters["zip"] == "24108"
        assert len(parameters) == 14


class TestAffiliateTracking:
    """Tests for affiliate data."""

    def test_mandatory_fields(self) -> None:
        """aff_id, aff_pg, _unique and _domain are required."""
        with pytest.raises(ValidationError):
            AffiliateTracking.model_validate({"aff_id": "1", "aff_pg": "2", "_unique": True})

    def test_wire_names(self) -> None:
        """Underscore-prefixed and referer fields use their wire names."""
        affiliate = make_affiliate(aff_kw="dating", HTTP_REFERER="https://ref.example")

        assert affiliate.to_parameters() == {
            "aff_id": "1001",
            "aff_pg": "55",
            "_unique": 1,
            "_domain": "www.domain.com",
            "aff_kw": "dating",
            "HTTP_REFERER": "https://ref.example",
        }

    def test_non_unique_click_omitted(self) -> None:
        """A non-unique click sends no _unique key at all."""
        parameters = make_affiliate(_unique=False).to_parameters()

        assert "_unique" not in parameters
        assert parameters == {"aff_id": "1001", "aff_pg": "55", "_domain": "www.domain.com"}

    def test_unique_click_sent_as_one(self) -> None:
        """A unique click is sent as 1."""
        assert make_affiliate().to_parameters()["_unique"] == 1

    def test_flattened_into_registration(self) -> None:
        """Affiliate fields land in the top-level registration mapping."""
        request = RegistrationRequest(
            email="a@b.com",
            ip_address="1.2.3.4",
            affiliate=make_affiliate(aff_src="banner"),
        )

        parameters = request.to_parameters()
        assert "affiliate" not in parameters
        assert parameters["aff_src"] == "banner"
        assert parameters["_domain"] == "www.domain.com"
        assert parameters["_unique"] == 1
