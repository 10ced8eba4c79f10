"""
Registration request models.

Pydantic models describing the member registration payload field by field.
Only presence is checked here; field formats (email syntax, country codes,
password confirmation) are validated by the remote API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coreg.domain.sanitize import filter_empty


class AffiliateTracking(BaseModel):
    """Affiliate click data sent along with a registration."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    aff_id: str
    aff_pg: str
    unique: bool = Field(..., alias="_unique", description="Whether the click is unique")
    domain: str = Field(
        ...,
        alias="_domain",
        description="Targeted domain name without protocol, e.g. www.domain.com",
    )

    aff_cp: str | None = None
    aff_tr: str | None = None
    aff_kw: str | None = None
    aff_src: str | None = None
    aff_adg: str | None = None
    http_referer: str | None = Field(None, alias="HTTP_REFERER")

    def to_parameters(self) -> dict[str, Any]:
        """Render affiliate fields under their wire names."""
        parameters = self.model_dump(by_alias=True)
        parameters["_unique"] = 1 if self.unique else 0
        return filter_empty(parameters)


class RegistrationRequest(BaseModel):
    """Member registration payload."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    email: str
    ip_address: str

    username: str | None = Field(None, description="6-20 chars; generated remotely when omitted")
    birthdate: str | None = Field(None, description="ISO date, e.g. 1983-02-10")
    age: int | None = Field(None, description="Calculated from birthdate when omitted")
    gender: int | None = Field(None, description="Site-specific gender identifier")
    looking: int | None = Field(None, description="Site-specific gender identifier being sought")
    title: str | None = Field(None, max_length=255)
    password: str | None = Field(None, description="Generated and returned when omitted")
    password_re: str | None = None
    firstname: str | None = Field(None, max_length=20)
    country: str | None = Field(None, description="ISO 3166-1 alpha-2 code")
    city: str | None = None
    zip: str | None = None

    affiliate: AffiliateTracking | None = None

    def to_parameters(self) -> dict[str, Any]:
        """
        Render the flat parameter mapping sent with ``register.api``.

        Fields that are unset or empty (including 0 and a non-unique click)
        are omitted. Affiliate fields are flattened into the same mapping.
        """
        parameters = filter_empty(self.model_dump(exclude={"affiliate"}))
        if self.affiliate is not None:
            parameters.update(self.affiliate.to_parameters())
        return parameters
