"""
Command and response value objects.

A Command pairs one of the fixed remote operation names with its
parameter mapping. It is created per call and discarded after dispatch.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class CommandName(str, Enum):
    """Remote operation identifiers understood by the co-registration API."""

    REGISTER = "register.api"
    ZIP_AND_CITY = "register.zip-city-lookup"
    CHECK_USERNAME = "register.check-username"
    CHECK_EMAIL = "utils.email"
    GEO_FORMATS = "utils.country-geo-formats"
    WEBSITE_GENDERS = "utils.website-genders"


@dataclass(frozen=True)
class Command:
    """
    Named remote-operation request paired with its parameter mapping.

    The name must be one of the known operations; a plain identifier
    string is converted to its CommandName. Parameters are copied on
    construction and exposed read-only, so a command cannot change between
    being built and being executed.

    Raises:
        ValueError: If the name is not a known operation
    """

    name: CommandName
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", CommandName(self.name))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))


@dataclass(frozen=True)
class Response:
    """Wrapper around a decoded transport result."""

    payload: Any = None

    def get(self) -> Any:
        """Return the decoded result payload."""
        return self.payload
