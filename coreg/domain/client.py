"""
Co-registration client - Command building and dispatch.

This module translates the named co-registration operations into
Command instances, applies the minimal input sanitization each one needs,
and hands the command to the injected API client.

Operations
==========

    register             -> register.api
    zip_and_city         -> register.zip-city-lookup
    check_username       -> register.check-username
    check_email          -> utils.email
    get_geo_formats      -> utils.country-geo-formats
    get_website_genders  -> utils.website-genders

Every operation executes exactly one command and returns the transport's
response unchanged. Transport exceptions propagate to the caller as-is.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .command import Command, CommandName
from .exceptions import LookupTermTooShort
from .ports import ApiClient, ApiResponse, RegistrationSource
from .sanitize import filter_empty, sanitize_country, sanitize_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoRegClient:
    """
    Client for the co-registration API.

    Holds the API client for its whole lifetime; frozen so the transport
    cannot be swapped after construction.
    """

    api: ApiClient
    min_term_length: int | None = None

    def register(self, data: Mapping[str, Any] | RegistrationSource) -> ApiResponse:
        """
        Register a member.

        Mandatory fields are ``email`` and ``ip_address``; see
        ``coreg.models.RegistrationRequest`` for the full field list. Every key
        whose value is empty is dropped, whichever form the data comes in.
        Field formats are validated remotely, not here.

        Args:
            data: Registration fields, as a mapping or a typed model

        Returns:
            Transport response
        """
        if not isinstance(data, Mapping):
            data = data.to_parameters()
        parameters = filter_empty(data)
        return self._execute(CommandName.REGISTER, parameters)

    def zip_and_city(self, country: Any, term: Any) -> ApiResponse:
        """
        Get possible zip and city values for a country and search term.

        The term should be at least three characters. This is only enforced
        when ``min_term_length`` is set.

        Raises:
            LookupTermTooShort: If enforcement is on and the term is too short
        """
        sanitized_term = sanitize_string(term)
        if self.min_term_length is not None and len(sanitized_term) < self.min_term_length:
            raise LookupTermTooShort(sanitized_term, self.min_term_length)

        return self._execute(
            CommandName.ZIP_AND_CITY,
            {"country": sanitize_country(country), "term": sanitized_term},
        )

    def check_username(self, username: Any) -> ApiResponse:
        """Check whether a username already has an account on the website."""
        return self._execute(CommandName.CHECK_USERNAME, {"username": sanitize_string(username)})

    def check_email(self, email: Any) -> ApiResponse:
        """Check whether an email already has an account on the website."""
        return self._execute(CommandName.CHECK_EMAIL, {"email": sanitize_string(email)})

    def get_geo_formats(self, country: Any) -> ApiResponse:
        """Get the geo data (city/zip) formats required for a country."""
        return self._execute(CommandName.GEO_FORMATS, {"country": sanitize_country(country)})

    def get_website_genders(self) -> ApiResponse:
        """Fetch the genders available on the website."""
        return self._execute(CommandName.WEBSITE_GENDERS)

    def _execute(self, name: CommandName, parameters: Mapping[str, Any] | None = None) -> ApiResponse:
        command = Command(name, parameters or {})
        if logger.isEnabledFor(logging.DEBUG):
            # Keys only, never values.
            logger.debug("Dispatching %s with keys %s", name.value, [str(key) for key in command.parameters])
        return self.api.execute(command)
