"""
Domain layer - Command building with zero framework imports.

This package contains the co-registration client core. It defines its own
port interfaces for the transport, so any API client implementation can be
injected without the domain knowing about HTTP or serialization.
"""

from .client import CoRegClient
from .command import Command, CommandName, Response
from .exceptions import CoRegError, LookupTermTooShort
from .ports import ApiClient, ApiResponse, RegistrationSource
from .sanitize import filter_empty, sanitize_country, sanitize_string

__all__ = [
    "ApiClient",
    "ApiResponse",
    "CoRegClient",
    "CoRegError",
    "Command",
    "CommandName",
    "LookupTermTooShort",
    "RegistrationSource",
    "Response",
    "filter_empty",
    "sanitize_country",
    "sanitize_string",
]
