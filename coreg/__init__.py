"""
coreg - Client library for the co-registration member API.

Builds named commands from typed operations and hands them to an injected
API client for execution.
"""

from coreg.domain import (
    ApiClient,
    ApiResponse,
    Command,
    CommandName,
    CoRegClient,
    CoRegError,
    LookupTermTooShort,
    Response,
)
from coreg.factory import create_coreg_client
from coreg.models import AffiliateTracking, RegistrationRequest

__all__ = [
    "AffiliateTracking",
    "ApiClient",
    "ApiResponse",
    "CoRegClient",
    "CoRegError",
    "Command",
    "CommandName",
    "LookupTermTooShort",
    "RegistrationRequest",
    "Response",
    "create_coreg_client",
]
