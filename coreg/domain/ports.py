"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the co-registration
client requires from its collaborators. Adapters implement these protocols
through structural subtyping.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from .command import Command


class ApiResponse(Protocol):
    """Port interface for a transport result wrapper."""

    def get(self) -> Any:
        """
        Return the decoded result payload.

        Returns:
            Whatever the transport decoded from the remote reply
        """
        ...


class ApiClient(Protocol):
    """Port interface for the transport that talks to the remote API."""

    def execute(self, command: Command) -> ApiResponse:
        """
        Execute a single command against the remote API.

        Authentication, URL construction, HTTP encoding and mapping of
        remote errors to exceptions are all the implementation's concern.

        Args:
            command: Operation name and its parameter mapping

        Returns:
            Response wrapper around the decoded result
        """
        ...


class RegistrationSource(Protocol):
    """Port interface for typed registration payloads."""

    def to_parameters(self) -> Mapping[str, Any]:
        """
        Render the outgoing registration parameter mapping.

        Returns:
            Flat mapping containing only fields that carry a value
        """
        ...
