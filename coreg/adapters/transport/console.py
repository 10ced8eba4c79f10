"""
Console API client adapter - Implements ApiClient protocol.

This module provides a non-network implementation of the domain's
API client port. It logs each command, keeps a history of what was
executed, and answers with canned payloads. Useful for dry runs and demos.
"""

import logging
from typing import Any

from coreg.domain.command import Command, CommandName, Response

logger = logging.getLogger(__name__)


class ConsoleApiClient:
    """
    Implements ApiClient protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Parameter values are never logged, only their keys.
    """

    def __init__(self) -> None:
        self.history: list[Command] = []
        self._payloads: dict[str, Any] = {}

    def respond(self, name: CommandName | str, payload: Any) -> None:
        """
        Register the payload returned for every command with this name.

        Args:
            name: Command identifier, e.g. ``utils.website-genders``
            payload: Decoded result handed back inside the Response
        """
        self._payloads[CommandName(name).value] = payload

    def execute(self, command: Command) -> Response:
        """
        Log and record the command, then return its canned payload.

        Args:
            command: Command built by the co-registration client

        Returns:
            Response wrapping the registered payload, or None when unset
        """
        name = command.name.value
        logger.info(
            "[COREG] Command: %s Parameters: %s", name, ", ".join(str(key) for key in command.parameters)
        )
        self.history.append(command)
        return Response(self._payloads.get(name))

    def reset(self) -> None:
        """Forget executed commands; canned payloads are kept."""
        self.history.clear()
