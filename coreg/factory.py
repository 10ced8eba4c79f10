"""
Client factory - Wiring of settings and transport.

Builds a CoRegClient from settings, falling back to the console transport
when no API client is supplied.
"""

from coreg.adapters.transport.console import ConsoleApiClient
from coreg.config.settings import Settings, get_settings
from coreg.domain.client import CoRegClient
from coreg.domain.ports import ApiClient


def create_coreg_client(api: ApiClient | None = None, settings: Settings | None = None) -> CoRegClient:
    """
    Create a co-registration client with injected dependencies.

    Args:
        api: Transport to execute commands with; console client when omitted
        settings: Client settings; environment settings when omitted

    Returns:
        Configured CoRegClient
    """
    settings = settings or get_settings()
    min_term_length = settings.zip_city_min_term_length if settings.enforce_zip_city_term_length else None
    return CoRegClient(api if api is not None else ConsoleApiClient(), min_term_length=min_term_length)
