"""Transport adapters - ApiClient implementations."""

from .console import ConsoleApiClient

__all__ = ["ConsoleApiClient"]
