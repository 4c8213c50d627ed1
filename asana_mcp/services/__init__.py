"""
Service Layer

Everything that talks to Asana lives here. Tools only use AsanaService.
"""

from .asana_client import AsanaClient
from .asana_service import AsanaService, get_asana_service, reset_asana_service
from .errors import AsanaAPIError, AsanaError, ConfigurationError
from .stub_client import StubAsanaClient

__all__ = [
    "AsanaClient",
    "AsanaService",
    "StubAsanaClient",
    "AsanaError",
    "AsanaAPIError",
    "ConfigurationError",
    "get_asana_service",
    "reset_asana_service",
]
