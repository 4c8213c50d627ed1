"""Exceptions raised by the Asana service layer."""

from typing import Dict, List, Optional


class AsanaError(Exception):
    """Base exception for Asana service errors."""


class ConfigurationError(AsanaError):
    """Raised when the API client cannot be built from the current settings."""


class AsanaAPIError(AsanaError):
    """Asana API error carrying the HTTP status and the response's error array."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
