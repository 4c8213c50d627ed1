"""
Settings for the Asana MCP server.

Values come from environment variables; a local .env file is loaded first
if present. No secrets are required at import time: without an access token
the service layer runs on stub responses.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_BASE_URL = "https://app.asana.com/api/1.0"
DEFAULT_TIMEOUT = 30.0


def _env_str(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _env_float(name: str, default: float) -> float:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    access_token: Optional[str]
    workspace_id: Optional[str]
    base_url: str
    timeout: float
    log_level: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            access_token=_env_str("ASANA_ACCESS_TOKEN"),
            workspace_id=_env_str("ASANA_WORKSPACE_ID"),
            base_url=(_env_str("ASANA_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=_env_float("ASANA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT),
            log_level=(_env_str("ASANA_MCP_LOG_LEVEL") or "INFO").upper(),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Re-read settings from the environment (mainly for testing)."""
    global _settings
    _settings = Settings.from_env()
    return _settings
