"""
Configuration module for table_reader.

Loads environment variables from .env file and exposes the Supabase endpoint
settings as an EndpointConfig.
"""

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

DEFAULT_TABLE = "api test"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(Exception):
    """A required setting is missing or malformed."""
    pass


@dataclass(frozen=True)
class EndpointConfig:
    """Where to send the table query and how to authenticate it."""
    url: str
    api_key: str
    table: str = DEFAULT_TABLE
    timeout: float | None = None  # None blocks until the server answers
    encode_table: bool = False


def _get(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def check_log_level(level: str) -> str:
    """Return the upper-cased level name, or raise ConfigError if logging has no such level."""
    level = level.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return level


def load_endpoint_config() -> EndpointConfig:
    """
    Build an EndpointConfig from the current environment.

    Raises:
        ConfigError: SUPABASE_URL or the API key is missing, or
            SUPABASE_TIMEOUT is not a finite positive number.
    """
    url = _get("SUPABASE_URL").rstrip("/")
    if not url:
        raise ConfigError("SUPABASE_URL is not set")

    api_key = _get("SUPABASE_ANON_KEY") or _get("SUPABASE_SERVICE_ROLE_KEY")
    if not api_key:
        raise ConfigError("SUPABASE_ANON_KEY (or SUPABASE_SERVICE_ROLE_KEY) is not set")

    timeout = None
    raw_timeout = _get("SUPABASE_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"SUPABASE_TIMEOUT must be a number, got {raw_timeout!r}")
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(f"SUPABASE_TIMEOUT must be a finite positive number, got {raw_timeout!r}")

    return EndpointConfig(
        url=url,
        api_key=api_key,
        table=_get("SUPABASE_TABLE") or DEFAULT_TABLE,
        timeout=timeout,
        encode_table=_get("SUPABASE_ENCODE_TABLE").lower() in _TRUTHY,
    )
