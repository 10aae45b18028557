# File: vuze_client/config.py
"""Configuration module."""

import logging
import math
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from vuze_client.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

MAX_PORT = 65535


def _parse_env_int(key: str, default: int) -> int:
    """Parse an integer environment variable safely.

    Handles cases where values might be passed as float strings (e.g., "3.0")
    by container orchestrators.

    Args:
        key: The environment variable key.
        default: The default value if missing or invalid.

    Returns:
        int: The parsed integer.
    """
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        return int(float(raw.strip()))
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid value for {key}: '{raw}'. Using {default}.")
        return default


def _parse_env_float(key: str, default: float) -> float:
    """Parse a float environment variable safely.

    Non-numeric and non-finite values (nan, inf) fall back to the default.

    Args:
        key: The environment variable key.
        default: The default value if missing or invalid.

    Returns:
        float: The parsed float.
    """
    raw = os.getenv(key)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except (ValueError, TypeError):
        value = math.nan
    if not math.isfinite(value):
        logger.warning(f"Ignoring invalid value for {key}: '{raw}'. Using {default}.")
        return default
    return value


def _parse_env_str(key: str) -> str | None:
    """Return a stripped environment string, treating blanks as unset."""
    raw = os.getenv(key)
    if raw is None:
        return None
    cleaned = raw.strip(" \"'")
    return cleaned or None


@dataclass
class ClientConfig:
    """Connection settings for one Vuze XML/HTTP session.

    ``timeout`` is in seconds; ``None`` means a hung daemon blocks the caller
    indefinitely.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    username: str | None = None
    password: str | None = None
    scheme: str = "http"
    timeout: float | None = DEFAULT_TIMEOUT

    @property
    def has_credentials(self) -> bool:
        """Basic auth is only attached when both halves are present."""
        return bool(self.username) and bool(self.password)

    @property
    def base_url(self) -> str:
        """Return the scheme://host:port prefix of the plugin endpoint."""
        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a configuration from ``VUZE_*`` environment variables.

        ``VUZE_URL`` (e.g. ``http://nas:6884``) takes precedence over
        ``VUZE_HOST``/``VUZE_PORT`` for the parts it specifies.
        ``VUZE_TIMEOUT`` accepts fractional seconds; zero or a negative value disables the deadline.
        """
        host = _parse_env_str("VUZE_HOST") or DEFAULT_HOST
        port = _parse_env_int("VUZE_PORT", DEFAULT_PORT)
        scheme = _parse_env_str("VUZE_SCHEME") or "http"

        raw_url = _parse_env_str("VUZE_URL")
        if raw_url:
            try:
                parsed = urlparse(raw_url)
                host = parsed.hostname or host
                port = parsed.port or port
                if parsed.scheme:
                    scheme = parsed.scheme
            except ValueError as e:
                logger.warning(f"Failed to parse VUZE_URL: {e}. Using VUZE_HOST/VUZE_PORT values.")

        raw_timeout = _parse_env_float("VUZE_TIMEOUT", DEFAULT_TIMEOUT)
        timeout: float | None = raw_timeout if raw_timeout > 0 else None

        config = cls(
            host=host,
            port=port,
            username=_parse_env_str("VUZE_USERNAME"),
            password=_parse_env_str("VUZE_PASSWORD"),
            scheme=scheme.lower(),
            timeout=timeout,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Validate the settings before any connection is attempted.

        Raises:
            ValueError: If host, port, scheme or timeout are unusable.
        """
        if not self.host:
            logger.critical("Configuration Error: Vuze host is empty.")
            raise ValueError("Vuze host must be set.")

        if not 1 <= self.port <= MAX_PORT:
            logger.critical(f"Configuration Error: Invalid Vuze port '{self.port}'.")
            raise ValueError(f"Invalid Vuze port '{self.port}'.")

        if self.scheme not in ("http", "https"):
            logger.critical(f"Configuration Error: Invalid scheme '{self.scheme}'. Must be 'http' or 'https'.")
            raise ValueError(f"Invalid scheme '{self.scheme}'.")

        if self.timeout is not None and self.timeout < 0:
            raise ValueError(f"Invalid timeout '{self.timeout}'.")

        if bool(self.username) != bool(self.password):
            logger.warning(
                "Configuration Warning: Only one of username/password is set. "
                "Requests will be sent without an Authorization header."
            )
