"""
Environment configuration.

Environment Variables:
    UNISTORE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    UNISTORE_LOG_FORMAT: Log format (json, text) - default: json
    UNISTORE_API_BASE_URL: Base URL of the content API - default: http://localhost:8000/api
    UNISTORE_HTTP_TIMEOUT: HTTP timeout in seconds - default: 10
    UNISTORE_METRICS_ENABLED: Enable Prometheus metrics (true/false) - default: false
    UNISTORE_METRICS_PORT: HTTP port for the /metrics endpoint - default: 9100
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .core.errors import ConfigError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_timeout(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def _parse_port(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if not 0 < value < 65536:
        raise ConfigError(f"{name} out of range: {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings, immutable once loaded."""
    log_level: str = "INFO"
    log_format: str = "json"
    api_base_url: str = "http://localhost:8000/api"
    http_timeout: float = 10.0
    metrics_enabled: bool = False
    metrics_port: int = 9100

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Load settings from environment variables.

        Raises:
            ConfigError: If a value cannot be parsed
        """
        env = os.environ if environ is None else environ
        log_format = env.get("UNISTORE_LOG_FORMAT", "json").lower()
        if log_format not in ("json", "text"):
            raise ConfigError(f"UNISTORE_LOG_FORMAT must be 'json' or 'text', got {log_format!r}")

        return Settings(
            log_level=env.get("UNISTORE_LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            api_base_url=env.get("UNISTORE_API_BASE_URL", Settings.api_base_url).rstrip("/"),
            http_timeout=_parse_timeout(
                "UNISTORE_HTTP_TIMEOUT", env.get("UNISTORE_HTTP_TIMEOUT", "10")
            ),
            metrics_enabled=_parse_bool(
                "UNISTORE_METRICS_ENABLED", env.get("UNISTORE_METRICS_ENABLED", "false")
            ),
            metrics_port=_parse_port("UNISTORE_METRICS_PORT", env.get("UNISTORE_METRICS_PORT", "9100")),
        )

    def with_base_url(self, url: str) -> "Settings":
        return replace(self, api_base_url=url.rstrip("/"))
