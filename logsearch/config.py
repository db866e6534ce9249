"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _get_flag(name: str, default: str) -> bool:
    return _get_env(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    search_url: str = _get_env("SEARCH_URL", "http://localhost:8080/search")
    query_param: str = _get_env("SEARCH_QUERY_PARAM", "q")
    request_timeout_seconds: float = float(_get_env("REQUEST_TIMEOUT_SECONDS", "10"))
    discard_stale_responses: bool = _get_flag("DISCARD_STALE_RESPONSES", "false")
    data_dir: str = _get_env("DATA_DIR", "data")
    service_host: str = _get_env("SERVICE_HOST", "0.0.0.0")
    service_port: int = int(_get_env("SERVICE_PORT", "8080"))
    log_level: str = _get_env("LOG_LEVEL", "INFO")


settings = Settings()
