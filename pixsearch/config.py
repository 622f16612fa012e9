"""Runtime configuration read from environment variables.

Variables:
    PIXSEARCH_API_BASE_URL: Search endpoint (default ``https://pixabay.com/api/``).
    PIXSEARCH_API_KEY: Pixabay API key.
    PIXSEARCH_TIMEOUT_S: Per-request timeout in seconds.
    PIXSEARCH_MAX_WORKERS: Worker threads for callback-style requests.
    PIXSEARCH_LOG_LEVEL: Root log level, by name or number.
    PIXSEARCH_DEBUG: Truthy value selects DEBUG when no level is given.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pixsearch.adapters.connectivity import DEFAULT_CHECK_HOST, DEFAULT_CHECK_PORT
from pixsearch.adapters.photo_search_rest import DEFAULT_BASE_URL
from pixsearch.utils.logging import parse_level

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    api_base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    request_timeout_s: float = 10.0
    max_workers: int = 4
    connectivity_host: str = DEFAULT_CHECK_HOST
    connectivity_port: int = DEFAULT_CHECK_PORT
    connectivity_timeout_s: float = 1.5
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            api_base_url=(env.get("PIXSEARCH_API_BASE_URL") or defaults.api_base_url).strip(),
            api_key=(env.get("PIXSEARCH_API_KEY") or "").strip(),
            request_timeout_s=_positive(
                env.get("PIXSEARCH_TIMEOUT_S"), float, defaults.request_timeout_s, "PIXSEARCH_TIMEOUT_S"
            ),
            max_workers=_positive(
                env.get("PIXSEARCH_MAX_WORKERS"), int, defaults.max_workers, "PIXSEARCH_MAX_WORKERS"
            ),
            log_level=_log_level(env, defaults.log_level),
        )


def _positive(raw, cast, fallback, name):
    if raw is None or not str(raw).strip():
        return fallback
    try:
        value = cast(str(raw).strip())
    except ValueError:
        _log.warning("Ignoring invalid %s=%r", name, raw)
        return fallback
    if value <= 0:
        _log.warning("Ignoring non-positive %s=%r", name, raw)
        return fallback
    return value


def _log_level(env, fallback):
    raw = env.get("PIXSEARCH_LOG_LEVEL")
    if raw and raw.strip():
        level = parse_level(raw)
        if level is None:
            _log.warning("Ignoring unknown PIXSEARCH_LOG_LEVEL=%r", raw)
            return fallback
        return level
    if (env.get("PIXSEARCH_DEBUG") or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return fallback


__all__ = ["AppConfig"]
