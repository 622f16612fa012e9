"""Root logger setup shared by scripts and ``pixsearch.app.composition``."""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Libraries whose records are only useful when the transport itself misbehaves.
_TRANSPORT_LOGGERS = ("urllib3", "requests")


def parse_level(value: Union[int, str, None]) -> Optional[int]:
    """Turn ``"debug"``, ``"10"`` or ``logging.DEBUG`` into a level number.

    Returns None for blank or unknown names so callers can pick their own
    fallback.
    """
    if isinstance(value, int):
        return value
    text = (value or "").strip().upper()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else None


def configure_root(level: Union[int, str] = logging.INFO) -> int:
    """Attach one stream handler to the root logger and apply ``level``.

    Transport libraries stay at WARNING unless ``level`` is stricter.
    Returns the level that was applied.
    """
    effective = parse_level(level)
    if effective is None:
        effective = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root.addHandler(handler)
    root.setLevel(effective)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(effective, logging.WARNING))
    return effective
