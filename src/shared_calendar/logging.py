from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .config import DATA_DIR

LOG_LEVEL = os.getenv("CALENDAR_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("CALENDAR_LOG_DIR", DATA_DIR / "logs"))
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty transport loggers pulled in by supabase-py and hypercorn.
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "hypercorn.access")

_INITIALIZED = False


def _resolve_level(level: Optional[str]) -> int:
    resolved = logging.getLevelName((level or LOG_LEVEL).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers(log_file: Path) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"),
    ]
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> None:
    """Log to the console and to a rotating file under ``CALENDAR_LOG_DIR``.

    ``level`` overrides ``CALENDAR_LOG_LEVEL``; unknown names fall back to INFO.
    Only the first call in a process has an effect.
    """

    global _INITIALIZED
    if _INITIALIZED:
        return

    log_file = log_path or LOG_DIR / "shared_calendar.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging configured. Output file: %s", log_file)


__all__ = ["configure_logging"]
