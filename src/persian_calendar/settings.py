"""
Environment-driven settings for the command-line entry point.

Library functions take no configuration; only ``persian_calendar.main`` reads
these values. An optional ``.env`` in the working directory is loaded first
without overriding variables that are already set.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "PERSIAN_CALENDAR_"


def _get_env(key: str, *, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(ENV_PREFIX + key, default)
    if val is not None and not val.strip():
        return default
    return val


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise RuntimeError(f"Invalid {ENV_PREFIX}LOG_LEVEL: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    log_file: Optional[str] = None
    log_truncate: int = 300


def load_settings(*, dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from ``PERSIAN_CALENDAR_*`` environment variables."""
    if dotenv:
        load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    truncate_raw = _get_env("LOG_TRUNCATE", default="300")
    try:
        truncate = int(truncate_raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid {ENV_PREFIX}LOG_TRUNCATE: {truncate_raw!r}") from exc

    return Settings(
        log_level=_parse_level(_get_env("LOG_LEVEL", default="WARNING")),
        log_file=_get_env("LOG_FILE"),
        log_truncate=truncate,
    )
