"""Encoder and logging settings read from environment variables.

Values are loaded once on import.  Call :func:`refresh_from_env` after
changing the environment (for example after loading ``.env`` files) and
:func:`build_settings` to get an immutable snapshot.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils.env import get_bool_env, get_int_env, get_str_env

DEFAULT_INDENT_WIDTH = 0
DEFAULT_XML_DECLARATION = False
DEFAULT_VALIDATE = True
DEFAULT_STRICT_URLS = False

_LOG_FORMATS = {"plain", "json"}


@dataclass(frozen=True)
class EncoderSettings:
    """Defaults applied by the encoder when a call leaves an option unset."""

    indent: str
    xml_declaration: bool
    validate: bool
    strict_urls: bool


def _load_from_env() -> None:
    global INDENT_WIDTH, XML_DECLARATION, VALIDATE, STRICT_URLS
    global LOG_LEVEL, LOG_FORMAT, LOG_DIR_PATH, LOG_MAX_BYTES, LOG_BACKUP_COUNT

    INDENT_WIDTH = max(get_int_env("PODFEED_INDENT", DEFAULT_INDENT_WIDTH), 0)
    XML_DECLARATION = get_bool_env("PODFEED_XML_DECLARATION", DEFAULT_XML_DECLARATION)
    VALIDATE = get_bool_env("PODFEED_VALIDATE", DEFAULT_VALIDATE)
    STRICT_URLS = get_bool_env("PODFEED_STRICT_URLS", DEFAULT_STRICT_URLS)

    LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = get_str_env("LOG_FORMAT", "plain").lower()
    if LOG_FORMAT not in _LOG_FORMATS:
        LOG_FORMAT = "plain"
    raw_log_dir = os.getenv("PODFEED_LOG_DIR", "").strip()
    LOG_DIR_PATH = Path(raw_log_dir).expanduser() if raw_log_dir else None
    LOG_MAX_BYTES = max(get_int_env("LOG_MAX_BYTES", 1_000_000), 0)
    LOG_BACKUP_COUNT = max(get_int_env("LOG_BACKUP_COUNT", 5), 0)


INDENT_WIDTH: int
XML_DECLARATION: bool
VALIDATE: bool
STRICT_URLS: bool
LOG_LEVEL: str
LOG_FORMAT: str
LOG_DIR_PATH: Optional[Path]
LOG_MAX_BYTES: int
LOG_BACKUP_COUNT: int

_load_from_env()


def refresh_from_env() -> None:
    """Re-evaluate all settings from environment variables."""

    _load_from_env()


def build_settings() -> EncoderSettings:
    """Assemble the active encoder settings."""

    return EncoderSettings(
        indent=" " * INDENT_WIDTH,
        xml_declaration=XML_DECLARATION,
        validate=VALIDATE,
        strict_urls=STRICT_URLS,
    )


__all__ = [
    "EncoderSettings",
    "INDENT_WIDTH",
    "LOG_BACKUP_COUNT",
    "LOG_DIR_PATH",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "LOG_MAX_BYTES",
    "STRICT_URLS",
    "VALIDATE",
    "XML_DECLARATION",
    "build_settings",
    "refresh_from_env",
]
