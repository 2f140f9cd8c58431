"""Logging utilities for sanitizing messages before they reach a handler."""

from __future__ import annotations

import re

# Precompiled regexes for sanitization
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
# ANSI escape codes: CSI, OSC, Fe and two-byte sequences
_ANSI_ESCAPE_RE = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\^_]|[\x20-\x2f][\x30-\x7e])"
)
# user:password@ in URLs (funding or feed URLs may carry credentials)
_URL_CREDENTIALS_RE = re.compile(r"(?i)([a-z0-9+.-]+://)([^/@\s]+)@")


def sanitize_log_message(text: str, strip_control_chars: bool = True) -> str:
    """
    Sanitize log messages by masking URL credentials and removing control characters.

    Args:
        text: The raw message string to sanitize.
        strip_control_chars: If True (default), newlines and other control characters
                             are escaped or removed to prevent log injection.
                             Set to False for tracebacks where readability is needed.

    Returns:
        The sanitized string.
    """
    if not text:
        return ""

    sanitized = _ANSI_ESCAPE_RE.sub("", text)
    sanitized = _URL_CREDENTIALS_RE.sub(r"\1***@", sanitized)

    if strip_control_chars:
        sanitized = sanitized.replace("\n", "\\n").replace("\r", "\\r").replace("\t", "\\t")
        sanitized = _CONTROL_CHARS_RE.sub("", sanitized)

    return sanitized

