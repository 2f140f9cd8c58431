"""Typed access to encoder settings stored in environment variables.

Settings may also live in ``.env`` style files next to a feed description;
:func:`load_default_env_files` copies them into the environment before
:mod:`podfeed.config` reads it.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Dict, List, Mapping, MutableMapping, Optional, Tuple

__all__ = [
    "get_bool_env",
    "get_int_env",
    "get_str_env",
    "load_env_file",
    "load_default_env_files",
]

log = logging.getLogger(__name__)

_BOOL_WORDS = {
    **dict.fromkeys(("1", "true", "t", "yes", "y", "on"), True),
    **dict.fromkeys(("0", "false", "f", "no", "n", "off"), False),
}

# Optional ``export``, a shell identifier, ``=`` and the raw value.
_ASSIGNMENT_RE = re.compile(r"(?:export\s+)?(?P<key>[A-Za-z_]\w*)\s*=\s*(?P<value>.*)")
# A ``#`` at the start of the value or after whitespace opens a comment.
_INLINE_COMMENT_RE = re.compile(r"(?:^|\s+)#.*$")


def get_bool_env(name: str, default: bool) -> bool:
    """Read a yes/no style flag.

    ``1/0``, ``true/false``, ``t/f``, ``yes/no``, ``y/n`` and ``on/off`` are
    accepted in any case.  Unset or blank variables give ``default``; other
    values log a warning and give ``default`` as well.
    """

    raw = os.getenv(name)
    word = (raw or "").strip().casefold()
    if not word:
        return default
    try:
        return _BOOL_WORDS[word]
    except KeyError:
        log.warning(
            "Invalid boolean value for %s=%r, using default %s "
            "(allowed: 1/0, true/false, yes/no, on/off)",
            name,
            raw,
            default,
        )
        return default


def get_int_env(name: str, default: int) -> int:
    """Read an integer, falling back to ``default`` (with a warning) on bad input."""

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        log.warning("Invalid value for %s=%r, using default %d (%s)", name, raw, default, exc)
        return default


def get_str_env(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _parse_value(raw: str) -> str:
    value = raw.strip()
    if value[:1] in {'"', "'"}:
        if len(value) >= 2 and value[-1] == value[0]:
            return value[1:-1]
        return value
    return _INLINE_COMMENT_RE.sub("", value)


def _parse_assignments(content: str) -> List[Tuple[str, str]]:
    assignments: List[Tuple[str, str]] = []
    for line in content.splitlines():
        line = line.strip()
        if line.startswith("#"):
            continue
        match = _ASSIGNMENT_RE.fullmatch(line)
        if match:
            assignments.append((match["key"], _parse_value(match["value"])))
    return assignments


def load_env_file(
    path: Path,
    *,
    override: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """Copy the assignments in ``path`` into ``environ`` (default: ``os.environ``).

    Variables that are already set win unless ``override`` is true.  Returns
    every assignment found in the file; a missing or unreadable file yields
    an empty mapping.
    """

    env = os.environ if environ is None else environ
    if not path.is_file():
        return {}

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Cannot read env file %s, skipping it (%s: %s)", path, type(exc).__name__, exc)
        return {}

    parsed = dict(_parse_assignments(content))
    for key, value in parsed.items():
        if override or key not in env:
            env[key] = value
    return parsed


def _env_file_candidates(base_dir: Path) -> List[Path]:
    candidates = [base_dir / ".env"]
    for item in os.getenv("PODFEED_ENV_FILES", "").split(os.pathsep):
        item = item.strip()
        if item:
            candidates.append(base_dir / Path(item).expanduser())
    return candidates


def load_default_env_files(
    base_dir: Optional[Path] = None,
    *,
    override: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Mapping[Path, Dict[str, str]]:
    """Load ``.env`` plus every file listed in ``PODFEED_ENV_FILES``.

    Relative entries are resolved against ``base_dir`` (default: the current
    directory).  Returns the non-empty files that were read, in load order.
    """

    base = Path.cwd() if base_dir is None else base_dir
    loaded: Dict[Path, Dict[str, str]] = {}
    for candidate in _env_file_candidates(base):
        parsed = load_env_file(candidate, override=override, environ=environ)
        if parsed:
            loaded[candidate] = parsed
    return loaded
