"""Convert between feed models and JSON-compatible structures.

The JSON layout mirrors the dataclass field names.  Datetimes are ISO 8601
strings (naive values are taken as UTC), durations are seconds (or
``[HH:]MM:SS[.mmm]`` strings) and enums are written by value.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import MISSING, fields, is_dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from dateutil import parser as dtparser

from .codecs import decode_chapter_timestamp
from .constants import DEFAULT_NAMESPACES
from .errors import CodecError, FeedLoadError
from .models import Feed

__all__ = ["feed_from_dict", "feed_to_dict", "load_feed", "to_jsonable"]

log = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _parse_datetime(value: Any, path: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise FeedLoadError(f"{path}: expected an ISO 8601 string, got {type(value).__name__}")
    try:
        parsed = dtparser.isoparse(value.strip())
    except (ValueError, OverflowError) as exc:
        raise FeedLoadError(f"{path}: invalid datetime {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_duration(value: Any, path: str) -> timedelta:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise FeedLoadError(f"{path}: expected seconds, got a boolean")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    if isinstance(value, str):
        try:
            return decode_chapter_timestamp(value)
        except CodecError as exc:
            raise FeedLoadError(f"{path}: {exc}") from exc
    raise FeedLoadError(f"{path}: expected seconds, got {type(value).__name__}")


def _expect(value: Any, kind: Union[type, tuple], path: str, label: str) -> None:
    if isinstance(value, bool) and kind is not bool:
        raise FeedLoadError(f"{path}: expected {label}, got a boolean")
    if not isinstance(value, kind):
        raise FeedLoadError(f"{path}: expected {label}, got {type(value).__name__}")


def _convert(tp: Any, value: Any, path: str) -> Any:
    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Union:
        if value is None:
            return None
        options = [arg for arg in args if arg is not type(None)]
        return _convert(options[0], value, path)
    if origin in (list, set):
        _expect(value, (list, tuple, set), path, "a list")
        converted = [_convert(args[0], entry, f"{path}[{i}]") for i, entry in enumerate(value)]
        return converted if origin is list else set(converted)
    if origin is dict:
        _expect(value, Mapping, path, "an object")
        return {str(key): _convert(args[1], entry, f"{path}.{key}") for key, entry in value.items()}

    if is_dataclass(tp):
        return _build(tp, value, path)
    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError as exc:
            allowed = ", ".join(str(member.value) for member in tp)
            raise FeedLoadError(f"{path}: {value!r} is not one of {allowed}") from exc
    if tp is datetime:
        return _parse_datetime(value, path)
    if tp is timedelta:
        return _parse_duration(value, path)
    if tp is bool:
        _expect(value, bool, path, "true or false")
        return value
    if tp is int:
        _expect(value, int, path, "an integer")
        return value
    if tp is float:
        _expect(value, (int, float), path, "a number")
        return float(value)
    if tp is str:
        _expect(value, str, path, "a string")
        return value
    raise FeedLoadError(f"{path}: unsupported field type {tp!r}")


def _build(cls: Type[T], data: Any, path: str) -> T:
    _expect(data, Mapping, path, "an object")
    hints = _hints(cls)
    known = {f.name: f for f in fields(cls)}

    unknown = sorted(set(data) - set(known))
    if unknown:
        raise FeedLoadError(f"{path}: unknown field(s) {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    for name, spec in known.items():
        if name not in data:
            if spec.default is MISSING and spec.default_factory is MISSING:
                raise FeedLoadError(f"{path}.{name}: missing required field")
            continue
        kwargs[name] = _convert(hints[name], data[name], f"{path}.{name}")
    return cls(**kwargs)


def feed_from_dict(data: Mapping[str, Any]) -> Feed:
    """Build a :class:`Feed` from a JSON-compatible mapping."""

    feed = _build(Feed, data, "feed")
    for name, prefixes in (
        ("namespaces", feed.namespaces),
        ("namespace_overrides", feed.namespace_overrides),
    ):
        unknown = sorted(set(prefixes) - set(DEFAULT_NAMESPACES))
        if unknown:
            raise FeedLoadError(f"feed.{name}: unknown namespace prefix(es) {', '.join(unknown)}")
    return feed


def load_feed(path: Union[str, Path]) -> Feed:
    """Read a JSON feed description from ``path``."""

    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise FeedLoadError(f"{source}: invalid JSON ({exc})") from exc
    feed = feed_from_dict(data)
    log.debug("Loaded feed description %s with %d item(s)", source, len(feed.channel.items))
    return feed


def to_jsonable(value: Any) -> Any:
    """Recursively convert models into JSON-serializable structures.

    Unset (``None``) fields are left out.
    """

    if is_dataclass(value) and not isinstance(value, type):
        result: Dict[str, Any] = {}
        for f in fields(value):
            item = getattr(value, f.name)
            if item is not None:
                result[f.name] = to_jsonable(item)
        return result
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, dict):
        return {key: to_jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, set):
        return sorted((to_jsonable(item) for item in value), key=str)
    return value


def feed_to_dict(feed: Feed) -> Dict[str, Any]:
    """Inverse of :func:`feed_from_dict`."""

    return to_jsonable(feed)
