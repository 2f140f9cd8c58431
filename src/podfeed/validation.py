"""Pre-flight checks run before a feed is serialized.

Missing required values are schema violations and raise
:class:`~podfeed.errors.FeedValidationError`.  With ``strict_urls`` enabled,
URL-typed fields must be absolute http(s) URLs and GUID fields must be
UUIDs; violations of those raise :class:`~podfeed.errors.FeedEncodingError`.
Every problem is collected with a dotted path before anything is raised.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Any, List, Tuple
from urllib.parse import urlparse

from .errors import FeedEncodingError, FeedValidationError
from .models import Feed
from .schema import (
    CHANNEL,
    CHECK_UNSIGNED,
    CHECK_URL,
    CHECK_UUID,
    ElementSpec,
    Field,
    field_value,
)

__all__ = ["collect_problems", "is_http_url", "validate_feed"]

log = logging.getLogger(__name__)

Problem = Tuple[str, str]

_CONTROL_OR_SPACE_RE = re.compile(r"[\s\x00-\x1f\x7f]")


def is_http_url(value: Any) -> bool:
    """Return ``True`` for absolute ``http``/``https`` URLs with a host."""

    if not isinstance(value, str) or not value:
        return False
    if _CONTROL_OR_SPACE_RE.search(value):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return parsed.scheme.lower() in {"http", "https"} and bool(parsed.hostname)


def _is_uuid(value: Any) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _join(path: str, name: str) -> str:
    return path if name == "." else f"{path}.{name}"


class _Collector:
    def __init__(self, strict_urls: bool) -> None:
        self.strict_urls = strict_urls
        self.schema: List[Problem] = []
        self.format: List[Problem] = []

    def check_field(self, spec: Field, owner: Any, path: str) -> None:
        value = field_value(owner, spec.field)
        where = _join(path, spec.field)
        if spec.required and _is_blank(value):
            self.schema.append((where, "must not be empty"))
            return
        if value is None:
            return
        if spec.check == CHECK_UNSIGNED:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                self.schema.append((where, "must be a non-negative integer"))
        elif not self.strict_urls:
            return
        elif spec.check == CHECK_URL and not is_http_url(value):
            self.format.append((where, f"not an absolute http(s) URL: {value!r}"))
        elif spec.check == CHECK_UUID and not _is_uuid(value):
            self.format.append((where, f"not a UUID: {value!r}"))

    def visit(self, spec: ElementSpec, value: Any, path: str) -> None:
        for attr in spec.attributes:
            self.check_field(attr, value, path)
        if spec.text is not None:
            self.check_field(spec.text, value, path)
        for child in spec.children:
            raw = field_value(value, child.field)
            if raw is None:
                continue
            child_path = f"{path}.{child.field}"
            if child.repeated:
                for index, entry in enumerate(raw):
                    self.visit(child.spec, entry, f"{child_path}[{index}]")
            else:
                self.visit(child.spec, raw, child_path)


def _collect(feed: Feed, strict_urls: bool) -> _Collector:
    collector = _Collector(strict_urls)
    if _is_blank(feed.version):
        collector.schema.append(("version", "must not be empty"))
    collector.visit(CHANNEL, feed.channel, "channel")
    return collector


def collect_problems(feed: Feed, *, strict_urls: bool = False) -> List[Problem]:
    """Return every ``(path, message)`` problem found in ``feed``."""

    collector = _collect(feed, strict_urls)
    return collector.schema + collector.format


def validate_feed(feed: Feed, *, strict_urls: bool = False) -> None:
    """Raise if ``feed`` cannot be encoded into a valid document."""

    collector = _collect(feed, strict_urls)

    if collector.schema:
        log.warning("Feed validation failed with %d problem(s)", len(collector.schema))
        raise FeedValidationError(collector.schema)
    if collector.format:
        summary = "; ".join(f"{path}: {message}" for path, message in collector.format)
        log.warning("Feed has %d malformed value(s)", len(collector.format))
        raise FeedEncodingError(f"malformed values: {summary}")
