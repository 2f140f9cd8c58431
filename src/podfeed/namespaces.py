"""Decide which ``xmlns:*`` declarations go on the ``<rss>`` element."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Set, Tuple

from .constants import DEFAULT_NAMESPACES
from .errors import UnknownNamespaceError
from .models import Feed
from .schema import CHANNEL, ElementSpec, field_value

__all__ = ["collect_prefixes", "prefix_of", "resolve_namespaces", "namespaces_for"]

log = logging.getLogger(__name__)


def prefix_of(name: str) -> str:
    """Return the namespace prefix of a qualified name, or ``""``."""

    prefix, sep, _ = name.partition(":")
    return prefix if sep else ""


def collect_prefixes(spec: ElementSpec, value: Any) -> Set[str]:
    """Prefixes of every element and attribute that ``value`` will emit."""

    used: Set[str] = set()

    def visit(spec: ElementSpec, value: Any) -> None:
        used.add(prefix_of(spec.tag))
        for attr in spec.attributes:
            if field_value(value, attr.field) is not None:
                used.add(prefix_of(attr.name))
        for child in spec.children:
            raw = field_value(value, child.field)
            if raw is None:
                continue
            for entry in raw if child.repeated else (raw,):
                visit(child.spec, entry)

    visit(spec, value)
    used.discard("")
    return used


def _check_known(prefixes: Iterable[str]) -> None:
    for prefix in prefixes:
        if prefix not in DEFAULT_NAMESPACES:
            raise UnknownNamespaceError(prefix)


def resolve_namespaces(
    used: Iterable[str],
    forced: Iterable[str] = (),
    overrides: Optional[Mapping[str, str]] = None,
) -> List[Tuple[str, str]]:
    """Return ``(attribute, uri)`` pairs in declaration order.

    A non-empty override is always declared with its own URI, an empty one
    suppresses the declaration.  Otherwise a prefix is declared when it is
    used or forced.
    """

    overrides = overrides or {}
    used = set(used)
    forced = set(forced)
    _check_known(used)
    _check_known(forced)
    _check_known(overrides)

    declarations: List[Tuple[str, str]] = []
    for prefix, default_uri in DEFAULT_NAMESPACES.items():
        override = overrides.get(prefix)
        if override is not None:
            if override:
                declarations.append((f"xmlns:{prefix}", override))
            elif prefix in used:
                log.debug("Namespace %s is used but its declaration is suppressed", prefix)
            continue
        if prefix in used or prefix in forced:
            declarations.append((f"xmlns:{prefix}", default_uri))
    return declarations


def namespaces_for(feed: Feed) -> List[Tuple[str, str]]:
    """Namespace declarations for ``feed`` based on the fields it sets."""

    used = collect_prefixes(CHANNEL, feed.channel)
    return resolve_namespaces(used, feed.namespaces, feed.namespace_overrides)
