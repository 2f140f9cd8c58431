"""Exceptions raised while validating and encoding feeds."""

from __future__ import annotations

from typing import Iterable, Tuple


class FeedError(Exception):
    """Base class for all podfeed errors."""


class FeedValidationError(FeedError):
    """Raised when a required field is empty at encode time.

    ``problems`` holds one ``(path, message)`` pair per violation, e.g.
    ``("channel.items[0].enclosure.url", "must not be empty")``.
    """

    def __init__(self, problems: Iterable[Tuple[str, str]]) -> None:
        self.problems: Tuple[Tuple[str, str], ...] = tuple(problems)
        summary = "; ".join(f"{path}: {message}" for path, message in self.problems)
        count = len(self.problems)
        noun = "problem" if count == 1 else "problems"
        super().__init__(f"feed failed validation ({count} {noun}): {summary}")


class FeedEncodingError(FeedError):
    """Raised when a value cannot be rendered into a valid document."""


class CodecError(FeedEncodingError, ValueError):
    """Raised when a scalar value cannot be encoded or decoded."""


class FeedLoadError(FeedError, ValueError):
    """Raised when a feed description (e.g. JSON) cannot be turned into models."""


class UnknownNamespaceError(FeedError, KeyError):
    """Raised when a namespace prefix is not one of the supported extensions."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        super().__init__(prefix)

    def __str__(self) -> str:
        return f"unknown namespace prefix {self.prefix!r}"


__all__ = [
    "CodecError",
    "FeedEncodingError",
    "FeedError",
    "FeedLoadError",
    "FeedValidationError",
    "UnknownNamespaceError",
]
