"""Atom elements embedded in RSS (``atom:``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AtomLink:
    """Reference from the feed to a web resource, typically ``rel="self"``."""

    href: str
    rel: Optional[str] = None
    type: Optional[str] = None
