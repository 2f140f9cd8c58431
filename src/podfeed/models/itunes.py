"""Apple Podcasts extension (``itunes:``)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ITunesType(str, Enum):
    EPISODIC = "episodic"
    SERIAL = "serial"


class ITunesEpisodeType(str, Enum):
    FULL = "full"
    TRAILER = "trailer"
    BONUS = "bonus"


@dataclass
class ITunesCategory:
    """Category with at most one level of subcategory."""

    text: str
    subcategory: Optional[str] = None


@dataclass
class ITunesImage:
    href: str


@dataclass
class ITunesOwner:
    name: str
    email: str
