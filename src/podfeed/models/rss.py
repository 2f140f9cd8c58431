"""Core RSS 2.0 element types shared by channels, items and live items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Description:
    """Channel or episode description; ``is_cdata`` wraps the text verbatim."""

    text: str
    is_cdata: bool = False


@dataclass
class Enclosure:
    """The episode's media file."""

    url: str
    length: int
    type: str


@dataclass
class GUID:
    """Item identifier; ``is_permalink`` is written only when set."""

    text: str
    is_permalink: Optional[bool] = None
