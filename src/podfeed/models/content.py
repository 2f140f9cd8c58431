"""RSS content module (``content:``)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ContentEncoded:
    """Full-text (usually HTML) body of a channel or episode."""

    text: str
    is_cdata: bool = False
