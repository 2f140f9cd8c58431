"""Podlove Simple Chapters (``psc:``).

See https://podlove.org/simple-chapters/
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from ..constants import PSC_VERSION


@dataclass
class PSCChapter:
    start: timedelta
    title: str
    href: Optional[str] = None
    image: Optional[str] = None


@dataclass
class PSCChapters:
    chapters: List[PSCChapter] = field(default_factory=list)
    version: str = PSC_VERSION
