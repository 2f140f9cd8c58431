"""The feed root, its channel and the channel's episodes.

Every optional field defaults to ``None`` (left out of the document) and
every repeated field to an empty list.  ``False``, ``0`` and ``""`` are real
values and are written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Set

from ..constants import RSS_VERSION
from .atom import AtomLink
from .content import ContentEncoded
from .itunes import (
    ITunesCategory,
    ITunesEpisodeType,
    ITunesImage,
    ITunesOwner,
    ITunesType,
)
from .podcast import (
    AlternateEnclosure,
    Chapters,
    Episode,
    Funding,
    LiveItem,
    Location,
    Locked,
    Medium,
    Person,
    Podping,
    Publisher,
    Season,
    Soundbite,
    Trailer,
    Transcript,
    TXT,
    Value,
)
from .psc import PSCChapters
from .rss import GUID, Description, Enclosure


@dataclass
class Item:
    """A single episode."""

    description: Optional[Description] = None
    enclosure: Optional[Enclosure] = None
    guid: Optional[GUID] = None
    link: Optional[str] = None
    pub_date: Optional[datetime] = None
    title: Optional[str] = None
    content_encoded: Optional[ContentEncoded] = None
    itunes_duration: Optional[timedelta] = None
    itunes_episode: Optional[int] = None
    itunes_episode_type: Optional[ITunesEpisodeType] = None
    itunes_explicit: Optional[bool] = None
    itunes_image: Optional[ITunesImage] = None
    itunes_season: Optional[int] = None
    podcast_alternate_enclosures: List[AlternateEnclosure] = field(default_factory=list)
    podcast_chapters: Optional[Chapters] = None
    podcast_episode: Optional[Episode] = None
    podcast_isrc: Optional[str] = None
    podcast_location: Optional[Location] = None
    podcast_persons: List[Person] = field(default_factory=list)
    podcast_season: Optional[Season] = None
    podcast_soundbites: List[Soundbite] = field(default_factory=list)
    podcast_transcripts: List[Transcript] = field(default_factory=list)
    podcast_value: Optional[Value] = None
    psc_chapters: Optional[PSCChapters] = None


@dataclass
class Channel:
    """Podcast-level metadata plus the episode list."""

    copyright: Optional[str] = None
    description: Optional[Description] = None
    generator: Optional[str] = None
    language: Optional[str] = None
    last_build_date: Optional[datetime] = None
    link: Optional[str] = None
    title: Optional[str] = None
    atom_link: Optional[AtomLink] = None
    content_encoded: Optional[ContentEncoded] = None
    itunes_author: Optional[str] = None
    itunes_categories: List[ITunesCategory] = field(default_factory=list)
    itunes_explicit: Optional[bool] = None
    itunes_image: Optional[ITunesImage] = None
    itunes_new_feed_url: Optional[str] = None
    itunes_owner: Optional[ITunesOwner] = None
    itunes_type: Optional[ITunesType] = None
    podcast_fundings: List[Funding] = field(default_factory=list)
    podcast_guid: Optional[str] = None
    podcast_locked: Optional[Locked] = None
    podcast_location: Optional[Location] = None
    podcast_medium: Optional[Medium] = None
    podcast_persons: List[Person] = field(default_factory=list)
    podcast_podping: Optional[Podping] = None
    podcast_publisher: Optional[Publisher] = None
    podcast_single_item: Optional[bool] = None
    podcast_txts: List[TXT] = field(default_factory=list)
    podcast_trailers: List[Trailer] = field(default_factory=list)
    podcast_value: Optional[Value] = None
    podcast_live_items: List[LiveItem] = field(default_factory=list)
    items: List[Item] = field(default_factory=list)


@dataclass
class Feed:
    """Document root.

    ``namespaces`` lists prefixes to declare even when no field uses them.
    ``namespace_overrides`` maps a prefix to the URI to declare instead of
    the default one; an empty string suppresses the declaration entirely.
    """

    channel: Channel = field(default_factory=Channel)
    version: str = RSS_VERSION
    namespaces: Set[str] = field(default_factory=set)
    namespace_overrides: Dict[str, str] = field(default_factory=dict)
