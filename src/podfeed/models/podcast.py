"""Podcasting 2.0 namespace (``podcast:``).

Element semantics follow
https://github.com/Podcastindex-org/podcast-namespace/blob/main/docs/1.0.md
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional

from .content import ContentEncoded
from .itunes import ITunesEpisodeType, ITunesImage
from .rss import GUID, Description, Enclosure


class Medium(str, Enum):
    """What the feed contains; the ``L`` variants describe lists of feeds."""

    PODCAST = "podcast"
    MUSIC = "music"
    VIDEO = "video"
    FILM = "film"
    AUDIOBOOK = "audiobook"
    NEWSLETTER = "newsletter"
    BLOG = "blog"
    PUBLISHER = "publisher"

    PODCAST_LIST = "podcastL"
    MUSIC_LIST = "musicL"
    VIDEO_LIST = "videoL"
    FILM_LIST = "filmL"
    AUDIOBOOK_LIST = "audiobookL"
    NEWSLETTER_LIST = "newsletterL"
    BLOG_LIST = "blogL"
    PUBLISHER_LIST = "publisherL"
    MIXED = "mixed"


class LiveStatus(str, Enum):
    PENDING = "pending"
    LIVE = "live"
    ENDED = "ended"


@dataclass
class Geo:
    """Point in WGS-84, rendered as an RFC 5870 ``geo:`` URI."""

    latitude: float
    longitude: float
    altitude: Optional[float] = None
    uncertainty: Optional[float] = None


@dataclass
class OSM:
    """OpenStreetMap feature: ``type`` is ``N``, ``W`` or ``R``."""

    type: str
    feature_id: int
    revision: Optional[int] = None


@dataclass
class Location:
    text: str
    geo: Optional[Geo] = None
    osm: Optional[OSM] = None


@dataclass
class Locked:
    """Whether other hosting platforms may import the feed."""

    is_locked: bool
    owner: Optional[str] = None


@dataclass
class Funding:
    url: str
    caption: str = ""


@dataclass
class Person:
    name: str
    group: Optional[str] = None
    role: Optional[str] = None
    href: Optional[str] = None
    img: Optional[str] = None


@dataclass
class Podping:
    uses_podping: Optional[bool] = None


@dataclass
class RemoteItem:
    """Pointer to another feed, or to an item inside it."""

    feed_guid: str
    item_guid: Optional[str] = None
    feed_url: Optional[str] = None
    medium: Optional[Medium] = None


@dataclass
class Publisher:
    remote_items: List[RemoteItem] = field(default_factory=list)


@dataclass
class TXT:
    """Free-form text record, modeled after DNS ``TXT``."""

    text: str
    purpose: Optional[str] = None


@dataclass
class Trailer:
    title: str
    pub_date: datetime
    url: str
    length: Optional[int] = None
    type: Optional[str] = None
    season: Optional[int] = None


@dataclass
class ValueRecipient:
    type: str
    address: str
    split: int
    name: Optional[str] = None
    custom_key: Optional[str] = None
    custom_value: Optional[str] = None
    fee: Optional[bool] = None


@dataclass
class ValueTimeSplit:
    """Value block override for a span of the episode.

    Timing is written in whole seconds.
    """

    start_time: timedelta
    duration: timedelta
    remote_start_time: Optional[timedelta] = None
    remote_percentage: Optional[int] = None
    recipients: List[ValueRecipient] = field(default_factory=list)
    remote_item: Optional[RemoteItem] = None


@dataclass
class Value:
    """Value-for-value payment configuration."""

    type: str
    method: str
    suggested: Optional[float] = None
    recipients: List[ValueRecipient] = field(default_factory=list)
    time_splits: List[ValueTimeSplit] = field(default_factory=list)


@dataclass
class Transcript:
    url: str
    type: str
    language: Optional[str] = None
    rel: Optional[str] = None


@dataclass
class Chapters:
    url: str
    type: str


@dataclass
class Source:
    uri: str
    content_type: Optional[str] = None


@dataclass
class AlternateEnclosure:
    type: str
    length: Optional[int] = None
    bitrate: Optional[int] = None
    height: Optional[int] = None
    lang: Optional[str] = None
    title: Optional[str] = None
    rel: Optional[str] = None
    default: Optional[bool] = None
    sources: List[Source] = field(default_factory=list)


@dataclass
class Soundbite:
    start_time: timedelta
    duration: timedelta
    title: Optional[str] = None


@dataclass
class Season:
    number: int
    name: Optional[str] = None


@dataclass
class Episode:
    number: float
    display: Optional[str] = None


@dataclass
class ContentLink:
    href: str
    text: str = ""


@dataclass
class Chat:
    server: str
    protocol: str
    account_id: Optional[str] = None
    space: Optional[str] = None
    embed_url: Optional[str] = None


@dataclass
class LiveValue:
    uri: str
    protocol: str


@dataclass
class LiveItem:
    """A scheduled, running or finished live stream."""

    status: LiveStatus
    start: datetime
    end: Optional[datetime] = None

    description: Optional[Description] = None
    enclosure: Optional[Enclosure] = None
    guid: Optional[GUID] = None
    link: Optional[str] = None
    title: Optional[str] = None
    content_encoded: Optional[ContentEncoded] = None
    itunes_episode: Optional[int] = None
    itunes_episode_type: Optional[ITunesEpisodeType] = None
    itunes_explicit: Optional[bool] = None
    itunes_image: Optional[ITunesImage] = None
    itunes_season: Optional[int] = None
    podcast_alternate_enclosures: List[AlternateEnclosure] = field(default_factory=list)
    podcast_chat: Optional[Chat] = None
    podcast_content_links: List[ContentLink] = field(default_factory=list)
    podcast_episode: Optional[Episode] = None
    podcast_isrc: Optional[str] = None
    podcast_live_value: Optional[LiveValue] = None
    podcast_location: Optional[Location] = None
    podcast_persons: List[Person] = field(default_factory=list)
    podcast_season: Optional[Season] = None
    podcast_soundbites: List[Soundbite] = field(default_factory=list)
    podcast_txts: List[TXT] = field(default_factory=list)
    podcast_transcripts: List[Transcript] = field(default_factory=list)
    podcast_value: Optional[Value] = None
