"""Canonical entity model for podcast RSS feeds."""

from .atom import AtomLink
from .content import ContentEncoded
from .feed import Channel, Feed, Item
from .itunes import (
    ITunesCategory,
    ITunesEpisodeType,
    ITunesImage,
    ITunesOwner,
    ITunesType,
)
from .podcast import (
    OSM,
    TXT,
    AlternateEnclosure,
    Chapters,
    Chat,
    ContentLink,
    Episode,
    Funding,
    Geo,
    LiveItem,
    LiveStatus,
    LiveValue,
    Location,
    Locked,
    Medium,
    Person,
    Podping,
    Publisher,
    RemoteItem,
    Season,
    Soundbite,
    Source,
    Trailer,
    Transcript,
    Value,
    ValueRecipient,
    ValueTimeSplit,
)
from .psc import PSCChapter, PSCChapters
from .rss import GUID, Description, Enclosure

__all__ = [
    "AlternateEnclosure",
    "AtomLink",
    "Channel",
    "Chapters",
    "Chat",
    "ContentEncoded",
    "ContentLink",
    "Description",
    "Enclosure",
    "Episode",
    "Feed",
    "Funding",
    "GUID",
    "Geo",
    "ITunesCategory",
    "ITunesEpisodeType",
    "ITunesImage",
    "ITunesOwner",
    "ITunesType",
    "Item",
    "LiveItem",
    "LiveStatus",
    "LiveValue",
    "Location",
    "Locked",
    "Medium",
    "OSM",
    "PSCChapter",
    "PSCChapters",
    "Person",
    "Podping",
    "Publisher",
    "RemoteItem",
    "Season",
    "Soundbite",
    "Source",
    "TXT",
    "Trailer",
    "Transcript",
    "Value",
    "ValueRecipient",
    "ValueTimeSplit",
]
