"""Element tables: which fields become which elements, in which order.

Each entity is described by an :class:`ElementSpec`.  Attributes and child
elements are listed in their canonical document order, so the assembler,
the validator and the namespace scan never depend on dataclass declaration
order.  Every attribute, text node and child names the model field it reads
(``"."`` means the value itself) and the codec that renders it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from .codecs import (
    encode_chapter_timestamp,
    encode_fractional_seconds,
    encode_geo_uri,
    encode_integer_seconds,
    encode_number,
    encode_osm,
    encode_rfc2822_date,
    encode_rfc3339_date,
    encode_true_false,
    encode_whole_seconds,
    encode_yes_no,
)
from .errors import CodecError

Codec = Callable[[Any], str]

# Value checks performed by the validator.
CHECK_URL = "url"
CHECK_UUID = "uuid"
CHECK_UNSIGNED = "unsigned"


def encode_text(value: Any) -> str:
    """Plain text, enum members by value, numbers via :func:`encode_number`."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise CodecError("booleans need an explicit codec")
    if isinstance(value, (int, float, Decimal)):
        return encode_number(value)
    raise CodecError(f"cannot render {type(value).__name__} as text")


@dataclass(frozen=True)
class Field:
    """One attribute or text node: XML ``name``, model ``field`` and codec."""

    name: str
    field: str
    codec: Codec = encode_text
    required: bool = False
    check: Optional[str] = None


@dataclass(frozen=True)
class ElementSpec:
    tag: str
    attributes: Tuple[Field, ...] = ()
    text: Optional[Field] = None
    children: Tuple["Child", ...] = ()
    # Name of a boolean model field selecting CDATA for the text node.
    cdata_flag: Optional[str] = None


@dataclass(frozen=True)
class Child:
    field: str
    spec: ElementSpec
    repeated: bool = False


def field_value(obj: Any, name: str) -> Any:
    return obj if name == "." else getattr(obj, name)


def leaf(tag: str, codec: Codec = encode_text, check: Optional[str] = None) -> ElementSpec:
    """Element whose text is the field value itself."""

    return ElementSpec(tag, text=Field("", ".", codec, check=check))


def text_field(field: str, codec: Codec = encode_text, *, required: bool = False) -> Field:
    return Field("", field, codec, required=required)


# ---------------- RSS core ----------------

DESCRIPTION = ElementSpec(
    "description", text=text_field("text"), cdata_flag="is_cdata"
)

ENCLOSURE = ElementSpec(
    "enclosure",
    attributes=(
        Field("url", "url", required=True, check=CHECK_URL),
        Field("length", "length", required=True, check=CHECK_UNSIGNED),
        Field("type", "type", required=True),
    ),
)

GUID = ElementSpec(
    "guid",
    attributes=(Field("isPermaLink", "is_permalink", encode_true_false),),
    text=text_field("text", required=True),
)

# ---------------- Atom / content ----------------

ATOM_LINK = ElementSpec(
    "atom:link",
    attributes=(
        Field("href", "href", required=True, check=CHECK_URL),
        Field("rel", "rel"),
        Field("type", "type"),
    ),
)

CONTENT_ENCODED = ElementSpec(
    "content:encoded", text=text_field("text"), cdata_flag="is_cdata"
)

# ---------------- iTunes ----------------

ITUNES_SUBCATEGORY = ElementSpec(
    "itunes:category", attributes=(Field("text", ".", required=True),)
)

ITUNES_CATEGORY = ElementSpec(
    "itunes:category",
    attributes=(Field("text", "text", required=True),),
    children=(Child("subcategory", ITUNES_SUBCATEGORY),),
)

ITUNES_IMAGE = ElementSpec(
    "itunes:image", attributes=(Field("href", "href", required=True, check=CHECK_URL),)
)

ITUNES_OWNER = ElementSpec(
    "itunes:owner",
    children=(
        Child("name", leaf("itunes:name")),
        Child("email", leaf("itunes:email")),
    ),
)

# ---------------- Podcasting 2.0 ----------------

FUNDING = ElementSpec(
    "podcast:funding",
    attributes=(Field("url", "url", required=True, check=CHECK_URL),),
    text=text_field("caption"),
)

LOCKED = ElementSpec(
    "podcast:locked",
    attributes=(Field("owner", "owner"),),
    text=text_field("is_locked", encode_yes_no, required=True),
)

LOCATION = ElementSpec(
    "podcast:location",
    attributes=(
        Field("geo", "geo", encode_geo_uri),
        Field("osm", "osm", encode_osm),
    ),
    text=text_field("text"),
)

PERSON = ElementSpec(
    "podcast:person",
    attributes=(
        Field("group", "group"),
        Field("role", "role"),
        Field("href", "href", check=CHECK_URL),
        Field("img", "img", check=CHECK_URL),
    ),
    text=text_field("name", required=True),
)

PODPING = ElementSpec(
    "podcast:podping",
    attributes=(Field("usesPodping", "uses_podping", encode_true_false),),
)

REMOTE_ITEM = ElementSpec(
    "podcast:remoteItem",
    attributes=(
        Field("itemGuid", "item_guid"),
        Field("feedGuid", "feed_guid", required=True, check=CHECK_UUID),
        Field("feedUrl", "feed_url", check=CHECK_URL),
        Field("medium", "medium"),
    ),
)

PUBLISHER = ElementSpec(
    "podcast:publisher",
    children=(Child("remote_items", REMOTE_ITEM, repeated=True),),
)

TXT = ElementSpec(
    "podcast:txt",
    attributes=(Field("purpose", "purpose"),),
    text=text_field("text", required=True),
)

TRAILER = ElementSpec(
    "podcast:trailer",
    attributes=(
        Field("pubdate", "pub_date", encode_rfc2822_date, required=True),
        Field("url", "url", required=True, check=CHECK_URL),
        Field("length", "length", check=CHECK_UNSIGNED),
        Field("type", "type"),
        Field("season", "season"),
    ),
    text=text_field("title", required=True),
)

VALUE_RECIPIENT = ElementSpec(
    "podcast:valueRecipient",
    attributes=(
        Field("name", "name"),
        Field("customKey", "custom_key"),
        Field("customValue", "custom_value"),
        Field("type", "type", required=True),
        Field("address", "address", required=True),
        Field("split", "split", required=True, check=CHECK_UNSIGNED),
        Field("fee", "fee", encode_true_false),
    ),
)

VALUE_TIME_SPLIT = ElementSpec(
    "podcast:valueTimeSplit",
    attributes=(
        Field("startTime", "start_time", encode_integer_seconds, required=True),
        Field("duration", "duration", encode_integer_seconds, required=True),
        Field("remoteStartTime", "remote_start_time", encode_integer_seconds),
        Field("remotePercentage", "remote_percentage", check=CHECK_UNSIGNED),
    ),
    children=(
        Child("recipients", VALUE_RECIPIENT, repeated=True),
        Child("remote_item", REMOTE_ITEM),
    ),
)

VALUE = ElementSpec(
    "podcast:value",
    attributes=(
        Field("type", "type", required=True),
        Field("method", "method", required=True),
        Field("suggested", "suggested"),
    ),
    children=(
        Child("recipients", VALUE_RECIPIENT, repeated=True),
        Child("time_splits", VALUE_TIME_SPLIT, repeated=True),
    ),
)

TRANSCRIPT = ElementSpec(
    "podcast:transcript",
    attributes=(
        Field("url", "url", required=True, check=CHECK_URL),
        Field("type", "type", required=True),
        Field("language", "language"),
        Field("rel", "rel"),
    ),
)

CHAPTERS = ElementSpec(
    "podcast:chapters",
    attributes=(
        Field("url", "url", required=True, check=CHECK_URL),
        Field("type", "type", required=True),
    ),
)

SOURCE = ElementSpec(
    "podcast:source",
    attributes=(
        Field("uri", "uri", required=True),
        Field("contentType", "content_type"),
    ),
)

ALTERNATE_ENCLOSURE = ElementSpec(
    "podcast:alternateEnclosure",
    attributes=(
        Field("type", "type", required=True),
        Field("length", "length", check=CHECK_UNSIGNED),
        Field("bitrate", "bitrate"),
        Field("height", "height"),
        Field("lang", "lang"),
        Field("title", "title"),
        Field("rel", "rel"),
        Field("default", "default", encode_true_false),
    ),
    children=(Child("sources", SOURCE, repeated=True),),
)

SOUNDBITE = ElementSpec(
    "podcast:soundbite",
    attributes=(
        Field("startTime", "start_time", encode_fractional_seconds, required=True),
        Field("duration", "duration", encode_fractional_seconds, required=True),
    ),
    text=text_field("title"),
)

SEASON = ElementSpec(
    "podcast:season",
    attributes=(Field("name", "name"),),
    text=text_field("number", required=True),
)

EPISODE = ElementSpec(
    "podcast:episode",
    attributes=(Field("display", "display"),),
    text=text_field("number", required=True),
)

CONTENT_LINK = ElementSpec(
    "podcast:contentLink",
    attributes=(Field("href", "href", required=True, check=CHECK_URL),),
    text=text_field("text"),
)

CHAT = ElementSpec(
    "podcast:chat",
    attributes=(
        Field("server", "server", required=True),
        Field("protocol", "protocol", required=True),
        Field("accountId", "account_id"),
        Field("space", "space"),
        Field("embedUrl", "embed_url", check=CHECK_URL),
    ),
)

LIVE_VALUE = ElementSpec(
    "podcast:liveValue",
    attributes=(
        Field("uri", "uri", required=True),
        Field("protocol", "protocol", required=True),
    ),
)

# ---------------- Podlove Simple Chapters ----------------

PSC_CHAPTER = ElementSpec(
    "psc:chapter",
    attributes=(
        Field("start", "start", encode_chapter_timestamp, required=True),
        Field("title", "title", required=True),
        Field("href", "href", check=CHECK_URL),
        Field("image", "image", check=CHECK_URL),
    ),
)

PSC_CHAPTERS = ElementSpec(
    "psc:chapters",
    attributes=(Field("version", "version", required=True),),
    children=(Child("chapters", PSC_CHAPTER, repeated=True),),
)

# ---------------- Entities ----------------

LIVE_ITEM = ElementSpec(
    "podcast:liveItem",
    attributes=(
        Field("status", "status", required=True),
        Field("start", "start", encode_rfc3339_date, required=True),
        Field("end", "end", encode_rfc3339_date),
    ),
    children=(
        Child("description", DESCRIPTION),
        Child("enclosure", ENCLOSURE),
        Child("guid", GUID),
        Child("link", leaf("link", check=CHECK_URL)),
        Child("title", leaf("title")),
        Child("content_encoded", CONTENT_ENCODED),
        Child("itunes_episode", leaf("itunes:episode")),
        Child("itunes_episode_type", leaf("itunes:episodeType")),
        Child("itunes_explicit", leaf("itunes:explicit", encode_true_false)),
        Child("itunes_image", ITUNES_IMAGE),
        Child("itunes_season", leaf("itunes:season")),
        Child("podcast_alternate_enclosures", ALTERNATE_ENCLOSURE, repeated=True),
        Child("podcast_chat", CHAT),
        Child("podcast_content_links", CONTENT_LINK, repeated=True),
        Child("podcast_episode", EPISODE),
        Child("podcast_isrc", leaf("podcast:isrc")),
        Child("podcast_live_value", LIVE_VALUE),
        Child("podcast_location", LOCATION),
        Child("podcast_persons", PERSON, repeated=True),
        Child("podcast_season", SEASON),
        Child("podcast_soundbites", SOUNDBITE, repeated=True),
        Child("podcast_txts", TXT, repeated=True),
        Child("podcast_transcripts", TRANSCRIPT, repeated=True),
        Child("podcast_value", VALUE),
    ),
)

ITEM = ElementSpec(
    "item",
    children=(
        Child("description", DESCRIPTION),
        Child("enclosure", ENCLOSURE),
        Child("guid", GUID),
        Child("link", leaf("link", check=CHECK_URL)),
        Child("pub_date", leaf("pubDate", encode_rfc2822_date)),
        Child("title", leaf("title")),
        Child("content_encoded", CONTENT_ENCODED),
        Child("itunes_duration", leaf("itunes:duration", encode_whole_seconds)),
        Child("itunes_episode", leaf("itunes:episode")),
        Child("itunes_episode_type", leaf("itunes:episodeType")),
        Child("itunes_explicit", leaf("itunes:explicit", encode_true_false)),
        Child("itunes_image", ITUNES_IMAGE),
        Child("itunes_season", leaf("itunes:season")),
        Child("podcast_alternate_enclosures", ALTERNATE_ENCLOSURE, repeated=True),
        Child("podcast_chapters", CHAPTERS),
        Child("podcast_episode", EPISODE),
        Child("podcast_isrc", leaf("podcast:isrc")),
        Child("podcast_location", LOCATION),
        Child("podcast_persons", PERSON, repeated=True),
        Child("podcast_season", SEASON),
        Child("podcast_soundbites", SOUNDBITE, repeated=True),
        Child("podcast_transcripts", TRANSCRIPT, repeated=True),
        Child("podcast_value", VALUE),
        Child("psc_chapters", PSC_CHAPTERS),
    ),
)

CHANNEL = ElementSpec(
    "channel",
    children=(
        Child("copyright", leaf("copyright")),
        Child("description", DESCRIPTION),
        Child("generator", leaf("generator")),
        Child("language", leaf("language")),
        Child("last_build_date", leaf("lastBuildDate", encode_rfc2822_date)),
        Child("link", leaf("link", check=CHECK_URL)),
        Child("title", leaf("title")),
        Child("atom_link", ATOM_LINK),
        Child("content_encoded", CONTENT_ENCODED),
        Child("itunes_author", leaf("itunes:author")),
        Child("itunes_categories", ITUNES_CATEGORY, repeated=True),
        Child("itunes_explicit", leaf("itunes:explicit", encode_true_false)),
        Child("itunes_image", ITUNES_IMAGE),
        Child("itunes_new_feed_url", leaf("itunes:new-feed-url", check=CHECK_URL)),
        Child("itunes_owner", ITUNES_OWNER),
        Child("itunes_type", leaf("itunes:type")),
        Child("podcast_fundings", FUNDING, repeated=True),
        Child("podcast_guid", leaf("podcast:guid", check=CHECK_UUID)),
        Child("podcast_locked", LOCKED),
        Child("podcast_location", LOCATION),
        Child("podcast_medium", leaf("podcast:medium")),
        Child("podcast_persons", PERSON, repeated=True),
        Child("podcast_podping", PODPING),
        Child("podcast_publisher", PUBLISHER),
        Child("podcast_single_item", leaf("podcast:singleItem", encode_true_false)),
        Child("podcast_txts", TXT, repeated=True),
        Child("podcast_trailers", TRAILER, repeated=True),
        Child("podcast_value", VALUE),
        Child("podcast_live_items", LIVE_ITEM, repeated=True),
        Child("items", ITEM, repeated=True),
    ),
)
