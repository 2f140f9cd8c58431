import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

root = Path(__file__).resolve().parents[1]
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from podfeed import config  # noqa: E402
from podfeed.models import (  # noqa: E402
    GUID,
    OSM,
    TXT,
    AlternateEnclosure,
    AtomLink,
    Channel,
    Chapters,
    ContentEncoded,
    ContentLink,
    Description,
    Enclosure,
    Episode,
    Feed,
    Funding,
    Geo,
    Item,
    ITunesCategory,
    ITunesEpisodeType,
    ITunesImage,
    ITunesOwner,
    ITunesType,
    LiveItem,
    LiveStatus,
    Location,
    Locked,
    Medium,
    Person,
    Podping,
    PSCChapter,
    PSCChapters,
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

_ENV_VARS = (
    "PODFEED_INDENT",
    "PODFEED_XML_DECLARATION",
    "PODFEED_VALIDATE",
    "PODFEED_STRICT_URLS",
    "PODFEED_ENV_FILES",
    "PODFEED_LOG_DIR",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Run every test against default settings, regardless of the shell."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.refresh_from_env()
    yield
    config.refresh_from_env()


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


HOST_1 = "02d5c1bf8b940dc9cadca86d1b0a3c37fbe39cee4c7e839e33bef9174531d27f52"
HOST_2 = "032f4ffbbafffbe51726ad3c164a3d0d37ec27bc67b29a159b0f49ae8ac21b8508"
PRODUCER = "03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a"
BASE = "https://rssblue.com/@bookworm-podcast"


def _simple_episode():
    return Item(
        title="Simple Episode",
        enclosure=Enclosure(
            url=f"{BASE}/simple-episode/simple-episode.mp3",
            length=1024,
            type="audio/mpeg",
        ),
        guid=GUID(text=f"{BASE}/simple-episode", is_permalink=True),
        pub_date=_utc(2022, 7, 8, 15, 20, 10),
        description=Description(text="This is a simple episode & its description."),
        content_encoded=ContentEncoded(
            text="This is a simple episode & its description.", is_cdata=False
        ),
        itunes_episode_type=ITunesEpisodeType.FULL,
        itunes_duration=timedelta(minutes=10),
        psc_chapters=PSCChapters(
            chapters=[
                PSCChapter(start=timedelta(0), title="Welcome"),
                PSCChapter(
                    start=timedelta(minutes=3, seconds=7),
                    title="Introducing Podlove",
                    href="http://podlove.org",
                ),
                PSCChapter(
                    start=timedelta(minutes=8, seconds=26, milliseconds=250),
                    title="Podlove WordPress Plugin",
                    href="http://podlove.org/podlove-podcast-publisher",
                ),
                PSCChapter(start=timedelta(minutes=12, seconds=42), title="Resumée"),
            ]
        ),
    )


def _hello_again():
    return Item(
        title="Hello Again",
        enclosure=Enclosure(
            url=f"{BASE}/hello-again/hello-again.mp3", length=2048, type="audio/mpeg"
        ),
        podcast_alternate_enclosures=[
            AlternateEnclosure(
                type="video/mp4",
                length=7924786,
                bitrate=511276,
                height=720,
                sources=[Source(uri="https://example.com/file-720.mp4")],
            )
        ],
        guid=GUID(text="hello-again", is_permalink=False),
        pub_date=_utc(2021, 7, 10, 9, 3, 59),
        itunes_image=ITunesImage(href=f"{BASE}/hello-again/cover-art.png"),
        itunes_episode_type=ITunesEpisodeType.FULL,
        itunes_explicit=False,
        podcast_transcripts=[
            Transcript(url=f"{BASE}/hello-again/transcript.vtt", type="text/vtt")
        ],
        itunes_duration=timedelta(minutes=10, seconds=70, milliseconds=1900),
        podcast_value=Value(
            type="lightning",
            method="keysend",
            recipients=[
                ValueRecipient(name="Host", type="node", address=HOST_1, split=90),
                ValueRecipient(name="Producer", type="node", address=PRODUCER, split=10),
            ],
        ),
        podcast_soundbites=[
            Soundbite(start_time=timedelta(minutes=1, seconds=13), duration=timedelta(minutes=1)),
            Soundbite(
                start_time=timedelta(minutes=20, seconds=34, milliseconds=500),
                duration=timedelta(seconds=42, milliseconds=250),
                title="Why the Podcast Namespace Matters",
            ),
        ],
        podcast_persons=[
            Person(
                name="Jane Doe",
                role="guest",
                href="https://www.imdb.com/name/nm0427852888/",
                img="http://example.com/images/janedoe.jpg",
            ),
            Person(
                name="Alice Brown",
                role="guest",
                href="https://www.wikipedia/alicebrown",
                img="http://example.com/images/alicebrown.jpg",
            ),
        ],
        podcast_season=Season(number=5),
        podcast_episode=Episode(number=3),
        psc_chapters=PSCChapters(
            chapters=[
                PSCChapter(start=timedelta(0), title="Introduction"),
                PSCChapter(
                    start=timedelta(hours=1, minutes=3, seconds=7, milliseconds=500),
                    title="Break",
                ),
                PSCChapter(start=timedelta(hours=2, minutes=3, seconds=7), title="Conclusion"),
            ]
        ),
    )


def _hello_world():
    return Item(
        title="Hello World",
        enclosure=Enclosure(
            url=f"{BASE}/hello-world/hello-world.mp3", length=1024, type="audio/mpeg"
        ),
        guid=GUID(text=f"{BASE}/hello-world"),
        podcast_isrc="AA6Q72000047",
        pub_date=_utc(2021, 7, 8, 15, 20, 10),
        description=Description(text="This is my <em>first</em> episode!", is_cdata=True),
        itunes_explicit=True,
        itunes_episode_type=ITunesEpisodeType.FULL,
        podcast_transcripts=[
            Transcript(url=f"{BASE}/hello-world/transcript.srt", type="application/x-subrip")
        ],
        podcast_chapters=Chapters(
            url=f"{BASE}/hello-world/chapters.json", type="application/json+chapters"
        ),
        podcast_location=Location(
            text="Gitmo Nation",
            geo=Geo(latitude=39.7837304, longitude=-100.445882, uncertainty=3900000.0),
            osm=OSM(type="R", feature_id=148838),
        ),
        podcast_persons=[
            Person(
                name="Alice Brown",
                role="guest",
                href="https://www.wikipedia/alicebrown",
                img="http://example.com/images/alicebrown.jpg",
                group="writing",
            ),
            Person(
                name="Becky Smith",
                role="Cover Art Designer",
                href="https://example.com/artist/beckysmith",
                group="visuals",
            ),
        ],
        podcast_season=Season(number=3, name="Race for the Whitehouse 2020"),
        podcast_episode=Episode(number=315.5, display="Ch.3"),
    )


def build_bookworm_feed() -> Feed:
    channel = Channel(
        title="Bookworm Podcast",
        description=Description(text="<strong>Description</strong>", is_cdata=True),
        content_encoded=ContentEncoded(text="<strong>Description</strong>", is_cdata=True),
        generator="RSS Blue v1.0.0",
        last_build_date=_utc(2023, 10, 31, 11, 0, 0),
        itunes_image=ITunesImage(href=f"{BASE}/cover-art.png"),
        language="en",
        itunes_categories=[ITunesCategory(text="Society & Culture", subcategory="Documentary")],
        itunes_explicit=True,
        itunes_author="Jane Doe",
        link="https://example.com",
        atom_link=AtomLink(
            href="https://example.com/feed.xml", rel="self", type="application/rss+xml"
        ),
        itunes_owner=ITunesOwner(name="Jane Doe", email="jane@example.com"),
        itunes_type=ITunesType.EPISODIC,
        copyright="© RSS Blue",
        podcast_locked=Locked(is_locked=False, owner="jane@example.com"),
        podcast_fundings=[
            Funding(url="https://example.com/donate", caption="Support “Bookworm Podcast”")
        ],
        podcast_publisher=Publisher(
            remote_items=[
                RemoteItem(
                    feed_guid="003af0a0-6a45-55cf-b765-68e3d349551a",
                    feed_url="https://agilesetmedia.com/assets/static/feeds/publisher.xml",
                    medium=Medium.PUBLISHER,
                )
            ]
        ),
        podcast_single_item=False,
        podcast_value=Value(
            type="lightning",
            method="keysend",
            recipients=[
                ValueRecipient(name="Co-Host #1", type="node", address=HOST_1, split=50),
                ValueRecipient(name="Co-Host #2", type="node", address=HOST_2, split=40),
                ValueRecipient(name="Producer", type="node", address=PRODUCER, split=10),
            ],
            time_splits=[
                ValueTimeSplit(
                    start_time=timedelta(seconds=60),
                    duration=timedelta(seconds=237),
                    remote_item=RemoteItem(
                        item_guid="https://podcastindex.org/podcast/4148683#1",
                        feed_guid="a94f5cc9-8c58-55fc-91fe-a324087a655b",
                        feed_url="https://feeds.podcastindex.org/Album-TourconVII.xml",
                        medium=Medium.MUSIC,
                    ),
                    remote_percentage=95,
                ),
                ValueTimeSplit(
                    start_time=timedelta(seconds=330),
                    duration=timedelta(seconds=53),
                    remote_item=RemoteItem(
                        item_guid="https://podcastindex.org/podcast/4148683#3",
                        feed_guid="a94f5cc9-8c58-55fc-91fe-a324087a655b",
                        medium=Medium.MUSIC,
                    ),
                    remote_start_time=timedelta(seconds=174),
                    remote_percentage=95,
                ),
            ],
        ),
        podcast_guid="cda647ce-56b8-5d7c-9448-ba1993ab46b7",
        podcast_medium=Medium.PODCAST,
        podcast_persons=[
            Person(
                name="John Smith",
                href="https://example.com/johnsmith/blog",
                img="http://example.com/images/johnsmith.jpg",
            )
        ],
        podcast_trailers=[
            Trailer(
                title="Coming April 1st, 2021",
                pub_date=_utc(2021, 4, 1, 8, 0, 0),
                url="https://example.org/trailers/teaser",
                type="audio/mp3",
                length=12345678,
            ),
            Trailer(
                title="Season 4: Race for the Whitehouse",
                pub_date=_utc(2021, 4, 1, 8, 0, 0),
                url="https://example.org/trailers/season4teaser",
                type="video/mp4",
                length=12345678,
                season=4,
            ),
        ],
        podcast_txts=[
            TXT(text="naj3eEZaWVVY9a38uhX8FekACyhtqP4JN"),
            TXT(text="S6lpp-7ZCn8-dZfGc-OoyaG", purpose="verify"),
        ],
        podcast_podping=Podping(uses_podping=True),
        podcast_live_items=[
            LiveItem(
                status=LiveStatus.LIVE,
                start=_utc(2021, 9, 10, 2, 7, 30),
                end=_utc(2021, 9, 10, 2, 9, 30),
                title="Podcasting 2.0 Live Stream",
                guid=GUID(text="e32b4890-983b-4ce5-8b46-f2d6bc1d8819"),
                enclosure=Enclosure(
                    url="https://example.com/pc20/livestream?format=.mp3",
                    type="audio/mpeg",
                    length=312,
                ),
                podcast_content_links=[
                    ContentLink(href="https://example.com/html/livestream", text="Listen Live!")
                ],
            )
        ],
        items=[_simple_episode(), _hello_again(), _hello_world()],
    )
    # googleplay has no fields in this model; its declaration is requested explicitly.
    return Feed(channel=channel, namespaces={"googleplay"})


def build_world_explorer_feed() -> Feed:
    channel = Channel(
        title="World Explorer Podcast",
        description=Description(text="Very interesting podcast."),
        itunes_image=ITunesImage(href="https://rssblue.com/@world-explorer-podcast/cover-art.jpg"),
        itunes_new_feed_url="https://example.com/new-feed",
        language="fr",
        itunes_categories=[
            ITunesCategory(text="Fiction"),
            ITunesCategory(text="Society & Culture", subcategory="Documentary"),
        ],
        itunes_author="John Doe",
        itunes_owner=ITunesOwner(name="John Doe", email="john@example.com"),
        itunes_type=ITunesType.SERIAL,
        podcast_location=Location(text="Austin, TX", osm=OSM(type="R", feature_id=113314)),
        podcast_guid="96b952d9-06b2-5489-a3f3-d371473121fa",
        podcast_medium=Medium.MUSIC,
    )
    return Feed(channel=channel, namespaces={"content", "itunes", "podcast"})


@pytest.fixture
def bookworm_feed() -> Feed:
    return build_bookworm_feed()


@pytest.fixture
def world_explorer_feed() -> Feed:
    return build_world_explorer_feed()
