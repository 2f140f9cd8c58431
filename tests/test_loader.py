import json
from datetime import datetime, timedelta, timezone

import pytest

from podfeed import FeedLoadError, encode_feed, feed_from_dict, feed_to_dict, load_feed
from podfeed.models import ITunesType, LiveStatus, Medium

SAMPLE = {
    "namespaces": ["googleplay"],
    "channel": {
        "title": "Loader Show",
        "description": {"text": "<p>Hi</p>", "is_cdata": True},
        "last_build_date": "2023-10-31T11:00:00Z",
        "itunes_type": "serial",
        "itunes_categories": [{"text": "Society & Culture", "subcategory": "Documentary"}],
        "podcast_medium": "music",
        "podcast_location": {
            "text": "Austin, TX",
            "geo": {"latitude": 30.2672, "longitude": -97.7431},
            "osm": {"type": "R", "feature_id": 113314},
        },
        "podcast_live_items": [
            {"status": "pending", "start": "2024-05-01T18:00:00+02:00", "title": "Soon"}
        ],
        "items": [
            {
                "title": "Episode 1",
                "itunes_duration": 671.9,
                "podcast_soundbites": [{"start_time": 73, "duration": "01:00"}],
                "podcast_episode": {"number": 315.5, "display": "Ch.3"},
            }
        ],
    },
}


def test_feed_from_dict_builds_typed_models():
    feed = feed_from_dict(SAMPLE)

    channel = feed.channel
    assert feed.namespaces == {"googleplay"}
    assert channel.description.is_cdata is True
    assert channel.last_build_date == datetime(2023, 10, 31, 11, 0, tzinfo=timezone.utc)
    assert channel.itunes_type is ITunesType.SERIAL
    assert channel.podcast_medium is Medium.MUSIC
    assert channel.podcast_location.osm.feature_id == 113314
    assert channel.podcast_live_items[0].status is LiveStatus.PENDING
    assert channel.podcast_live_items[0].start == datetime(2024, 5, 1, 16, 0, tzinfo=timezone.utc)
    item = channel.items[0]
    assert item.itunes_duration == timedelta(seconds=671, milliseconds=900)
    assert item.podcast_soundbites[0].duration == timedelta(minutes=1)
    assert item.podcast_episode.number == 315.5


def test_loaded_feed_encodes():
    output = encode_feed(feed_from_dict(SAMPLE)).decode("utf-8")

    assert "<itunes:duration>671</itunes:duration>" in output
    assert '<podcast:soundbite startTime="73.0" duration="60.0"></podcast:soundbite>' in output
    assert '<podcast:liveItem status="pending" start="2024-05-01T16:00:00Z">' in output
    assert 'xmlns:googleplay="http://www.google.com/schemas/play-podcasts/1.0"' in output


@pytest.mark.parametrize(
    "data, message",
    [
        ({"channel": {"titel": "typo"}}, "unknown field(s) titel"),
        ({"channel": {"podcast_medium": "radio"}}, "not one of"),
        ({"channel": {"itunes_explicit": "yes"}}, "expected true or false"),
        ({"channel": {"items": {"title": "x"}}}, "expected a list"),
        ({"channel": {"items": [{"itunes_episode": True}]}}, "got a boolean"),
        ({"channel": {"items": [{"enclosure": {"url": "x", "type": "y"}}]}}, "missing required field"),
        ({"channel": {"last_build_date": "yesterday"}}, "invalid datetime"),
        ({"namespaces": ["media"]}, "unknown namespace prefix(es) media"),
        ({"namespace_overrides": {"dc": "x", "atom": ""}}, "feed.namespace_overrides: unknown namespace prefix(es) dc"),
    ],
)
def test_feed_from_dict_reports_bad_input(data, message):
    with pytest.raises(FeedLoadError) as excinfo:
        feed_from_dict(data)

    assert message in str(excinfo.value)


def test_error_messages_carry_paths():
    with pytest.raises(FeedLoadError, match=r"feed\.channel\.items\[0\]\.enclosure\.length"):
        feed_from_dict({"channel": {"items": [{"enclosure": {"url": "x", "type": "y"}}]}})


def test_feed_to_dict_round_trips(bookworm_feed):
    data = json.loads(json.dumps(feed_to_dict(bookworm_feed)))

    restored = feed_from_dict(data)

    assert encode_feed(restored, indent="  ") == encode_feed(bookworm_feed, indent="  ")


def test_feed_to_dict_leaves_out_unset_fields(world_explorer_feed):
    data = feed_to_dict(world_explorer_feed)

    assert "copyright" not in data["channel"]
    assert data["channel"]["itunes_type"] == "serial"
    assert data["namespaces"] == ["content", "itunes", "podcast"]


def test_load_feed_reads_json_file(tmp_path):
    source = tmp_path / "feed.json"
    source.write_text(json.dumps(SAMPLE), encoding="utf-8")

    assert load_feed(source).channel.title == "Loader Show"


def test_load_feed_rejects_invalid_json(tmp_path):
    source = tmp_path / "feed.json"
    source.write_text("{not json", encoding="utf-8")

    with pytest.raises(FeedLoadError, match="invalid JSON"):
        load_feed(source)
