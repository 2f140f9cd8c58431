"""Scalar codecs: canonical text forms for durations, dates, flags and places.

Every encoder is a pure function that turns one domain value into the exact
token written to the document.  Decoders exist for the values a consumer may
want to read back (mostly for round-trip checks) and raise
:class:`~podfeed.errors.CodecError` on malformed input.

Durations are :class:`datetime.timedelta` values and are converted through
their integer microsecond count, so no binary floating point rounding leaks
into the output.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from email.utils import format_datetime, parsedate_to_datetime
from typing import Union

from .constants import RFC3339_FORMAT
from .errors import CodecError
from .models.podcast import Geo, OSM

__all__ = [
    "decode_chapter_timestamp",
    "decode_fractional_seconds",
    "decode_geo_uri",
    "decode_integer_seconds",
    "decode_osm",
    "decode_rfc2822_date",
    "decode_rfc3339_date",
    "decode_true_false",
    "decode_yes_no",
    "encode_chapter_timestamp",
    "encode_fractional_seconds",
    "encode_geo_uri",
    "encode_integer_seconds",
    "encode_number",
    "encode_osm",
    "encode_rfc2822_date",
    "encode_rfc3339_date",
    "encode_true_false",
    "encode_whole_seconds",
    "encode_yes_no",
]

Number = Union[int, float, Decimal]

_ONE = Decimal(1)
_MICROSECOND = timedelta(microseconds=1)


def _to_utc(dt: datetime) -> datetime:
    """Return a timezone-aware datetime in UTC.

    Naive datetimes are assumed to already represent UTC and are simply
    tagged accordingly.
    """

    return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _plain_decimal(value: Decimal) -> str:
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _seconds(duration: timedelta) -> Decimal:
    if not isinstance(duration, timedelta):
        raise CodecError(f"expected a timedelta, got {type(duration).__name__}")
    return Decimal(duration // _MICROSECOND).scaleb(-6)


# ---------------- Numbers ----------------


def encode_number(value: Number) -> str:
    """Shortest round-trippable decimal without exponent or trailing zeros.

    >>> encode_number(3900000.0)
    '3900000'
    >>> encode_number(-100.445882)
    '-100.445882'
    """

    if isinstance(value, bool):
        raise CodecError("booleans are not numbers in feed output")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise CodecError(f"cannot encode non-finite number {value!r}")
        return _plain_decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise CodecError(f"cannot encode non-finite number {value!r}")
        # repr() is the shortest string that round-trips to the same float.
        return _plain_decimal(Decimal(repr(value)))
    raise CodecError(f"expected a number, got {type(value).__name__}")


# ---------------- Durations ----------------


def encode_fractional_seconds(duration: timedelta) -> str:
    """Seconds as a decimal that always carries a fractional part (``73.0``)."""

    text = _plain_decimal(_seconds(duration))
    if "." not in text:
        text += ".0"
    return text


def decode_fractional_seconds(value: str) -> timedelta:
    try:
        seconds = Decimal(value.strip())
    except (InvalidOperation, AttributeError) as exc:
        raise CodecError(f"invalid fractional seconds {value!r}") from exc
    if not seconds.is_finite():
        raise CodecError(f"invalid fractional seconds {value!r}")
    micro = (seconds * 1_000_000).to_integral_value(rounding=ROUND_HALF_UP)
    return timedelta(microseconds=int(micro))


def encode_integer_seconds(duration: timedelta) -> str:
    """Seconds rounded half away from zero (``59.5s`` -> ``60``)."""

    rounded = _seconds(duration).quantize(_ONE, rounding=ROUND_HALF_UP)
    return str(int(rounded))


def decode_integer_seconds(value: str) -> timedelta:
    try:
        return timedelta(seconds=int(value.strip()))
    except (ValueError, AttributeError) as exc:
        raise CodecError(f"invalid integer seconds {value!r}") from exc


def encode_whole_seconds(duration: timedelta) -> str:
    """Elapsed whole seconds, truncated toward zero (``671.9s`` -> ``671``)."""

    return str(int(_seconds(duration)))


_CHAPTER_RE = re.compile(r"^(?:(\d+):)?(\d{1,2}):(\d{1,2})(?:\.(\d{1,3}))?$")


def encode_chapter_timestamp(start: timedelta) -> str:
    """Podlove normal play time: ``[HH:]MM:SS[.mmm]``.

    The hour segment is left out when zero, as are the milliseconds.
    """

    if not isinstance(start, timedelta):
        raise CodecError(f"expected a timedelta, got {type(start).__name__}")
    if start < timedelta(0):
        raise CodecError(f"chapter start must not be negative: {start}")

    total_ms = start // timedelta(milliseconds=1)
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, milliseconds = divmod(rest, 1000)

    text = f"{minutes:02d}:{seconds:02d}"
    if hours > 0:
        text = f"{hours:02d}:{text}"
    if milliseconds > 0:
        text = f"{text}.{milliseconds:03d}"
    return text


def decode_chapter_timestamp(value: str) -> timedelta:
    match = _CHAPTER_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise CodecError(f"invalid chapter timestamp {value!r}")
    hours, minutes, seconds, fraction = match.groups()
    minutes_i, seconds_i = int(minutes), int(seconds)
    if minutes_i > 59 or seconds_i > 59:
        raise CodecError(f"invalid chapter timestamp {value!r}")
    milliseconds = int(fraction.ljust(3, "0")) if fraction else 0
    return timedelta(
        hours=int(hours or 0),
        minutes=minutes_i,
        seconds=seconds_i,
        milliseconds=milliseconds,
    )


# ---------------- Flags ----------------


def encode_yes_no(value: bool) -> str:
    return "yes" if value else "no"


def decode_yes_no(value: str) -> bool:
    token = value.strip().casefold() if isinstance(value, str) else ""
    if token == "yes":
        return True
    if token == "no":
        return False
    raise CodecError(f"expected 'yes' or 'no', got {value!r}")


def encode_true_false(value: bool) -> str:
    return "true" if value else "false"


def decode_true_false(value: str) -> bool:
    token = value.strip().casefold() if isinstance(value, str) else ""
    if token == "true":
        return True
    if token == "false":
        return False
    raise CodecError(f"expected 'true' or 'false', got {value!r}")


# ---------------- Dates ----------------


def encode_rfc2822_date(value: datetime) -> str:
    """``Thu, 01 Apr 2021 08:00:00 GMT``; sub-second precision is dropped."""

    if not isinstance(value, datetime):
        raise CodecError(f"expected a datetime, got {type(value).__name__}")
    return format_datetime(_to_utc(value).replace(microsecond=0), usegmt=True)


def decode_rfc2822_date(value: str) -> datetime:
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError) as exc:
        raise CodecError(f"invalid RFC 2822 date {value!r}") from exc
    if parsed is None:  # pragma: no cover - older Pythons return None
        raise CodecError(f"invalid RFC 2822 date {value!r}")
    return _to_utc(parsed)


_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?(Z|z|[+-]\d{2}:\d{2})$"
)


def encode_rfc3339_date(value: datetime) -> str:
    """``2021-09-10T02:07:30Z``; fractional seconds only when present."""

    if not isinstance(value, datetime):
        raise CodecError(f"expected a datetime, got {type(value).__name__}")
    utc = _to_utc(value)
    if not utc.microsecond:
        return utc.strftime(RFC3339_FORMAT)
    fraction = f"{utc.microsecond:06d}".rstrip("0")
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{fraction}Z"


def decode_rfc3339_date(value: str) -> datetime:
    match = _RFC3339_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise CodecError(f"invalid RFC 3339 date {value!r}")
    day, clock, fraction, offset = match.groups()
    try:
        parsed = datetime.strptime(f"{day}T{clock}", "%Y-%m-%dT%H:%M:%S")
    except ValueError as exc:
        raise CodecError(f"invalid RFC 3339 date {value!r}") from exc
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return parsed.replace(tzinfo=tz).astimezone(timezone.utc)


# ---------------- Places ----------------


def encode_geo_uri(geo: Geo) -> str:
    """RFC 5870 geo URI, e.g. ``geo:39.7837304,-100.445882;u=3900000``."""

    text = f"geo:{encode_number(geo.latitude)},{encode_number(geo.longitude)}"
    if geo.altitude is not None:
        text += f",{encode_number(geo.altitude)}"
    if geo.uncertainty is not None:
        text += f";u={encode_number(geo.uncertainty)}"
    return text


_GEO_RE = re.compile(
    r"^geo:([^,;]+),([^,;]+)(?:,([^,;]+))?(?:;u=([^;]+))?$", re.IGNORECASE
)


def decode_geo_uri(value: str) -> Geo:
    match = _GEO_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise CodecError(f"invalid geo URI {value!r}")
    latitude, longitude, altitude, uncertainty = match.groups()
    try:
        return Geo(
            latitude=float(latitude),
            longitude=float(longitude),
            altitude=float(altitude) if altitude is not None else None,
            uncertainty=float(uncertainty) if uncertainty is not None else None,
        )
    except ValueError as exc:
        raise CodecError(f"invalid geo URI {value!r}") from exc


def encode_osm(osm: OSM) -> str:
    """OpenStreetMap reference ``<type><id>[#revision]``, e.g. ``R148838``."""

    if not isinstance(osm.type, str) or len(osm.type) != 1:
        raise CodecError(f"OSM type must be a single character, got {osm.type!r}")
    text = f"{osm.type}{int(osm.feature_id)}"
    if osm.revision is not None:
        text += f"#{int(osm.revision)}"
    return text


_OSM_RE = re.compile(r"^([A-Za-z])(\d+)(?:#(\d+))?$")


def decode_osm(value: str) -> OSM:
    match = _OSM_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise CodecError(f"invalid OSM reference {value!r}")
    kind, feature_id, revision = match.groups()
    return OSM(
        type=kind,
        feature_id=int(feature_id),
        revision=int(revision) if revision is not None else None,
    )
