"""Podcast RSS feed models and a deterministic XML encoder.

Typical use::

    from podfeed import Channel, Feed, encode_feed

    data = encode_feed(Feed(channel=Channel(title="My Show")), indent="  ")
"""

from .encoder import build_rss_tree, encode_feed, encode_feed_str, lint_feed, write_feed
from .errors import (
    CodecError,
    FeedEncodingError,
    FeedError,
    FeedLoadError,
    FeedValidationError,
    UnknownNamespaceError,
)
from .loader import feed_from_dict, feed_to_dict, load_feed
from .models import *  # noqa: F401,F403
from .models import __all__ as _model_names
from .namespaces import namespaces_for, resolve_namespaces
from .validation import collect_problems, validate_feed

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "FeedEncodingError",
    "FeedError",
    "FeedLoadError",
    "FeedValidationError",
    "UnknownNamespaceError",
    "build_rss_tree",
    "collect_problems",
    "encode_feed",
    "encode_feed_str",
    "feed_from_dict",
    "feed_to_dict",
    "lint_feed",
    "load_feed",
    "namespaces_for",
    "resolve_namespaces",
    "validate_feed",
    "write_feed",
    *_model_names,
]
