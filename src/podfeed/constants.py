"""Namespace URIs, protocol version and fixed output formats."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

RSS_VERSION = "2.0"

NAMESPACE_ATOM = "http://www.w3.org/2005/Atom"
NAMESPACE_CONTENT = "http://purl.org/rss/1.0/modules/content/"
NAMESPACE_GOOGLEPLAY = "http://www.google.com/schemas/play-podcasts/1.0"
NAMESPACE_ITUNES = "http://www.itunes.com/dtds/podcast-1.0.dtd"
NAMESPACE_PODCAST = "https://podcastindex.org/namespace/1.0"
NAMESPACE_PSC = "http://podlove.org/simple-chapters"

# Declaration order on the root element follows this mapping.
DEFAULT_NAMESPACES: Mapping[str, str] = MappingProxyType(
    {
        "atom": NAMESPACE_ATOM,
        "content": NAMESPACE_CONTENT,
        "googleplay": NAMESPACE_GOOGLEPLAY,
        "itunes": NAMESPACE_ITUNES,
        "podcast": NAMESPACE_PODCAST,
        "psc": NAMESPACE_PSC,
    }
)

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

PSC_VERSION = "1.2"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

__all__ = [
    "DEFAULT_NAMESPACES",
    "NAMESPACE_ATOM",
    "NAMESPACE_CONTENT",
    "NAMESPACE_GOOGLEPLAY",
    "NAMESPACE_ITUNES",
    "NAMESPACE_PODCAST",
    "NAMESPACE_PSC",
    "PSC_VERSION",
    "RFC3339_FORMAT",
    "RSS_VERSION",
    "XML_DECLARATION",
]
