"""Serialize a :class:`~podfeed.models.Feed` into an RSS 2.0 document.

The element tree is built from the tables in :mod:`podfeed.schema`, so the
output order never depends on dataclass field order.  CDATA sections cannot
be expressed with :mod:`xml.etree.ElementTree`; they are inserted as unique
placeholder tokens and swapped for the real sections after serialization.
"""

from __future__ import annotations

import logging
import uuid
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from . import config
from .constants import XML_DECLARATION
from .errors import CodecError, FeedEncodingError
from .models import Feed
from .namespaces import namespaces_for
from .schema import CHANNEL, ElementSpec, field_value
from .utils.files import atomic_write
from .utils.text import cdata, sanitize_xml_text
from .validation import validate_feed

__all__ = [
    "build_rss_tree",
    "encode_feed",
    "encode_feed_str",
    "lint_feed",
    "write_feed",
]

log = logging.getLogger(__name__)


class _TreeBuilder:
    def __init__(self) -> None:
        self.replacements: Dict[str, str] = {}
        self._token = f"podfeedcdata{uuid.uuid4().hex}x"

    def _cdata_placeholder(self, text: str) -> str:
        token = f"{self._token}{len(self.replacements)}x"
        self.replacements[token] = cdata(text)
        return token

    @staticmethod
    def _encode(codec, raw: Any, where: str) -> str:
        try:
            return sanitize_xml_text(codec(raw))
        except CodecError as exc:
            raise CodecError(f"{where}: {exc}") from exc

    def element(self, parent: ET.Element, spec: ElementSpec, value: Any, path: str) -> None:
        el = ET.SubElement(parent, spec.tag)
        for attr in spec.attributes:
            raw = field_value(value, attr.field)
            if raw is not None:
                el.set(attr.name, self._encode(attr.codec, raw, f"{path}.{attr.field}"))

        if spec.text is not None:
            raw = field_value(value, spec.text.field)
            if raw is not None:
                text = self._encode(spec.text.codec, raw, path)
                if spec.cdata_flag and getattr(value, spec.cdata_flag):
                    text = self._cdata_placeholder(text)
                el.text = text

        self.children(el, spec, value, path)

    def children(self, el: ET.Element, spec: ElementSpec, value: Any, path: str) -> None:
        for child in spec.children:
            raw = field_value(value, child.field)
            if raw is None:
                continue
            child_path = f"{path}.{child.field}"
            if child.repeated:
                for index, entry in enumerate(raw):
                    self.element(el, child.spec, entry, f"{child_path}[{index}]")
            else:
                self.element(el, child.spec, raw, child_path)


def build_rss_tree(feed: Feed) -> Tuple[ET.Element, Dict[str, str]]:
    """Return the ``<rss>`` element and its CDATA placeholder replacements.

    Callers serializing the tree themselves must substitute every key of the
    returned mapping with its value in the serialized text.
    """

    root = ET.Element("rss")
    root.set("version", feed.version)
    for name, uri in namespaces_for(feed):
        root.set(name, uri)

    builder = _TreeBuilder()
    builder.element(root, CHANNEL, feed.channel, "channel")
    return root, builder.replacements


def encode_feed_str(
    feed: Feed,
    *,
    indent: Optional[str] = None,
    xml_declaration: Optional[bool] = None,
    validate: Optional[bool] = None,
    strict_urls: Optional[bool] = None,
) -> str:
    """Render ``feed`` as text.

    Options left as ``None`` fall back to :func:`podfeed.config.build_settings`.
    ``indent`` is the string repeated per nesting level; empty means compact
    output on a single line.
    """

    settings = config.build_settings()
    indent = settings.indent if indent is None else indent
    xml_declaration = settings.xml_declaration if xml_declaration is None else xml_declaration
    validate = settings.validate if validate is None else validate
    strict_urls = settings.strict_urls if strict_urls is None else strict_urls

    if validate:
        validate_feed(feed, strict_urls=strict_urls)

    root, replacements = build_rss_tree(feed)
    if indent:
        ET.indent(root, space=indent)
    document = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    for token, section in replacements.items():
        document = document.replace(token, section, 1)

    if xml_declaration:
        document = f"{XML_DECLARATION}\n{document}"

    log.debug(
        "Encoded feed: %d item(s), %d live item(s), %d CDATA section(s), %d characters",
        len(feed.channel.items),
        len(feed.channel.podcast_live_items),
        len(replacements),
        len(document),
    )
    return document


def encode_feed(
    feed: Feed,
    *,
    indent: Optional[str] = None,
    xml_declaration: Optional[bool] = None,
    validate: Optional[bool] = None,
    strict_urls: Optional[bool] = None,
) -> bytes:
    """Render ``feed`` as UTF-8 encoded bytes."""

    return encode_feed_str(
        feed,
        indent=indent,
        xml_declaration=xml_declaration,
        validate=validate,
        strict_urls=strict_urls,
    ).encode("utf-8")


def lint_feed(data: Union[bytes, str]) -> ET.Element:
    """Parse serialized output again and return its root element.

    Raises :class:`FeedEncodingError` when the document is not well formed
    or its root is not ``<rss>``.
    """

    try:
        root = SafeET.fromstring(data)
    except (ET.ParseError, DefusedXmlException) as exc:
        raise FeedEncodingError(f"document is not well formed: {exc}") from exc
    if root.tag != "rss":
        raise FeedEncodingError(f"unexpected root element {root.tag!r}")
    if root.find("channel") is None:
        raise FeedEncodingError("document has no <channel> element")
    return root


def write_feed(
    feed: Feed,
    path: Union[str, Path],
    *,
    indent: Optional[str] = None,
    xml_declaration: bool = True,
    validate: Optional[bool] = None,
    strict_urls: Optional[bool] = None,
) -> Path:
    """Encode ``feed`` and write it to ``path`` atomically.

    The document is fully rendered and re-parsed before the target file is
    touched; on failure the previous file content is left in place.
    """

    data = encode_feed(
        feed,
        indent=indent,
        xml_declaration=xml_declaration,
        validate=validate,
        strict_urls=strict_urls,
    )
    lint_feed(data)
    target = Path(path)
    with atomic_write(target, mode="wb") as handle:
        handle.write(data)
    log.info("Wrote feed to %s (%d bytes)", target, len(data))
    return target
