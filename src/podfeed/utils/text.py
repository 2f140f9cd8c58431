"""Text helpers for XML output."""

from __future__ import annotations

import re

__all__ = ["cdata", "sanitize_xml_text"]

# Characters XML 1.0 forbids: C0 controls (\t, \n and \r stay allowed),
# lone surrogates and the two noncharacters U+FFFE and U+FFFF.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\uD800-\uDFFF\uFFFE\uFFFF]")


def sanitize_xml_text(value: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""

    return _CONTROL_RE.sub("", value or "")


def cdata(value: str) -> str:
    """Wrap ``value`` in a CDATA section, splitting any embedded ``]]>``."""

    value = value.replace("]]>", "]]]]><![CDATA[>")
    return f"<![CDATA[{value}]]>"
