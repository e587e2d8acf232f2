"""
Paste records returned by the list operation.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union
from xml.etree import ElementTree as ET

from .options import Publicity
from .paste_format import PasteFormat


def _safe_int(value: Optional[str]) -> int:
    """Parse an integer field, 0 when missing or malformed."""
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def _text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


@dataclass
class ParsedPaste:
    """One ``<paste>`` entry of a user's paste listing."""

    key: str
    date: int  # Unix timestamp of creation
    title: str
    size: int  # Bytes
    expire_date: int  # Unix timestamp, 0 = never expires
    publicity: Publicity
    format_long: str  # e.g. "Python"
    # Unknown tokens are kept as plain strings rather than rejected
    format_short: Union[PasteFormat, str]
    url: str
    hits: int

    @classmethod
    def from_xml_element(cls, element: ET.Element) -> "ParsedPaste":
        """Create from a ``<paste>`` element of the list response."""
        try:
            publicity = Publicity(_safe_int(_text(element, "paste_private")))
        except ValueError:
            publicity = Publicity.PUBLIC

        format_short: Union[PasteFormat, str] = _text(element, "paste_format_short")
        try:
            format_short = PasteFormat(format_short)
        except ValueError:
            pass

        return cls(
            key=_text(element, "paste_key"),
            date=_safe_int(_text(element, "paste_date")),
            title=_text(element, "paste_title"),
            size=_safe_int(_text(element, "paste_size")),
            expire_date=_safe_int(_text(element, "paste_expire_date")),
            publicity=publicity,
            format_long=_text(element, "paste_format_long"),
            format_short=format_short,
            url=_text(element, "paste_url"),
            hits=_safe_int(_text(element, "paste_hits")),
        )

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.date, tz=timezone.utc)

    @property
    def expires_at(self) -> Optional[datetime]:
        """Expiry time, or None for pastes that never expire."""
        if not self.expire_date:
            return None
        return datetime.fromtimestamp(self.expire_date, tz=timezone.utc)
