"""XML parsing for stats API responses."""

import re
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Any, TypeVar

from .responses import Response

R = TypeVar("R", bound=Response)

_LEADING_INT = re.compile(r"\s*[-+]?\d+")
_LEADING_FLOAT = re.compile(r"\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")

INT_FIELDS = frozenset({"value", "actions", "time_total"})
FLOAT_FIELDS = frozenset({"latitude", "longitude", "value_percent"})


def _to_int(text: str | None) -> int:
    """Parse leading integer of text, 0 when there is none."""
    match = _LEADING_INT.match(text or "")
    return int(match.group()) if match else 0


def _to_float(text: str | None) -> float:
    """Parse leading number of text, 0.0 when there is none."""
    match = _LEADING_FLOAT.match(text or "")
    return float(match.group()) if match else 0.0


def parse_field(element: ET.Element) -> Any:
    """Coerce an item child element's text according to its tag name."""
    name = element.tag
    text = element.text

    if name == "time":
        return datetime.fromtimestamp(_to_int(text), tz=timezone.utc)
    if name == "javascript":
        return text == "1"
    if name in INT_FIELDS:
        return _to_int(text)
    if name in FLOAT_FIELDS:
        return _to_float(text)
    if name == "custom":
        return {child.tag: child.text for child in element}
    return text


def parse_items(document: bytes | str, record_cls: type[R]) -> list[R]:
    """Parse ``<items>`` document into one record per ``<item>``.

    Args:
        document: Raw XML response body.
        record_cls: Record class for every item of this report.

    Returns:
        Records in document order; empty when the root is not ``<items>``.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not valid XML.
    """
    root = ET.fromstring(document)
    if root.tag != "items":
        return []
    return [
        record_cls.from_fields({child.tag: parse_field(child) for child in item})
        for item in root.iterfind("item")
    ]
