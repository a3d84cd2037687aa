"""Typed records for stats API report items."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Self


@dataclass(frozen=True, kw_only=True)
class Response:
    """Base record for one ``<item>`` of a report.

    Fields declared on subclasses default to None when the item does not
    carry them. Fields outside the declared schema are kept in ``extra``.
    Both are reachable through ``get()`` / ``record[key]``.

    Attributes:
        custom: Custom data logged for the visitor (username, etc), as
            key/value pairs. Empty when none was logged.
        extra: Item fields not declared on the record class.
    """

    custom: dict[str, str | None] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _schema(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls) if f.name != "extra")

    @classmethod
    def from_fields(cls, item: Mapping[str, Any]) -> Self:
        """Build a record from parsed item fields."""
        schema = cls._schema()
        values = {k: v for k, v in item.items() if k in schema}
        extra = {k: v for k, v in item.items() if k not in schema}
        return cls(**values, extra=extra)

    def get(self, key: str, default: Any = None) -> Any:
        """Get field by name, falling back to ``extra``."""
        if key in self._schema():
            value = getattr(self, key)
            return default if value is None else value
        return self.extra.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Return populated fields only, ``extra`` flattened in."""
        result = {
            name: getattr(self, name)
            for name in self._schema()
            if getattr(self, name) is not None
        }
        if not self.custom:
            del result["custom"]
        result.update(self.extra)
        return result


@dataclass(frozen=True, kw_only=True)
class VisitorResponse(Response):
    """Record returned for the ``visitors-list`` report.

    Attributes:
        time: Time of the visit.
        time_total: Seconds this visitor was / has been on the site.
        ip_address: Visitor's IP address.
        session_id: Session ID for this visit.
        actions: Number of actions performed (page views, downloads,
            outbound links clicked).
        web_browser: Visitor's web browser, e.g. "Firefox".
        operating_system: Visitor's operating system, e.g. "Windows".
        screen_resolution: Screen resolution, e.g. "1024x768".
        javascript: Whether the visitor has javascript enabled.
        language: Spoken language of the visitor.
        referer_url: Where the visitor came from, if they followed a link.
        referer_domain: Domain of the referer, if applicable.
        referer_search: Search term used to reach the site, if applicable.
        geolocation: "City, Country" ("City, State, Country" for the US).
        latitude: Visitor's latitude.
        longitude: Visitor's longitude.
        clicky_url: Link to the visitor session details on Clicky.
    """

    time: datetime | None = None
    time_total: int | None = None
    ip_address: str | None = None
    session_id: str | None = None
    actions: int | None = None
    web_browser: str | None = None
    operating_system: str | None = None
    screen_resolution: str | None = None
    javascript: bool | None = None
    language: str | None = None
    referer_url: str | None = None
    referer_domain: str | None = None
    referer_search: str | None = None
    geolocation: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    clicky_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class ActionResponse(Response):
    """Record returned for the ``actions-list`` report.

    Attributes:
        time: Time of the action.
        ip_address: Visitor's IP address.
        session_id: Session ID this action belongs to.
        action_type: "pageview", "download" or "outbound".
        action_title: Page title for page views; anchor text (or image
            alt/title/URL) for downloads and outbound links.
        action_url: URL of the page view, download or outbound link.
        referer_url: Where a page view came from, if applicable.
        referer_domain: Referring domain, if applicable.
        referer_search: Search term used to reach the site, if applicable.
        clicky_url: Link to the visitor session details on Clicky.
    """

    time: datetime | None = None
    ip_address: str | None = None
    session_id: str | None = None
    action_type: str | None = None
    action_title: str | None = None
    action_url: str | None = None
    referer_url: str | None = None
    referer_domain: str | None = None
    referer_search: str | None = None
    clicky_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChronoResponse(Response):
    """Record returned for recent/unique searches and links."""

    time: datetime | None = None
    item: str | None = None
    clicky_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class TallyResponse(Response):
    """Record returned for every other report.

    Attributes:
        title: Name, title or description of the item.
        value: Item value, typically the number of occurrences.
        value_percent: Value as a percent of all items in the category.
        url: URL of the item itself (pages, links, etc), if applicable.
        clicky_url: Link to more details for this item on Clicky.
    """

    title: str | None = None
    value: int | None = None
    value_percent: float | None = None
    url: str | None = None
    clicky_url: str | None = None


_CHRONO_ACTION = re.compile(r"^(searches|links)-(recent|unique)$")


def response_class_for_action(action: str) -> type[Response]:
    """Select the record class for a report identifier."""
    if action == "visitors-list":
        return VisitorResponse
    if action == "actions-list":
        return ActionResponse
    if _CHRONO_ACTION.match(action):
        return ChronoResponse
    return TallyResponse
