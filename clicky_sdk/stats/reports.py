"""Named reports for Clicky Stats API.

One method per report in ``clicky_sdk.actions``; the method name is the
report identifier with dashes replaced by underscores. Each accepts the same
per-call ``options`` / keyword arguments as ``ClickyClient.get_report``.
"""

from typing import TYPE_CHECKING, Any, cast

from clicky_sdk.responses import (
    ActionResponse,
    ChronoResponse,
    TallyResponse,
    VisitorResponse,
)
from clicky_sdk.types import Options

if TYPE_CHECKING:
    from clicky_sdk.stats.client import ClickyClient


class ReportsAPI:
    """Reports subclient for Stats API."""

    def __init__(self, client: "ClickyClient") -> None:
        self._client = client

    def _get(self, action: str, options: Options | None, kwargs: dict[str, Any]) -> Any:
        return self._client.get_report(action, options, **kwargs)

    # Visitors / Actions

    def visitors_list(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[VisitorResponse]:
        """All visitors."""
        return cast(list[VisitorResponse], self._get("visitors-list", options, kwargs))

    def actions_list(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[ActionResponse]:
        """All actions."""
        return cast(list[ActionResponse], self._get("actions-list", options, kwargs))

    # Searches

    def searches_recent(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[ChronoResponse]:
        """Searches that led someone to your site."""
        return cast(list[ChronoResponse], self._get("searches-recent", options, kwargs))

    def searches_unique(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[ChronoResponse]:
        """Searches that led someone to your site for the first time ever."""
        return cast(list[ChronoResponse], self._get("searches-unique", options, kwargs))

    def links_recent(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[ChronoResponse]:
        """Links that led someone to your site."""
        return cast(list[ChronoResponse], self._get("links-recent", options, kwargs))

    def links_unique(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[ChronoResponse]:
        """Links that led someone to your site for the first time ever."""
        return cast(list[ChronoResponse], self._get("links-unique", options, kwargs))

    # Popular

    def searches(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Full search queries."""
        return cast(list[TallyResponse], self._get("searches", options, kwargs))

    def searches_keywords(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Search keywords."""
        return cast(list[TallyResponse], self._get("searches-keywords", options, kwargs))

    def searches_engines(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Search engines."""
        return cast(list[TallyResponse], self._get("searches-engines", options, kwargs))

    def links(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Incoming links (full URL)."""
        return cast(list[TallyResponse], self._get("links", options, kwargs))

    def links_domains(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Incoming links (by domain name)."""
        return cast(list[TallyResponse], self._get("links-domains", options, kwargs))

    def links_outbound(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Outbound links."""
        return cast(list[TallyResponse], self._get("links-outbound", options, kwargs))

    def pages(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Pages on your site."""
        return cast(list[TallyResponse], self._get("pages", options, kwargs))

    def pages_entrance(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Entrance pages."""
        return cast(list[TallyResponse], self._get("pages-entrance", options, kwargs))

    def pages_exit(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Exit pages."""
        return cast(list[TallyResponse], self._get("pages-exit", options, kwargs))

    def downloads(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """File downloads (pictures, zip files etc)."""
        return cast(list[TallyResponse], self._get("downloads", options, kwargs))

    def clicks(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """AJAX and Flash interactions."""
        return cast(list[TallyResponse], self._get("clicks", options, kwargs))

    def countries(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Visitors' countries."""
        return cast(list[TallyResponse], self._get("countries", options, kwargs))

    def cities(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Visitors' cities."""
        return cast(list[TallyResponse], self._get("cities", options, kwargs))

    def languages(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Languages."""
        return cast(list[TallyResponse], self._get("languages", options, kwargs))

    def web_browsers(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Web browsers."""
        return cast(list[TallyResponse], self._get("web-browsers", options, kwargs))

    def operating_systems(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Operating systems."""
        return cast(list[TallyResponse], self._get("operating-systems", options, kwargs))

    def screen_resolutions(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Screen resolutions."""
        return cast(list[TallyResponse], self._get("screen-resolutions", options, kwargs))

    def hostnames(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Visitor hostnames."""
        return cast(list[TallyResponse], self._get("hostnames", options, kwargs))

    def organizations(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Visitor organizations."""
        return cast(list[TallyResponse], self._get("organizations", options, kwargs))

    def visitors_most_active(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """The people who have visited your site the most often."""
        return cast(list[TallyResponse], self._get("visitors-most-active", options, kwargs))

    def traffic_sources(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """How visitors are arriving at your site."""
        return cast(list[TallyResponse], self._get("traffic-sources", options, kwargs))

    def feedburner_clicks(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Feedburner clicks."""
        return cast(list[TallyResponse], self._get("feedburner-clicks", options, kwargs))

    def feedburner_views(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Feedburner views."""
        return cast(list[TallyResponse], self._get("feedburner-views", options, kwargs))

    # Tallies

    def site_rank(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Current ranking amongst all other sites registered on Clicky."""
        return cast(list[TallyResponse], self._get("site-rank", options, kwargs))

    def visitors(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Number of visitors."""
        return cast(list[TallyResponse], self._get("visitors", options, kwargs))

    def visitors_unique(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Number of unique visitors."""
        return cast(list[TallyResponse], self._get("visitors-unique", options, kwargs))

    def actions(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Number of visitor actions."""
        return cast(list[TallyResponse], self._get("actions", options, kwargs))

    def actions_average(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Average number of actions per visitor."""
        return cast(list[TallyResponse], self._get("actions-average", options, kwargs))

    def time_average(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Average time on site per visitor."""
        return cast(list[TallyResponse], self._get("time-average", options, kwargs))

    def time_total(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Total time spent on your site."""
        return cast(list[TallyResponse], self._get("time-total", options, kwargs))

    def bounce_rate(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """% of visitors who only viewed one page."""
        return cast(list[TallyResponse], self._get("bounce-rate", options, kwargs))

    def visitors_online(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Number of visitors currently active on your web site."""
        return cast(list[TallyResponse], self._get("visitors-online", options, kwargs))

    def feedburner_subscribers(
        self, options: Options | None = None, **kwargs: Any
    ) -> list[TallyResponse]:
        """Number of Feedburner subscribers."""
        return cast(list[TallyResponse], self._get("feedburner-subscribers", options, kwargs))
