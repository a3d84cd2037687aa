"""Catalog of reports offered by the Clicky stats API.

Grouped by category, for building report pickers and similar UI. The client
never validates against this catalog: any identifier is sent as-is.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ActionGroup:
    """Named category of report identifiers.

    Attributes:
        name: Category name, e.g. "Popular".
        actions: Report identifier -> human-readable description.
    """

    name: str
    actions: Mapping[str, str]


ACTION_GROUPS: tuple[ActionGroup, ...] = (
    ActionGroup(
        name="Visitors",
        actions=MappingProxyType({
            "visitors-list": "All visitors",
        }),
    ),
    ActionGroup(
        name="Actions",
        actions=MappingProxyType({
            "actions-list": "All actions",
        }),
    ),
    ActionGroup(
        name="Searches",
        actions=MappingProxyType({
            "searches-recent": "Searches that led someone to your site",
            "searches-unique": "Searches that led someone to your site for the first time ever",
            "links-recent": "Links that led someone to your site",
            "links-unique": "Links that led someone to your site for the first time ever",
        }),
    ),
    ActionGroup(
        name="Popular",
        actions=MappingProxyType({
            "searches": "Full search queries",
            "searches-keywords": "Search keywords",
            "searches-engines": "Search engines",
            "links": "Incoming links (full URL)",
            "links-domains": "Incoming links (by domain name)",
            "links-outbound": "Outbound links",
            "pages": "Pages on your site",
            "pages-entrance": "Entrance pages",
            "pages-exit": "Exit pages",
            "downloads": "File downloads (pictures, zip files etc)",
            "clicks": "AJAX and Flash interactions",
            "countries": "Visitors' countries",
            "cities": "Visitors' cities",
            "languages": "Languages",
            "web-browsers": "Web browsers",
            "operating-systems": "Operating systems",
            "screen-resolutions": "Screen resolutions",
            "hostnames": "Visitor hostnames",
            "organizations": "Visitor organizations",
            "visitors-most-active": "The people who have visited your site the most often",
            "traffic-sources": "How visitors are arriving at your site",
            "feedburner-clicks": "Feedburner clicks",
            "feedburner-views": "Feedburner views",
        }),
    ),
    ActionGroup(
        name="Tallies",
        actions=MappingProxyType({
            "site-rank": "Current ranking amongst all other sites registered on Clicky",
            "visitors": "Number of visitors",
            "visitors-unique": "Number of unique visitors",
            "actions": "Number of visitor actions",
            "actions-average": "Average number of actions per visitor",
            "time-average": "Average time on site per visitor",
            "time-total": "Total time spent on your site",
            "bounce-rate": "% of visitors who only viewed one page",
            "visitors-online": "Number of visitors currently active on your web site",
            "feedburner-subscribers": "Number of Feedburner subscribers",
        }),
    ),
)


def iter_actions() -> Iterator[tuple[str, str, str]]:
    """Yield (identifier, category, description) triples in catalog order."""
    for group in ACTION_GROUPS:
        for identifier, description in group.actions.items():
            yield identifier, group.name, description


def describe_action(identifier: str) -> str | None:
    """Get the description of a report identifier, or None if not cataloged."""
    for group in ACTION_GROUPS:
        if identifier in group.actions:
            return group.actions[identifier]
    return None
