"""Stats API client."""

import logging
from dataclasses import dataclass, field
from typing import Any

from clicky_sdk.base import BaseAPIClient
from clicky_sdk.config import ensure_mapping, get_config
from clicky_sdk.options import build_request_path, resolve_options
from clicky_sdk.parser import parse_items
from clicky_sdk.responses import Response, response_class_for_action
from clicky_sdk.types import Config, Options
from .reports import ReportsAPI

logger = logging.getLogger(__name__)


@dataclass
class ClickyClient(BaseAPIClient):
    """Client for Clicky Stats API.

    Configuration is layered: process-wide defaults (``clicky_sdk.configure``)
    are snapshotted at construction and merged with ``config``; per-call
    options override both. Later changes to the defaults do not affect an
    existing client.

    Usage:
        configure({"site_id": 1234, "sitekey": "12345678abcd"})

        with ClickyClient() as client:
            pages = client.reports.pages(limit=False, date=date.today())
            visitors = client.get_report("visitors-list", date="yesterday")
            searches = client.get_report(
                "searches",
                {"from": date(2024, 1, 1), "to": date(2024, 1, 31)},
            )
    """

    config: Options | None = field(default=None, repr=False)

    reports: ReportsAPI = field(init=False, repr=False)
    _config: Config = field(init=False, repr=False)

    def __post_init__(self) -> None:
        overrides = {} if self.config is None else self.config
        ensure_mapping(overrides)
        self._config = {**get_config(), **overrides}
        super().__post_init__()
        self.reports = ReportsAPI(self)

    @property
    def effective_config(self) -> Config:
        """Copy of the configuration this client resolves options against."""
        return dict(self._config)

    def get_report(
        self,
        action: str,
        options: Options | None = None,
        **kwargs: Any,
    ) -> list[Response]:
        """Fetch a report by identifier.

        Any identifier is accepted, cataloged or not; see
        ``clicky_sdk.actions`` for the known ones.

        Args:
            action: Report identifier, e.g. "pages" or "visitors-list".
            options: Per-call options. The only way to pass ``from``/``to``,
                which are Python keywords.
            **kwargs: More per-call options, overriding ``options``.

        Returns:
            One record per report item. The record class depends on
            ``action`` (see ``response_class_for_action``).

        Raises:
            ClickyConfigError: If ``site_id`` or ``sitekey`` is missing.
            ClickyResponseError: If the API returns non-2xx or an empty body.
            xml.etree.ElementTree.ParseError: If the body is not valid XML.
        """
        overrides = {} if options is None else options
        ensure_mapping(overrides)
        overrides = {**overrides, **kwargs}
        resolved = resolve_options(self._config, overrides, action)
        body = self.get(build_request_path(resolved))

        records = parse_items(body, response_class_for_action(action))
        logger.debug("Parsed %d %s records", len(records), action)
        return records
