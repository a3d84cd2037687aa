"""Query option resolution and request path building for the stats API."""

from collections.abc import Mapping
from datetime import date
from urllib.parse import quote

from .endpoints import Endpoints
from .exceptions import ClickyConfigError
from .types import Config, Options

DEFAULT_LIMIT = 10
DEFAULT_DATE = "today"
OUTPUT_FORMAT = "xml"
REQUIRED_KEYS = ("site_id", "sitekey")


def format_date(value: date | str) -> str:
    """Format date/datetime to YYYY-MM-DD string."""
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return value


def _resolve_date(options: Config) -> None:
    value = options.get("date")

    if isinstance(value, date):
        options["date"] = format_date(value)
    elif options.get("from") and options.get("to"):
        date_from = format_date(options.pop("from"))
        date_to = format_date(options.pop("to"))
        options["date"] = f"{date_from},{date_to}"
    else:
        # Relative dates: "today", "3 days ago" -> "3-days-ago", "last-month"
        options["date"] = str(value or DEFAULT_DATE).replace(" ", "-")


def resolve_options(base: Options, overrides: Options, action: str) -> Config:
    """Build the final query options for one report request.

    Args:
        base: Client-level configuration.
        overrides: Per-call options, taking precedence over ``base``.
        action: Report identifier, e.g. "pages" or "visitors-list".

    Returns:
        New dict ready for ``build_request_path``. Output format is always
        "xml"; ``limit`` defaults to 10 and becomes "all" when set to
        None/False; ``date`` is normalized from a date, a ``from``/``to``
        range or relative text.

    Raises:
        ClickyConfigError: If inputs are not mappings, or ``site_id`` or
            ``sitekey`` is missing after the merge.
    """
    if not isinstance(base, Mapping) or not isinstance(overrides, Mapping):
        raise ClickyConfigError("Options must be mappings")

    options: Config = {**base, **overrides}
    options["output"] = OUTPUT_FORMAT

    if "limit" in options:
        if options["limit"] is None or options["limit"] is False:
            options["limit"] = "all"
    else:
        options["limit"] = DEFAULT_LIMIT

    _resolve_date(options)

    missing = [key for key in REQUIRED_KEYS if key not in options]
    if missing:
        raise ClickyConfigError(f"Config keys {', '.join(missing)} are required")

    options["type"] = action
    return options


def build_request_path(options: Options) -> str:
    """Build stats endpoint path with query string.

    Keys and values are percent-encoded; commas stay literal so date ranges
    read as the API documents them.
    """
    query = "&".join(
        f"{quote(str(key), safe='')}={quote(str(value), safe=',')}"
        for key, value in options.items()
    )
    return f"{Endpoints.STATS}?{query}"
