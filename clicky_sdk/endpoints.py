"""Base URLs and endpoint constants for Clicky API."""

from enum import StrEnum


class BaseURLs(StrEnum):
    """Base URLs for Clicky API services.

    Each URL can be used directly as a string since StrEnum inherits from str.
    """

    API = "http://api.getclicky.com"


class Endpoints:
    """Common endpoint paths."""

    STATS = "/stats/api2"
