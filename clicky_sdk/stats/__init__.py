"""Stats API subclient."""

from .client import ClickyClient
from .reports import ReportsAPI

__all__ = ["ClickyClient", "ReportsAPI"]
