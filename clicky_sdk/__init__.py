"""Clicky SDK - Python client for the Clicky web analytics stats API."""

from .actions import ACTION_GROUPS, ActionGroup, describe_action, iter_actions
from .base import BaseAPIClient
from .config import configure, configure_replace, get_config
from .endpoints import BaseURLs, Endpoints
from .exceptions import ClickyConfigError, ClickyError, ClickyResponseError
from .responses import (
    ActionResponse,
    ChronoResponse,
    Response,
    TallyResponse,
    VisitorResponse,
    response_class_for_action,
)
from .stats import ClickyClient
from .types import Config, Options

__all__ = [
    # Clients
    "BaseAPIClient",
    "ClickyClient",
    # Configuration
    "configure",
    "configure_replace",
    "get_config",
    # Catalog
    "ACTION_GROUPS",
    "ActionGroup",
    "describe_action",
    "iter_actions",
    # Endpoints
    "BaseURLs",
    "Endpoints",
    # Exceptions
    "ClickyError",
    "ClickyConfigError",
    "ClickyResponseError",
    # Records
    "Response",
    "VisitorResponse",
    "ActionResponse",
    "ChronoResponse",
    "TallyResponse",
    "response_class_for_action",
    # Types
    "Config",
    "Options",
]

__version__ = "0.1.0"
