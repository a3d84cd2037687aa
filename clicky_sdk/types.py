"""Type definitions for Clicky SDK."""

from collections.abc import Mapping
from typing import Any

# Option name -> value, as sent to the stats endpoint
Config = dict[str, Any]
Options = Mapping[str, Any]
