"""Process-wide default configuration.

New ``ClickyClient`` instances snapshot these defaults at construction time.
Updates replace the whole dict under a lock, so snapshots already taken are
never affected.
"""

import threading
from collections.abc import Mapping

from .exceptions import ClickyConfigError
from .types import Config, Options

_lock = threading.Lock()
_default_config: Config = {"app": "clicky-python"}


def ensure_mapping(options: object) -> None:
    """Raise ClickyConfigError unless ``options`` is a mapping."""
    if not isinstance(options, Mapping):
        raise ClickyConfigError(
            f"Configuration must be a mapping, got {type(options).__name__}"
        )


def get_config() -> Config:
    """Return a copy of the current default configuration."""
    with _lock:
        return dict(_default_config)


def configure(options: Options) -> None:
    """Merge ``options`` into the default configuration.

    Example:
        >>> configure({"site_id": 1234, "sitekey": "12345678abcd"})
    """
    global _default_config
    ensure_mapping(options)
    with _lock:
        _default_config = {**_default_config, **options}


def configure_replace(options: Options) -> None:
    """Replace the default configuration with a copy of ``options``."""
    global _default_config
    ensure_mapping(options)
    with _lock:
        _default_config = dict(options)
