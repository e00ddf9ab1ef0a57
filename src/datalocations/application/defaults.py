"""Composition root: the default collaborators for smart constructors.

The active LocationConfig lives in a ContextVar, so `use_config()` only
affects the current thread / asyncio task.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from datalocations.domain.exceptions.reporting import THROW_THE_ERROR
from datalocations.domain.model.configuration import LocationConfig
from datalocations.infrastructure.adapters.node_path import PosixPathApi, Win32PathApi
from datalocations.infrastructure.adapters.whatwg_url import WhatwgUrlApi

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_active_config: ContextVar[LocationConfig | None] = ContextVar(
    "datalocations_config",
    default=None,
)


def default_config() -> LocationConfig:
    """Build the platform default configuration.

    Path capability follows the host OS; URL pathnames are always POSIX.
    """
    path_api = Win32PathApi() if os.name == "nt" else PosixPathApi()
    return LocationConfig(
        path_api=path_api,
        url_api=WhatwgUrlApi(),
        url_path_api=PosixPathApi(),
        on_error=THROW_THE_ERROR,
    )


_DEFAULT_CONFIG = default_config()


def current_config() -> LocationConfig:
    """Return the configuration active in the current context."""
    config = _active_config.get()
    return config if config is not None else _DEFAULT_CONFIG


@contextmanager
def use_config(config: LocationConfig) -> Iterator[LocationConfig]:
    """Make `config` the active configuration inside the `with` block.

    Example:
        >>> with use_config(current_config().with_overrides(on_error=log_the_error)):
        ...     Filepath.from_location("/tmp")

    Args:
        config: Configuration to activate

    Yields:
        The activated configuration

    Raises:
        TypeError: If `config` is not a LocationConfig
    """
    if not isinstance(config, LocationConfig):
        raise TypeError(f"config must be LocationConfig, got {type(config).__name__}")

    token = _active_config.set(config)
    logger.debug("activated %r", config)
    try:
        yield config
    finally:
        _active_config.reset(token)
