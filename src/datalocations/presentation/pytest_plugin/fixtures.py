"""pytest fixtures for code that works with locations.

User overrides location_config in their conftest.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from datalocations.application.defaults import default_config, use_config
from datalocations.infrastructure.adapters.node_path import PosixPathApi, Win32PathApi
from datalocations.infrastructure.adapters.recording_path import RecordingPathApi
from datalocations.infrastructure.adapters.whatwg_url import WhatwgUrlApi

if TYPE_CHECKING:
    from collections.abc import Iterator

    from datalocations.domain.model.configuration import LocationConfig


@pytest.fixture
def posix_path_api() -> PosixPathApi:
    """POSIX path capability, whatever the host OS."""
    return PosixPathApi()


@pytest.fixture
def win32_path_api() -> Win32PathApi:
    """Win32 path capability, whatever the host OS."""
    return Win32PathApi()


@pytest.fixture
def recording_path_api() -> RecordingPathApi:
    """Path capability that records calls and falls back to POSIX."""
    return RecordingPathApi()


@pytest.fixture
def url_api() -> WhatwgUrlApi:
    """WHATWG URL capability."""
    return WhatwgUrlApi()


@pytest.fixture
def location_config() -> LocationConfig:
    """Configuration activated by `active_location_config`.

    Override in conftest.py to inject other collaborators.
    """
    return default_config()


@pytest.fixture
def active_location_config(location_config: LocationConfig) -> Iterator[LocationConfig]:
    """Activate `location_config` for the duration of the test."""
    with use_config(location_config) as config:
        yield config
