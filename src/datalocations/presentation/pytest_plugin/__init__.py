"""pytest plugin for datalocations.

Provides fixtures for tests of code that builds locations:
    posix_path_api: PosixPathApi
    win32_path_api: Win32PathApi
    recording_path_api: RecordingPathApi (records calls, falls back to POSIX)
    url_api: WhatwgUrlApi
    location_config: LocationConfig (override in conftest.py)
    active_location_config: location_config, activated for the test

Enable in conftest.py:
    pytest_plugins = ["datalocations.presentation.pytest_plugin"]
"""

# Register fixtures from fixtures module
from datalocations.presentation.pytest_plugin.fixtures import (
    active_location_config,
    location_config,
    posix_path_api,
    recording_path_api,
    url_api,
    win32_path_api,
)

# Export fixtures for pytest discovery
__all__ = [
    "active_location_config",
    "location_config",
    "posix_path_api",
    "recording_path_api",
    "url_api",
    "win32_path_api",
]
