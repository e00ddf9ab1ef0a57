"""Tests for presentation/pytest_plugin fixtures."""

from datalocations.application.defaults import current_config
from datalocations.domain.model.configuration import LocationConfig
from datalocations.domain.model.filepath import Filepath
from datalocations.infrastructure.adapters.node_path import PosixPathApi, Win32PathApi
from datalocations.infrastructure.adapters.recording_path import RecordingPathApi
from datalocations.infrastructure.adapters.whatwg_url import WhatwgUrlApi


class TestFixtures:
    """Fixtures provided by the plugin."""

    def test_path_apis(self, posix_path_api: PosixPathApi, win32_path_api: Win32PathApi) -> None:
        assert isinstance(posix_path_api, PosixPathApi)
        assert isinstance(win32_path_api, Win32PathApi)

    def test_url_api(self, url_api: WhatwgUrlApi) -> None:
        assert url_api.parse("http://example.com/").href == "http://example.com/"

    def test_recording_path_api_is_fresh(self, recording_path_api: RecordingPathApi) -> None:
        assert recording_path_api.called_list == []
        Filepath.from_location("/tmp", path_api=recording_path_api)
        assert recording_path_api.called_list == ["normalize"]

    def test_location_config(self, location_config: LocationConfig) -> None:
        assert isinstance(location_config, LocationConfig)

    def test_active_location_config(self, active_location_config: LocationConfig) -> None:
        assert current_config() is active_location_config
