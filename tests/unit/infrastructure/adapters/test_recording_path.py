"""Tests for infrastructure/adapters/recording_path.py."""

from datalocations.domain.model.parsed_path import ParsedPath
from datalocations.infrastructure.adapters.node_path import Win32PathApi
from datalocations.infrastructure.adapters.recording_path import RecordingPathApi


class TestRecordingPathApi:
    """Tests for the recording test double."""

    def test_records_calls_and_params(self) -> None:
        api = RecordingPathApi()
        api.join("a", "b")
        api.basename("/a/b.txt", ".txt")

        assert api.called_list == ["join", "basename"]
        assert api.param_list == [("a", "b"), ("/a/b.txt", ".txt")]

    def test_falls_back_to_posix(self) -> None:
        api = RecordingPathApi()
        assert api.join("a", "b") == "a/b"
        assert api.sep == "/"

    def test_replays_queued_responses_in_order(self) -> None:
        api = RecordingPathApi(["first"])
        api.queue("second")

        assert api.normalize("x") == "first"
        assert api.dirname("x") == "second"
        assert api.dirname("/a/b") == "/a"

    def test_queued_response_of_any_type(self) -> None:
        parts = ParsedPath(base="x")
        api = RecordingPathApi([parts])
        assert api.parse("/anything") is parts

    def test_custom_delegate(self) -> None:
        api = RecordingPathApi(delegate=Win32PathApi())
        assert api.sep == "\\"
        assert api.delimiter == ";"
        assert api.join("a", "b") == "a\\b"

    def test_reset(self) -> None:
        api = RecordingPathApi(["unused"])
        api.extname("a.txt")
        api.queue("also unused")
        api.reset()

        assert api.called_list == []
        assert api.param_list == []
        assert api.extname("a.txt") == ".txt"

    def test_every_method_recorded(self) -> None:
        api = RecordingPathApi()
        api.normalize("/a")
        api.basename("/a")
        api.dirname("/a")
        api.extname("/a")
        api.is_absolute("/a")
        api.join("/a")
        api.parse("/a")
        api.format(ParsedPath(base="a"))
        api.relative("/a", "/b")
        api.resolve("/a")
        api.to_namespaced_path("/a")

        assert api.called_list == [
            "normalize",
            "basename",
            "dirname",
            "extname",
            "is_absolute",
            "join",
            "parse",
            "format",
            "relative",
            "resolve",
            "to_namespaced_path",
        ]
