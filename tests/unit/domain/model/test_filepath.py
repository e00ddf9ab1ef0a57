"""Tests for domain/model/filepath.py."""

from __future__ import annotations

import os
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from datalocations.application.defaults import use_config
from datalocations.domain.exceptions.base import DataLocationError
from datalocations.domain.exceptions.location import NotAFilepathError
from datalocations.domain.model.filepath import Filepath
from datalocations.domain.model.parsed_path import ParsedPath
from datalocations.infrastructure.adapters.node_path import PosixPathApi, Win32PathApi
from datalocations.infrastructure.adapters.recording_path import RecordingPathApi
from tests.factories import make_config, make_filepath


class TestConstruction:
    """Tests for smart constructors."""

    def test_from_base(self) -> None:
        filepath = Filepath.from_base("/tmp/example", path_api=PosixPathApi())
        assert filepath.base == "/tmp/example"
        assert filepath.location == ""
        assert filepath.value_of() == "/tmp/example"

    def test_from_location(self) -> None:
        filepath = Filepath.from_location("/tmp/example", path_api=PosixPathApi())
        assert filepath.base is None
        assert filepath.value_of() == "/tmp/example"

    def test_of_resolves_against_base(self) -> None:
        assert str(make_filepath("/tmp/this/is", "an/example")) == "/tmp/this/is/an/example"

    def test_absolute_location_ignores_base(self) -> None:
        assert str(make_filepath("/tmp", "/etc/hosts")) == "/etc/hosts"

    def test_no_base_stays_relative(self) -> None:
        filepath = make_filepath(None, "./tmp")
        assert str(filepath) == "tmp"
        assert not filepath.is_absolute()

    def test_dot_dot_resolves_against_cwd(self) -> None:
        assert str(make_filepath(".", "..")) == os.path.dirname(os.getcwd())

    def test_format(self) -> None:
        filepath = Filepath.format("/tmp", ParsedPath(dir="a", base="b.txt"), path_api=PosixPathApi())
        assert filepath.location == "a/b.txt"
        assert str(filepath) == "/tmp/a/b.txt"

    def test_location_inputs(self) -> None:
        base = make_filepath(None, "/tmp")
        filepath = Filepath.of(base, Path("a/b"), path_api=PosixPathApi())
        assert filepath.base == "/tmp"
        assert filepath.location == "a/b"
        assert str(filepath) == "/tmp/a/b"

    def test_resolved_path(self) -> None:
        assert make_filepath("/tmp", "a/../b").resolved_path == "/tmp/b"


class TestValidation:
    """Construction-time validation."""

    @pytest.mark.parametrize(
        ("base", "location"),
        [
            (None, "http://example.com"),
            (None, "https://example.com/file"),
            (None, "//server/share"),
            ("http://example.com", "file"),
        ],
    )
    def test_url_shaped_input_raises(self, base: str | None, location: str) -> None:
        with pytest.raises(NotAFilepathError) as exc_info:
            make_filepath(base, location)
        assert exc_info.value.base == base
        assert exc_info.value.location == location

    def test_hook_called_then_error_raised(self) -> None:
        received: list[DataLocationError] = []
        with pytest.raises(NotAFilepathError):
            make_filepath(None, "http://example.com", on_error=received.append)
        assert len(received) == 1
        assert isinstance(received[0], NotAFilepathError)

    def test_hook_can_raise_its_own_error(self) -> None:
        def hook(error: DataLocationError) -> None:
            raise LookupError("replaced") from error

        with pytest.raises(LookupError, match="replaced"):
            make_filepath(None, "http://example.com", on_error=hook)

    def test_missing_path_api_raises(self) -> None:
        with pytest.raises(TypeError, match="path_api"):
            Filepath(None, "/tmp", None)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        filepath = make_filepath(None, "/tmp")
        with pytest.raises(FrozenInstanceError):
            filepath.location = "/etc"  # type: ignore[misc]


class TestDecomposition:
    """Tests for operations that return parts of the path."""

    def test_basename(self) -> None:
        filepath = make_filepath("/tmp", "a/b.txt")
        assert filepath.basename() == "b.txt"
        assert filepath.basename(".txt") == "b"
        assert filepath.basename(".md") == "b.txt"

    def test_extname(self) -> None:
        assert make_filepath("/tmp", "a/b.txt").extname() == ".txt"
        assert make_filepath("/tmp", ".bashrc").extname() == ""

    def test_is_absolute(self) -> None:
        assert make_filepath(None, "/tmp").is_absolute()
        assert not make_filepath(None, "tmp").is_absolute()

    def test_parse(self) -> None:
        parts = make_filepath(None, "/tmp/example/file.ts").parse()
        assert parts == ParsedPath(root="/", dir="/tmp/example", base="file.ts", ext=".ts", name="file")

    def test_parse_cached(self) -> None:
        filepath = make_filepath(None, "/tmp/example/file.ts")
        assert filepath.parse() is filepath.parse()

    def test_relative(self) -> None:
        source = make_filepath(None, "/this/is/an/example")
        target = make_filepath(None, "/this/is/another/example")
        assert source.relative(target) == "../../another/example"
        assert source.relative("/this/is/an/example") == ""

    def test_to_namespaced_path_posix(self) -> None:
        assert make_filepath(None, "/tmp").to_namespaced_path() == "/tmp"

    def test_to_namespaced_path_win32(self) -> None:
        filepath = make_filepath(None, "c:\\Windows\\System", path_api=Win32PathApi())
        assert filepath.to_namespaced_path() == "\\\\?\\c:\\Windows\\System"

    def test_fspath(self) -> None:
        filepath = make_filepath("/tmp", "a")
        assert os.fspath(filepath) == "/tmp/a"
        assert Path(filepath) == Path("/tmp/a")


class TestDerivation:
    """Tests for dirname(), join() and resolve()."""

    def test_dirname(self) -> None:
        parent = make_filepath("/tmp", "a/b.txt").dirname()
        assert parent.base == "/tmp"
        assert parent.location == "/tmp/a"
        assert str(parent) == "/tmp/a"

    def test_dirname_of_root(self) -> None:
        assert str(make_filepath(None, "/").dirname()) == "/"

    def test_dirname_without_hook_uses_active_config(self) -> None:
        received: list[DataLocationError] = []
        api = RecordingPathApi()
        filepath = make_filepath(None, "/tmp/a", path_api=api)
        api.queue("http://example.com/")

        with use_config(make_config(on_error=received.append)), pytest.raises(NotAFilepathError):
            filepath.dirname()

        assert [type(error) for error in received] == [NotAFilepathError]

    def test_join_keeps_base(self) -> None:
        joined = make_filepath("/tmp", "a").join("b", "c.txt")
        assert joined.base == "/tmp"
        assert joined.location == "a/b/c.txt"
        assert str(joined) == "/tmp/a/b/c.txt"

    def test_join_from_base_only(self) -> None:
        joined = Filepath.from_base("/tmp", path_api=PosixPathApi()).join("a")
        assert joined.location == "a"
        assert str(joined) == "/tmp/a"

    def test_resolve_reanchors(self) -> None:
        resolved = make_filepath("/tmp/this/is", "an/example").resolve("..", "..", "another/example")
        assert resolved.base == "/tmp/this/is/an/example"
        assert str(resolved) == "/tmp/this/is/another/example"

    def test_resolve_absolute_segment(self) -> None:
        assert str(make_filepath("/tmp", "a").resolve("/etc", "hosts")) == "/etc/hosts"

    def test_receiver_untouched(self) -> None:
        filepath = make_filepath("/tmp", "a")
        filepath.join("b")
        filepath.resolve("c")
        filepath.dirname()
        assert (filepath.base, filepath.location, str(filepath)) == ("/tmp", "a", "/tmp/a")

    def test_derived_keeps_path_api(self) -> None:
        api = Win32PathApi()
        filepath = make_filepath(None, "C:\\a\\b", path_api=api)
        assert filepath.dirname().path_api is api
        assert str(filepath.join("c")) == "C:\\a\\b\\c"


class TestEquality:
    """Value equality."""

    def test_equal_when_same_resolved_path(self) -> None:
        assert make_filepath("/tmp", "a") == make_filepath(None, "/tmp/a")
        assert hash(make_filepath("/tmp", "a")) == hash(make_filepath(None, "/tmp/a"))

    def test_not_equal(self) -> None:
        assert make_filepath(None, "/tmp/a") != make_filepath(None, "/tmp/b")


class TestDelegation:
    """All character-level work goes through the injected path capability."""

    def test_construction_with_base(self) -> None:
        api = RecordingPathApi()
        Filepath.of("/base", "loc", path_api=api)
        assert api.called_list == ["resolve", "normalize"]
        assert api.param_list == [("/base", "loc"), ("/base/loc",)]

    def test_construction_without_base(self) -> None:
        api = RecordingPathApi()
        Filepath.of(None, "rel", path_api=api)
        assert api.called_list == ["normalize"]

    def test_queued_response_becomes_resolved_path(self) -> None:
        api = RecordingPathApi(["/resolved", "/normalized"])
        assert str(Filepath.of("/base", "loc", path_api=api)) == "/normalized"

    def test_operations_use_resolved_path(self) -> None:
        api = RecordingPathApi()
        filepath = Filepath.of("/base", "loc.txt", path_api=api)
        api.reset()

        filepath.basename(".txt")
        filepath.extname()

        assert api.called_list == ["basename", "extname"]
        assert api.param_list == [("/base/loc.txt", ".txt"), ("/base/loc.txt",)]
