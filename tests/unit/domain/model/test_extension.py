"""Tests for domain/model/extension.py."""

import copy
import os
from dataclasses import FrozenInstanceError

import pytest

from datalocations.domain.model.data_location import DataLocation
from datalocations.domain.model.extension import Extended, add_extension, implements_protocol
from datalocations.domain.model.filepath import Filepath
from tests.factories import make_filepath


class DummyFeature:
    """Mixin used as an extension source."""

    def get_dummy(self) -> str:
        return f"dummy:{self.location}"  # type: ignore[attr-defined]

    @property
    def shouting(self) -> str:
        return str(self).upper()


class LocationFeature(DataLocation):
    """Extension source that subclasses DataLocation for type hints."""

    def feature(self) -> str:
        return f"feature:{self.value_of()}"


class TestAddExtension:
    """Tests for add_extension()."""

    def test_attached_operation_sees_original(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        assert extended.get_dummy() == "dummy:/tmp"

    def test_property_operation(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        assert extended.shouting == "/TMP"

    def test_original_unchanged(self) -> None:
        filepath = make_filepath(None, "/tmp")
        filepath.add_extension(DummyFeature)
        assert not hasattr(filepath, "get_dummy")

    def test_original_operations_still_work(self) -> None:
        extended = make_filepath(None, "/tmp/example").add_extension(DummyFeature)
        assert extended.basename() == "example"
        assert str(extended.dirname()) == "/tmp"

    def test_mapping_source_with_seed(self) -> None:
        filepath = make_filepath(None, "/tmp")
        extended = add_extension(
            filepath,
            {"describe": lambda self: f"{self.label}: {self}"},
            seed={"label": "scratch"},
        )
        assert extended.describe() == "scratch: /tmp"
        assert extended.state == {"label": "scratch"}

    def test_without_seed_state_comes_from_value(self) -> None:
        extended = add_extension(make_filepath("/tmp", "a"), {"where": lambda self: self.base})
        assert extended.where() == "/tmp"

    def test_inherited_location_methods_not_collected(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(LocationFeature)
        assert set(extended.operations) == {"feature"}
        assert extended.feature() == "feature:/tmp"

    def test_extending_extended_merges(self) -> None:
        filepath = make_filepath(None, "/tmp")
        first = filepath.add_extension(DummyFeature, seed={"a": 1})
        second = first.add_extension({"shout": lambda self: self.get_dummy().upper()}, seed={"b": 2})

        assert second.shout() == "DUMMY:/TMP"
        assert second.unwrap() is filepath
        assert second.state == {"a": 1, "b": 2}

    def test_later_operations_win(self) -> None:
        first = make_filepath(None, "/tmp").add_extension({"name": lambda self: "first"})
        second = first.add_extension({"name": lambda self: "second"})
        assert second.name() == "second"

    def test_invalid_source_raises(self) -> None:
        with pytest.raises(TypeError, match="class or a mapping"):
            add_extension(make_filepath(None, "/tmp"), 42)  # type: ignore[arg-type]

    def test_non_callable_operation_raises(self) -> None:
        with pytest.raises(TypeError, match="callable"):
            add_extension(make_filepath(None, "/tmp"), {"value": 42})  # type: ignore[dict-item]


class TestExtended:
    """Tests for Extended composite."""

    def test_forwards_str_eq_hash(self) -> None:
        filepath = make_filepath(None, "/tmp")
        extended = filepath.add_extension(DummyFeature)

        assert str(extended) == "/tmp"
        assert extended == filepath
        assert filepath == extended
        assert hash(extended) == hash(filepath)

    def test_fspath(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        assert os.fspath(extended) == "/tmp"

    def test_unwrap(self) -> None:
        filepath = make_filepath(None, "/tmp")
        assert isinstance(filepath.add_extension(DummyFeature).unwrap(), Filepath)

    def test_immutable(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        with pytest.raises(FrozenInstanceError):
            extended.extra = 1  # type: ignore[attr-defined]

    def test_missing_attribute(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        with pytest.raises(AttributeError):
            _ = extended.does_not_exist

    def test_nesting_rejected(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        with pytest.raises(TypeError, match="Extended"):
            Extended(extended, {})

    def test_copy(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature, {"tag": "a"})
        copied = copy.copy(extended)

        assert copied == extended
        assert copied.unwrap() is extended.unwrap()
        assert copied.get_dummy() == "dummy:/tmp"
        assert copied.tag == "a"

    def test_deepcopy(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature, {"tag": "a"})
        copied = copy.deepcopy(extended)

        assert copied == extended
        assert copied.shouting == "/TMP"
        assert copied.tag == "a"
        with pytest.raises(FrozenInstanceError):
            copied.extra = 1  # type: ignore[attr-defined]


class TestImplementsProtocol:
    """Tests for implements_protocol()."""

    def test_attached_operation(self) -> None:
        extended = make_filepath(None, "/tmp").add_extension(DummyFeature)
        assert implements_protocol(extended, ["get_dummy"])
        assert extended.implements_protocol(["get_dummy", "dirname"])

    def test_location_without_attachment(self) -> None:
        assert not implements_protocol(make_filepath(None, "/tmp"), ["get_dummy"])

    def test_native_operations(self) -> None:
        assert make_filepath(None, "/tmp").implements_protocol(["dirname", "join", "resolve"])

    def test_non_callable_attribute(self) -> None:
        assert not implements_protocol(make_filepath(None, "/tmp"), ["location"])

    def test_empty_protocol(self) -> None:
        assert implements_protocol(object(), [])

    def test_str_names_rejected(self) -> None:
        with pytest.raises(TypeError, match="not str"):
            implements_protocol(make_filepath(None, "/tmp"), "dirname")
