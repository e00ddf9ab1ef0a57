"""Structural capabilities: runtime protocol checks and extensions.

A location can be given extra operations at runtime without touching its
class or any other reference to it. `add_extension()` returns an `Extended`
composite: the original value plus a side-table of named operations (and
optional seed state). Attribute lookup walks the side-table first, then the
seed state, then the wrapped value.

`implements_protocol()` answers "does this value expose all these
callables right now?", for plain values and composites alike.
"""

from __future__ import annotations

import inspect
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import FrozenInstanceError
from types import MappingProxyType, MethodType
from typing import TypeAlias

ProtocolDefinition: TypeAlias = Sequence[str]
"""Names of the operations a value must expose."""

ExtensionSource: TypeAlias = type | Mapping[str, Callable[..., object]]
"""A mixin class, or a mapping of name → function taking `self` first."""


class Extended:
    """A value with extra operations attached.

    Immutable: operations and seed state are fixed at construction.
    Operations are bound to the composite, so `self` inside an extension
    sees the extension's own operations as well as the wrapped value.

    Attributes:
        operations: Read-only view of the attached operations
        state: Read-only view of the seed state
    """

    __slots__ = ("_target", "_operations", "_state")

    def __init__(
        self,
        target: object,
        operations: Mapping[str, object],
        state: Mapping[str, object] | None = None,
    ) -> None:
        """Initialize composite.

        Args:
            target: Wrapped value (never another Extended)
            operations: Name → function or property
            state: Seed state, looked up before the wrapped value

        Raises:
            TypeError: If `target` is an Extended
        """
        # FAIL-FIRST: composites never nest; add_extension() merges instead
        if isinstance(target, Extended):
            raise TypeError("target must not be an Extended; use add_extension() to merge")

        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_operations", MappingProxyType(dict(operations)))
        object.__setattr__(self, "_state", MappingProxyType(dict(state or {})))

    @property
    def operations(self) -> Mapping[str, object]:
        return self._operations

    @property
    def state(self) -> Mapping[str, object]:
        return self._state

    def __getattr__(self, name: str) -> object:
        # only reached when normal lookup fails
        operations = object.__getattribute__(self, "_operations")
        if name in operations:
            operation = operations[name]
            if isinstance(operation, property):
                return operation.__get__(self, type(self))
            return MethodType(operation, self)
        state = object.__getattribute__(self, "_state")
        if name in state:
            return state[name]
        return getattr(object.__getattribute__(self, "_target"), name)

    def __setattr__(self, name: str, value: object) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    def __copy__(self) -> Extended:
        return type(self)(self._target, self._operations, self._state)

    def __reduce__(self) -> tuple[object, ...]:
        # rebuilt through __init__; slots are never assigned directly
        return (type(self), (self._target, dict(self._operations), dict(self._state)))

    def __dir__(self) -> list[str]:
        return sorted({*dir(self._target), *self._operations, *self._state, "unwrap"})

    def unwrap(self) -> object:
        """Return the wrapped value, without any extension."""
        return self._target

    def add_extension(
        self,
        source: ExtensionSource,
        seed: Mapping[str, object] | None = None,
    ) -> Extended:
        """Attach more operations. See `add_extension()`."""
        return add_extension(self, source, seed)

    def implements_protocol(self, names: ProtocolDefinition) -> bool:
        """See `implements_protocol()`."""
        return implements_protocol(self, names)

    def __str__(self) -> str:
        return str(self._target)

    def __repr__(self) -> str:
        return f"Extended({self._target!r}, operations={sorted(self._operations)!r})"

    def __fspath__(self) -> str:
        return os.fspath(self._target)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Extended):
            other = other.unwrap()
        return self._target == other

    def __hash__(self) -> int:
        return hash(self._target)


def add_extension(
    value: object,
    source: ExtensionSource,
    seed: Mapping[str, object] | None = None,
) -> Extended:
    """Return `value` with the operations of `source` attached.

    `value` itself is never modified. Extending an `Extended` merges the
    side-tables over the same wrapped value; later operations win.

    Args:
        value: Value to extend
        source: Mixin class (its functions and properties, minus those
            inherited from the value's own classes), or a mapping of
            name → function taking `self` first
        seed: Initial state attributes. None = state comes from `value`.

    Returns:
        New composite

    Raises:
        TypeError: If `source` is neither a class nor a mapping of callables
    """
    target = value.unwrap() if isinstance(value, Extended) else value
    operations = _collect_operations(source, type(target))

    if isinstance(value, Extended):
        return Extended(
            target,
            {**value.operations, **operations},
            {**value.state, **(seed or {})},
        )
    return Extended(target, operations, seed)


def implements_protocol(value: object, names: ProtocolDefinition) -> bool:
    """Check if every name in `names` is a callable attribute of `value`.

    Args:
        value: Any value, extended or not
        names: Required operation names

    Returns:
        True if all operations are present. Missing attributes give False.

    Raises:
        TypeError: If `names` is a single string
    """
    # FAIL-FIRST: a bare str would be checked character by character
    if isinstance(names, str):
        raise TypeError("names must be a sequence of names, not str")
    return all(callable(getattr(value, name, None)) for name in names)


def _collect_operations(source: ExtensionSource, target_type: type) -> dict[str, object]:
    if isinstance(source, type):
        inherited = set(target_type.__mro__)
        operations: dict[str, object] = {}
        # base classes first so subclasses override
        for klass in reversed(source.__mro__):
            if klass is object or klass in inherited:
                continue
            for name, member in vars(klass).items():
                if name.startswith("__"):
                    continue
                if inspect.isfunction(member) or isinstance(member, property):
                    operations[name] = member
        return operations

    if isinstance(source, Mapping):
        for name, operation in source.items():
            if not callable(operation) and not isinstance(operation, property):
                raise TypeError(f"extension {name!r} must be callable, got {type(operation).__name__}")
        return dict(source)

    raise TypeError(f"source must be a class or a mapping, got {type(source).__name__}")
