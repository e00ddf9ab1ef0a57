"""Abstract location value."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from datalocations.domain.model.extension import add_extension, implements_protocol

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from datalocations.domain.model.configuration import LocationConfig
    from datalocations.domain.model.extension import (
        Extended,
        ExtensionSource,
        ProtocolDefinition,
    )


@dataclass(frozen=True, slots=True, eq=False)
class DataLocation(ABC):
    """Where some data lives: a `base` plus a `location` applied to it.

    Immutable (frozen dataclass). Concrete subclasses resolve the pair once,
    at construction, and expose the result through `value_of()`.

    Equality and hashing use the concrete type and the canonical string, so
    two locations that resolve to the same place are equal however the
    pair was split.

    Attributes:
        base: Anchor the location is applied to, or None if not known
        location: Relative or absolute location; always present
    """

    base: str | None
    location: str

    def _coerce_inputs(self) -> None:
        """Replace DataLocation inputs by their canonical strings.

        Called first thing by every subclass __post_init__.

        Raises:
            TypeError: If `location` is None
        """
        if self.location is None:
            raise TypeError("location must not be None")
        if isinstance(self.base, DataLocation):
            object.__setattr__(self, "base", self.base.value_of())
        if isinstance(self.location, DataLocation):
            object.__setattr__(self, "location", self.location.value_of())

    @abstractmethod
    def value_of(self) -> str:
        """Canonical string form of this location."""

    def add_extension(
        self,
        source: ExtensionSource,
        seed: Mapping[str, object] | None = None,
    ) -> Extended:
        """Return this location with extra operations attached.

        This location is not modified.

        Args:
            source: Mixin class or mapping of name → function
            seed: Initial state. None = state comes from this location.

        Returns:
            Extended composite wrapping this location
        """
        return add_extension(self, source, seed)

    def implements_protocol(self, names: ProtocolDefinition) -> bool:
        """Check if every name in `names` is a callable on this location."""
        return implements_protocol(self, names)

    def __str__(self) -> str:
        return self.value_of()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataLocation):
            return NotImplemented
        return type(self) is type(other) and self.value_of() == other.value_of()

    def __hash__(self) -> int:
        return hash((type(self), self.value_of()))

    def __rich_repr__(self) -> Iterator[tuple[str, object]]:
        yield "base", self.base
        yield "location", self.location
        yield "value", self.value_of()


def _current_config() -> LocationConfig:
    # domain → application dependency, resolved at call time only
    from datalocations.application.defaults import current_config  # noqa: PLC0415

    return current_config()
