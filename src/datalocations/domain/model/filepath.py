"""Filesystem path location."""

from __future__ import annotations

import os
from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING

from datalocations.domain.exceptions.location import NotAFilepathError
from datalocations.domain.exceptions.reporting import THROW_THE_ERROR, report_error
from datalocations.domain.model.data_location import DataLocation, _current_config
from datalocations.domain.predicates.location_predicates import is_filepath

if TYPE_CHECKING:
    from typing import Self

    from datalocations.domain.model.parsed_path import ParsedPath
    from datalocations.domain.ports.on_error import OnError
    from datalocations.domain.ports.path_api import PathApiPort

    PathInput = str | os.PathLike[str] | DataLocation


def must_be_filepath(base: str | None, location: str, on_error: OnError) -> None:
    """Report NotAFilepathError through `on_error` if either input is URL-shaped.

    Raises:
        NotAFilepathError: Or whatever `on_error` raises instead
    """
    if not is_filepath(base, location):
        report_error(NotAFilepathError(base, location), on_error)


def resolve_filepath(base: str | None, location: str, path_api: PathApiPort) -> str:
    """Combine `base` and `location` into a single normalized path.

    Without a base, `location` is only normalized: a relative location stays
    relative instead of being anchored to the working directory.
    """
    if base is None:
        return path_api.normalize(location)
    return path_api.normalize(path_api.resolve(base, location))


@dataclass(frozen=True, slots=True, eq=False)
class Filepath(DataLocation):
    """A location on a filesystem.

    The resolved path is computed once, at construction, through the
    injected path capability. Every other operation works on it.

    Filepath is os.PathLike: it can be passed to open(), pathlib.Path(), etc.

    Example:
        >>> fp = Filepath.of("/tmp/this/is", "an/example.txt")
        >>> str(fp)
        '/tmp/this/is/an/example.txt'
        >>> fp.extname()
        '.txt'

    Attributes:
        base: Directory / file to start from, or None
        location: Path applied to `base` (possibly absolute)
        path_api: Path capability used for every operation
    """

    path_api: PathApiPort = field(repr=False)
    on_error: InitVar[OnError | None] = None
    _path: str = field(init=False, repr=False)
    _parts: ParsedPath | None = field(init=False, default=None, repr=False)

    def __post_init__(self, on_error: OnError | None) -> None:
        """Validate and resolve. FAIL-FIRST."""
        for name in ("base", "location"):
            value = getattr(self, name)
            if isinstance(value, os.PathLike):
                object.__setattr__(self, name, os.fspath(value))
        self._coerce_inputs()
        if self.path_api is None:
            raise TypeError("path_api must not be None")

        must_be_filepath(self.base, self.location, on_error or THROW_THE_ERROR)
        object.__setattr__(self, "_path", resolve_filepath(self.base, self.location, self.path_api))

    # --- smart constructors ---

    @classmethod
    def of(
        cls,
        base: PathInput | None,
        location: PathInput,
        *,
        on_error: OnError | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base and a location.

        Args:
            base: Directory / file to start from, or None
            location: Path to apply to `base` (possibly absolute)
            on_error: Error hook. None = from the current LocationConfig.
            path_api: Path capability. None = from the current LocationConfig.

        Returns:
            New Filepath

        Raises:
            NotAFilepathError: If `base` or `location` looks like a URL
        """
        config = _current_config().with_overrides(path_api=path_api, on_error=on_error)
        return cls(base, location, config.path_api, config.on_error)  # type: ignore[arg-type]

    @classmethod
    def from_base(
        cls,
        base: PathInput,
        *,
        on_error: OnError | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base only (location '')."""
        return cls.of(base, "", on_error=on_error, path_api=path_api)

    @classmethod
    def from_location(
        cls,
        location: PathInput,
        *,
        on_error: OnError | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a location only (base None)."""
        return cls.of(None, location, on_error=on_error, path_api=path_api)

    @classmethod
    def format(
        cls,
        base: PathInput | None,
        parts: ParsedPath,
        *,
        on_error: OnError | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base and a structural description of the location.

        Args:
            base: Directory / file to start from, or None
            parts: Location broken down as root, dir, base, ext and name
            on_error: Error hook. None = from the current LocationConfig.
            path_api: Path capability. None = from the current LocationConfig.

        Returns:
            New Filepath
        """
        api = path_api or _current_config().path_api
        return cls.of(base, api.format(parts), on_error=on_error, path_api=api)

    # --- properties ---

    @property
    def resolved_path(self) -> str:
        """The resolved, normalized path."""
        return self._path

    def value_of(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    # --- decomposition ---

    def basename(self, suffix: str | None = None) -> str:
        """Last segment of the path, with `suffix` removed if it is an exact suffix."""
        return self.path_api.basename(self._path, suffix)

    def extname(self) -> str:
        """Extension of the last segment, including the dot ('' if none)."""
        return self.path_api.extname(self._path)

    def is_absolute(self) -> bool:
        return self.path_api.is_absolute(self._path)

    def to_namespaced_path(self) -> str:
        """Win32 namespace-prefixed form. Same as str() on POSIX."""
        return self.path_api.to_namespaced_path(self._path)

    def parse(self) -> ParsedPath:
        """Break the path down into root, dir, base, ext and name.

        Computed on first call, then cached.
        """
        if self._parts is None:
            object.__setattr__(self, "_parts", self.path_api.parse(self._path))
        return self._parts  # type: ignore[return-value]

    def relative(self, other: PathInput) -> str:
        """Relative path that leads from this path to `other`."""
        target = os.fspath(other) if isinstance(other, os.PathLike) else str(other)
        return self.path_api.relative(self._path, target)

    # --- derivation ---

    def dirname(self, *, on_error: OnError | None = None) -> Self:
        """Parent of this path.

        Returns:
            New Filepath: same base, location = parent of the resolved path
        """
        return type(self).of(
            self.base,
            self.path_api.dirname(self._path),
            on_error=on_error,
            path_api=self.path_api,
        )

    def join(self, *segments: str) -> Self:
        """Append `segments` to the location.

        The base is kept, so the result is resolved against the same anchor.

        Example:
            >>> Filepath.of("/tmp", "a").join("b", "c.txt").location
            'a/b/c.txt'
        """
        location = self.path_api.join(self.location, *segments)
        return type(self)(self.base, location, self.path_api)

    def resolve(self, *segments: str) -> Self:
        """Resolve `segments` using this path as the new anchor.

        Unlike join(), the result's base is this path, and each absolute
        segment restarts resolution from the filesystem root.

        Example:
            >>> fp = Filepath.of("/tmp/this/is", "an/example")
            >>> fp.resolve("..", "..", "another/example").base
            '/tmp/this/is/an/example'
        """
        location = self.path_api.resolve(self._path, *segments)
        return type(self)(self._path, location, self.path_api)
