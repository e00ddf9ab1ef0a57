"""Path capability port.

Filepath delegates all character-level path logic to an implementation of
this Protocol. Semantics follow the NodeJS `path` module (POSIX or Win32
flavour), which differs from `os.path` in a few places: `join()` never
discards earlier segments, `dirname()` of a bare name is ".", and trailing
separators are ignored by `basename()` / `dirname()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datalocations.domain.model.parsed_path import ParsedPath


class PathApiPort(Protocol):
    """Contract for path capabilities.

    Infrastructure layer provides PosixPathApi and Win32PathApi.
    Tests may substitute RecordingPathApi.
    """

    sep: str
    """Path segment separator."""

    delimiter: str
    """PATH-list delimiter."""

    def normalize(self, path: str) -> str:
        """Collapse `.`/`..` segments and duplicate separators."""
        ...

    def basename(self, path: str, ext: str | None = None) -> str:
        """Last segment of `path`, with `ext` removed if it is an exact suffix."""
        ...

    def dirname(self, path: str) -> str:
        """Everything but the last segment of `path`."""
        ...

    def extname(self, path: str) -> str:
        """Extension of the last segment, including the dot ('' if none)."""
        ...

    def is_absolute(self, path: str) -> bool:
        """True if `path` starts at a filesystem root."""
        ...

    def join(self, *paths: str) -> str:
        """Concatenate all segments with the separator, then normalize."""
        ...

    def parse(self, path: str) -> ParsedPath:
        """Break `path` down into root, dir, base, ext and name."""
        ...

    def format(self, parts: ParsedPath) -> str:
        """Inverse of parse()."""
        ...

    def relative(self, from_path: str, to_path: str) -> str:
        """Relative path that leads from `from_path` to `to_path`."""
        ...

    def resolve(self, *paths: str) -> str:
        """Resolve segments right to left into an absolute path."""
        ...

    def to_namespaced_path(self, path: str) -> str:
        """Win32 namespace-prefixed path; identity on POSIX."""
        ...
