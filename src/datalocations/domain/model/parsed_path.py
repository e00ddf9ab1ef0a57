"""Parsed filepath value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """Structural breakdown of a filepath.

    Same shape as NodeJS `path.parse()`:

        /tmp/example/file.ts
        root="/", dir="/tmp/example", base="file.ts", ext=".ts", name="file"

    Attributes:
        root: Filesystem root ('/' or 'C:\\'), '' for relative paths
        dir: Everything before the last segment
        base: Last segment, extension included
        ext: Extension of the last segment, dot included
        name: Last segment without its extension
    """

    root: str = ""
    dir: str = ""
    base: str = ""
    ext: str = ""
    name: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.ext and not self.ext.startswith("."):
            raise ValueError(f"ext must start with '.', got {self.ext!r}")
        if self.base and self.name and not self.base.startswith(self.name):
            raise ValueError(f"name {self.name!r} must be a prefix of base {self.base!r}")
