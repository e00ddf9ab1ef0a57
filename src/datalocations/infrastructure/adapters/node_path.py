"""Path capability adapters with NodeJS `path` semantics.

Built on `posixpath` / `ntpath`, adjusted where NodeJS differs:

- join() concatenates every non-empty segment; an absolute segment does
  not discard the ones before it
- normalize() keeps a trailing separator and returns '.' for ''
- basename() / dirname() ignore trailing separators; dirname('a') is '.'
- resolve() always returns an absolute path without trailing separator
- relative() returns '' for identical paths
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from abc import abstractmethod
from types import ModuleType

from datalocations.domain.model.parsed_path import ParsedPath
from datalocations.domain.ports.path_api import PathApiPort


class _NodePathApi(PathApiPort):
    """Shared implementation. Subclasses pick the flavour module."""

    _flavour: ModuleType
    _seps: str

    def normalize(self, path: str) -> str:
        if not path:
            return "."
        result = self._flavour.normpath(path)
        if path.endswith(tuple(self._seps)) and not result.endswith(self.sep):
            result += self.sep
        return result

    def basename(self, path: str, ext: str | None = None) -> str:
        stripped = path.rstrip(self._seps)
        if len(stripped) < len(self._root(path)):
            return ""
        base = self._flavour.basename(stripped)
        if ext and base.endswith(ext) and base != ext:
            base = base[: -len(ext)]
        return base

    def dirname(self, path: str) -> str:
        if not path:
            return "."
        root = self._root(path)
        stripped = path.rstrip(self._seps)
        if len(stripped) < len(root):
            return root
        return self._flavour.dirname(stripped) or "."

    def extname(self, path: str) -> str:
        return self._flavour.splitext(self.basename(path))[1]

    def join(self, *paths: str) -> str:
        joined = self.sep.join(path for path in paths if path)
        return self.normalize(joined)

    def parse(self, path: str) -> ParsedPath:
        if not path:
            return ParsedPath()
        root = self._root(path)
        base = self.basename(path)
        ext = self.extname(path)
        name = base[: len(base) - len(ext)]

        rest = path.rstrip(self._seps)[len(root) :]
        has_dir = any(sep in rest for sep in self._seps)
        directory = self.dirname(path) if has_dir else root
        return ParsedPath(root=root, dir=directory, base=base, ext=ext, name=name)

    def format(self, parts: ParsedPath) -> str:
        directory = parts.dir or parts.root
        base = parts.base or f"{parts.name}{parts.ext}"
        if not directory:
            return base
        if directory == parts.root:
            return f"{directory}{base}"
        return f"{directory}{self.sep}{base}"

    def relative(self, from_path: str, to_path: str) -> str:
        source = self.resolve(from_path)
        target = self.resolve(to_path)
        if source == target:
            return ""
        try:
            result = self._flavour.relpath(target, source)
        except ValueError:
            # different drives: no relative path exists
            return target
        return "" if result == "." else result

    @abstractmethod
    def _root(self, path: str) -> str:
        """Root of `path`: '/', 'C:\\', '\\\\server\\share\\' or ''."""


class PosixPathApi(_NodePathApi):
    """POSIX flavour ('/' separator)."""

    sep = "/"
    delimiter = ":"
    _flavour = posixpath
    _seps = "/"

    def normalize(self, path: str) -> str:
        result = _NodePathApi.normalize(self, path)
        # POSIX allows a distinct '//' root; NodeJS collapses it
        if result.startswith("//"):
            result = "/" + result.lstrip("/")
        return result

    def is_absolute(self, path: str) -> bool:
        return path.startswith("/")

    def resolve(self, *paths: str) -> str:
        resolved = ""
        for path in reversed(paths):
            if not path:
                continue
            resolved = f"{path}/{resolved}" if resolved else path
            if self.is_absolute(path):
                break
        else:
            resolved = f"{os.getcwd()}/{resolved}" if resolved else os.getcwd()
        result = self.normalize(resolved)
        return result.rstrip("/") or "/"

    def to_namespaced_path(self, path: str) -> str:
        return path

    def _root(self, path: str) -> str:
        return "/" if path.startswith("/") else ""


class Win32PathApi(_NodePathApi):
    """Win32 flavour ('\\' separator, '/' also accepted on input)."""

    sep = "\\"
    delimiter = ";"
    _flavour = ntpath
    _seps = "\\/"

    def is_absolute(self, path: str) -> bool:
        if not path:
            return False
        if path[0] in self._seps:
            return True
        return len(path) > 2 and path[0].isalpha() and path[1] == ":" and path[2] in self._seps

    def resolve(self, *paths: str) -> str:
        resolved = ""
        for path in reversed(paths):
            if not path:
                continue
            resolved = ntpath.join(path, resolved) if resolved else path
            drive, rest = ntpath.splitdrive(resolved)
            if drive and rest[:1] in tuple(self._seps) and rest:
                break
        else:
            if not self.is_absolute(resolved):
                resolved = ntpath.join(os.getcwd(), resolved) if resolved else os.getcwd()
        result = ntpath.normpath(resolved)
        root = self._root(result)
        stripped = result.rstrip(self._seps)
        return root if len(stripped) < len(root) else stripped

    def to_namespaced_path(self, path: str) -> str:
        if not path:
            return path
        resolved = self.resolve(path)
        if len(resolved) <= 2:
            return path
        if resolved.startswith("\\\\"):
            if resolved[2] not in "?.":
                return "\\\\?\\UNC\\" + resolved[2:]
        elif resolved[0].isalpha() and resolved[1] == ":" and resolved[2] == "\\":
            return "\\\\?\\" + resolved
        return path

    def _root(self, path: str) -> str:
        drive, rest = ntpath.splitdrive(path)
        if rest[:1] and rest[0] in self._seps:
            return drive + rest[0]
        return drive
