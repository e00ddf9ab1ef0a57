"""URL capability port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class ParsedUrlPort(Protocol):
    """A parsed absolute URL, using WHATWG field conventions.

    protocol ends with ':', search starts with '?', hash starts with '#',
    port is '' when absent or equal to the scheme default.
    """

    @property
    def protocol(self) -> str: ...

    @property
    def hostname(self) -> str: ...

    @property
    def port(self) -> str: ...

    @property
    def host(self) -> str: ...

    @property
    def pathname(self) -> str: ...

    @property
    def search(self) -> str: ...

    @property
    def search_params(self) -> Mapping[str, str]: ...

    @property
    def hash(self) -> str: ...

    @property
    def href(self) -> str: ...

    @property
    def origin(self) -> str: ...

    def to_json(self) -> str:
        """Serialized form for JSON encoders (the href, not a JSON document)."""
        ...


class UrlApiPort(Protocol):
    """Contract for URL capabilities.

    Infrastructure layer provides WhatwgUrlApi.
    """

    def parse(self, location: str, base: str | None = None) -> ParsedUrlPort:
        """Resolve `location` against `base` into an absolute URL.

        Args:
            location: Absolute or relative URL
            base: Absolute URL to resolve against, or None

        Returns:
            Parsed absolute URL

        Raises:
            ValueError: If the input does not resolve to an absolute URL
        """
        ...
