"""URL capability adapter built on ada-url.

ada is a WHATWG URL Standard parser (the one NodeJS ships), so an href comes
out in the form a browser would serialize it: percent-escapes are kept as
written, spaces are encoded as %20, dot segments are removed, default ports
are elided, and any scheme is accepted ('file:', 'mailto:', ...).

The query view (`search_params`) is decoded by yarl, which applies the same
application/x-www-form-urlencoded rules as WHATWG URLSearchParams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

import ada_url
import yarl

from datalocations.domain.ports.url_api import ParsedUrlPort, UrlApiPort

if TYPE_CHECKING:
    from multidict import MultiDictProxy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WhatwgParsedUrl(ParsedUrlPort):
    """A parsed WHATWG URL record.

    Attributes:
        url: Parsed URL. Read only; never mutated through this view.
    """

    url: ada_url.URL

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.url, ada_url.URL):
            raise TypeError(f"url must be ada_url.URL, got {type(self.url).__name__}")

    @property
    def protocol(self) -> str:
        return self.url.protocol

    @property
    def hostname(self) -> str:
        # IPv6 literals keep their brackets
        return self.url.hostname

    @property
    def port(self) -> str:
        return self.url.port

    @property
    def host(self) -> str:
        return self.url.host

    @property
    def pathname(self) -> str:
        return self.url.pathname

    @property
    def search(self) -> str:
        return self.url.search

    @property
    def search_params(self) -> MultiDictProxy[str]:
        query = self.search.removeprefix("?")
        return yarl.URL.build(query_string=query, encoded=True).query

    @property
    def hash(self) -> str:
        return self.url.hash

    @property
    def origin(self) -> str:
        """'null' for schemes without a tuple origin ('file:', 'mailto:')."""
        return self.url.origin

    @property
    def href(self) -> str:
        return self.url.href

    def to_json(self) -> str:
        return self.href


class WhatwgUrlApi(UrlApiPort):
    """URL capability backed by ada_url."""

    def parse(self, location: str, base: str | None = None) -> WhatwgParsedUrl:
        """Resolve `location` against `base` into an absolute URL.

        Args:
            location: Absolute or relative URL
            base: Absolute URL to resolve against, or None

        Returns:
            Parsed absolute URL

        Raises:
            ValueError: If `base` is not an absolute URL, or `location`
                does not resolve to one
        """
        if not isinstance(location, str):
            _reject(location, base, f"location must be str, got {type(location).__name__}")
        if base is not None and not ada_url.check_url(base):
            _reject(location, base, f"base must be an absolute URL, got {base!r}")

        try:
            href = location if base is None else ada_url.join_url(base, location)
            url = ada_url.URL(href)
        except ValueError as e:
            _reject(location, base, f"not an absolute URL: {location!r}", e)
        return WhatwgParsedUrl(url)


def _reject(location: object, base: str | None, reason: str, cause: Exception | None = None) -> NoReturn:
    logger.debug("rejected URL: base=%r location=%r: %s", base, location, reason)
    raise ValueError(reason) from cause
