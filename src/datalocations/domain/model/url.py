"""URL location and the merge-precedence rules for URL derivation."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from typing import TYPE_CHECKING

from datalocations.domain.exceptions.location import NotAURLError
from datalocations.domain.exceptions.reporting import THROW_THE_ERROR, report_error
from datalocations.domain.model.data_location import DataLocation, _current_config
from datalocations.domain.model.href import build_url_href
from datalocations.domain.predicates.location_predicates import (
    is_url,
    is_url_hash,
    is_url_search,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Self

    from datalocations.domain.model.parsed_url import ParsedURL
    from datalocations.domain.model.url_format_options import URLFormatOptions
    from datalocations.domain.ports.on_error import OnError
    from datalocations.domain.ports.path_api import PathApiPort
    from datalocations.domain.ports.url_api import ParsedUrlPort, UrlApiPort

    # str, DataLocation, or anything whose str() is a URL (e.g. yarl.URL)
    UrlInput = str | DataLocation | object


def _as_str(value: object) -> str | None:
    if value is None or isinstance(value, str | DataLocation):
        return value  # type: ignore[return-value]
    return str(value)


@dataclass(frozen=True, slots=True, eq=False)
class URL(DataLocation):
    """An absolute URL.

    `location` is resolved against `base` once, at construction, by the
    injected URL capability. An instance is always absolute: construction
    fails for anything that does not resolve to a URL with a scheme. A
    base with an empty location is the base itself, fragment included.

    Example:
        >>> url = URL.of("https://example.com/docs/", "guide?page=2#intro")
        >>> url.href
        'https://example.com/docs/guide?page=2#intro'
        >>> str(url.join("?page=3"))
        'https://example.com/docs/guide?page=3'

    Attributes:
        base: Absolute URL to resolve against, or None
        location: Absolute or relative URL
        url_api: URL capability that parses the pair
        path_api: POSIX path capability used on the pathname
    """

    url_api: UrlApiPort = field(repr=False)
    path_api: PathApiPort = field(repr=False)
    on_error: InitVar[OnError | None] = None
    _parsed: ParsedUrlPort = field(init=False, repr=False)

    def __post_init__(self, on_error: OnError | None) -> None:
        """Parse and validate. FAIL-FIRST."""
        object.__setattr__(self, "base", _as_str(self.base))
        object.__setattr__(self, "location", _as_str(self.location))
        self._coerce_inputs()
        if self.url_api is None:
            raise TypeError("url_api must not be None")
        if self.path_api is None:
            raise TypeError("path_api must not be None")

        try:
            if self.location == "" and self.base is not None:
                parsed = self.url_api.parse(self.base)
            else:
                parsed = self.url_api.parse(self.location, self.base)
        except ValueError as e:
            error = NotAURLError(self.base, self.location, str(e) or type(e).__name__)
            error.__cause__ = e
            report_error(error, on_error or THROW_THE_ERROR)
        object.__setattr__(self, "_parsed", parsed)

    # --- smart constructors ---

    @classmethod
    def of(
        cls,
        base: UrlInput | None,
        location: UrlInput,
        *,
        on_error: OnError | None = None,
        url_api: UrlApiPort | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base and a location.

        Args:
            base: Absolute URL to resolve against, or None
            location: Absolute or relative URL
            on_error: Error hook. None = from the current LocationConfig.
            url_api: URL capability. None = from the current LocationConfig.
            path_api: Pathname capability. None = `url_path_api` from the
                current LocationConfig.

        Returns:
            New URL

        Raises:
            NotAURLError: If the pair does not resolve to an absolute URL
        """
        config = _current_config().with_overrides(
            url_api=url_api,
            url_path_api=path_api,
            on_error=on_error,
        )
        return cls(base, location, config.url_api, config.url_path_api, config.on_error)  # type: ignore[arg-type]

    @classmethod
    def from_base(
        cls,
        base: UrlInput,
        *,
        on_error: OnError | None = None,
        url_api: UrlApiPort | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base only (location '')."""
        return cls.of(base, "", on_error=on_error, url_api=url_api, path_api=path_api)

    @classmethod
    def from_location(
        cls,
        location: UrlInput,
        *,
        on_error: OnError | None = None,
        url_api: UrlApiPort | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a location only (base None). The location must be absolute."""
        return cls.of(None, location, on_error=on_error, url_api=url_api, path_api=path_api)

    @classmethod
    def format(
        cls,
        base: UrlInput | None,
        parts: URLFormatOptions | ParsedURL,
        *,
        on_error: OnError | None = None,
        url_api: UrlApiPort | None = None,
        path_api: PathApiPort | None = None,
    ) -> Self:
        """Create from a base and a structural description of the location.

        Example:
            >>> URL.format("http://example.com", {"pathname": "/this/is/an/example"}).href
            'http://example.com/this/is/an/example'
        """
        return cls.of(
            base,
            build_url_href(parts),
            on_error=on_error,
            url_api=url_api,
            path_api=path_api,
        )

    # --- properties ---

    @property
    def protocol(self) -> str:
        """Scheme with trailing ':' (e.g. 'https:')."""
        return self._parsed.protocol

    @property
    def hostname(self) -> str:
        return self._parsed.hostname

    @property
    def port(self) -> str:
        """Port as a string; '' when absent or the scheme default."""
        return self._parsed.port

    @property
    def host(self) -> str:
        """hostname[:port]."""
        return self._parsed.host

    @property
    def pathname(self) -> str:
        return self._parsed.pathname

    @property
    def search(self) -> str:
        """Query string with leading '?', or ''."""
        return self._parsed.search

    @property
    def search_params(self) -> Mapping[str, str]:
        """Query string as a read-only multi-mapping."""
        return self._parsed.search_params

    @property
    def hash(self) -> str:
        """Fragment with leading '#', or ''."""
        return self._parsed.hash

    @property
    def href(self) -> str:
        """The full, normalized URL."""
        return self._parsed.href

    @property
    def origin(self) -> str:
        """protocol + '//' + host; 'null' for schemes such as 'file:'."""
        return self._parsed.origin

    def value_of(self) -> str:
        return self._parsed.href

    def to_json(self) -> str:
        """Serialized form for JSON encoders: the href string."""
        return self._parsed.to_json()

    # --- decomposition ---

    def parse(self) -> ParsedURL:
        """Break the URL down into its parts.

        Sparse: port, search, search_params and hash are present only when
        set. protocol, hostname and pathname are always present.

        Returns:
            A new dict on each call; the caller may modify it
        """
        parsed = self._parsed
        parts: ParsedURL = {
            "protocol": parsed.protocol,
            "hostname": parsed.hostname,
            "pathname": parsed.pathname,
        }
        if parsed.port:
            parts["port"] = parsed.port
        if parsed.search:
            parts["search"] = parsed.search
            parts["search_params"] = parsed.search_params
        if parsed.hash:
            parts["hash"] = parsed.hash
        return parts

    # --- derivation ---

    def dirname(self, *, on_error: OnError | None = None) -> Self:
        """Parent of this URL's path. Query string and fragment are dropped.

        Returns:
            New URL with the same base
        """
        parts = self.parse()
        parts["pathname"] = self.path_api.dirname(parts["pathname"])
        _drop_search(parts)
        parts.pop("hash", None)
        return type(self).format(
            self.base,
            parts,
            on_error=on_error,
            url_api=self.url_api,
            path_api=self.path_api,
        )

    def join(self, *parts: str) -> Self:
        """Apply `parts` left to right; the base is kept.

        Each part is one of:

        - a full URL ('http:', 'https:' or '//'): replaces everything
        - '?query': replaces the query string, drops the fragment
        - '#fragment': replaces the fragment only
        - anything else: joined onto the pathname; drops query and fragment

        Example:
            >>> url = URL.from_location("http://example.com/a?x=1#top")
            >>> str(url.join("b", "?y=2", "#end"))
            'http://example.com/a/b?y=2#end'
        """
        merged = self._merge_parts(parts)
        return type(self).format(self.base, merged, url_api=self.url_api, path_api=self.path_api)

    def resolve(self, *parts: str) -> Self:
        """Apply `parts` like join(); the result's base is the new URL itself."""
        href = build_url_href(self._merge_parts(parts))
        return type(self).from_base(href, url_api=self.url_api, path_api=self.path_api)

    def _merge_parts(self, parts: tuple[str, ...]) -> ParsedURL:
        merged = self.parse()
        for part in parts:
            if is_url(part):
                # '//host' keeps the working protocol
                merged = type(self).of(
                    build_url_href(merged),
                    part,
                    url_api=self.url_api,
                    path_api=self.path_api,
                ).parse()
            elif is_url_search(part):
                merged["search"] = part
                merged.pop("search_params", None)
                merged.pop("hash", None)
            elif is_url_hash(part):
                merged["hash"] = part
            else:
                merged["pathname"] = self.path_api.join(merged["pathname"], part)
                _drop_search(merged)
                merged.pop("hash", None)
        return merged


def _drop_search(parts: ParsedURL) -> None:
    parts.pop("search", None)
    parts.pop("search_params", None)
