"""Location configuration.

Holds the collaborators that smart constructors fall back to when the
caller does not inject them. The active instance is managed by the
application layer (see `datalocations.application.defaults`).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datalocations.domain.ports.on_error import OnError
    from datalocations.domain.ports.path_api import PathApiPort
    from datalocations.domain.ports.url_api import UrlApiPort


@dataclass(frozen=True, slots=True)
class LocationConfig:
    """Defaults for Filepath and URL construction.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        path_api: Path capability used by Filepath
        url_api: URL capability used by URL
        url_path_api: Path capability used for URL pathnames. Must be POSIX
            flavoured: URL paths always use '/'.
        on_error: Hook called with every validation error
    """

    path_api: PathApiPort
    url_api: UrlApiPort
    url_path_api: PathApiPort
    on_error: OnError

    def __post_init__(self) -> None:
        """Validate configuration. FAIL-FIRST."""
        if self.path_api is None:
            raise TypeError("path_api must not be None")
        if self.url_api is None:
            raise TypeError("url_api must not be None")
        if self.url_path_api is None:
            raise TypeError("url_path_api must not be None")
        if self.url_path_api.sep != "/":
            raise ValueError(f"url_path_api must use '/' as separator, got {self.url_path_api.sep!r}")
        if not callable(self.on_error):
            raise TypeError(f"on_error must be callable, got {type(self.on_error).__name__}")

    def with_overrides(
        self,
        *,
        path_api: PathApiPort | None = None,
        url_api: UrlApiPort | None = None,
        url_path_api: PathApiPort | None = None,
        on_error: OnError | None = None,
    ) -> LocationConfig:
        """Return a copy with every non-None argument replacing its field.

        Returns self when nothing changes.
        """
        changes = {
            name: value
            for name, value in (
                ("path_api", path_api),
                ("url_api", url_api),
                ("url_path_api", url_path_api),
                ("on_error", on_error),
            )
            if value is not None
        }
        if not changes:
            return self
        return replace(self, **changes)
