"""datalocations domain layer.

Pure domain logic with no third-party dependencies.
Only imports: typing, abc, dataclasses, collections.abc, types, os, inspect
"""

from datalocations.domain.exceptions import (
    THROW_THE_ERROR,
    DataLocationError,
    InvalidPortError,
    NotAFilepathError,
    NotAURLError,
    report_error,
)
from datalocations.domain.model import (
    URL,
    DataLocation,
    Extended,
    Filepath,
    LocationConfig,
    ParsedPath,
    ParsedURL,
    URLFormatOptions,
    add_extension,
    build_url_href,
    implements_protocol,
)
from datalocations.domain.ports import OnError, ParsedUrlPort, PathApiPort, UrlApiPort

__all__ = [
    # Exceptions
    "DataLocationError",
    "NotAFilepathError",
    "NotAURLError",
    "InvalidPortError",
    "THROW_THE_ERROR",
    "report_error",
    # Model
    "DataLocation",
    "Filepath",
    "URL",
    "Extended",
    "LocationConfig",
    "ParsedPath",
    "ParsedURL",
    "URLFormatOptions",
    "add_extension",
    "build_url_href",
    "implements_protocol",
    # Ports
    "OnError",
    "PathApiPort",
    "ParsedUrlPort",
    "UrlApiPort",
]
