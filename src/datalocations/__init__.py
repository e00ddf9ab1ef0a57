"""datalocations - filesystem paths and URLs as immutable, composable values."""

__version__ = "0.1.0"

from datalocations.application.defaults import current_config, default_config, use_config
from datalocations.application.error_handlers import log_the_error
from datalocations.application.reporters import ConsoleErrorReporter
from datalocations.domain.exceptions import (
    THROW_THE_ERROR,
    DataLocationError,
    InvalidPortError,
    NotAFilepathError,
    NotAURLError,
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

__all__ = [
    "__version__",
    # Locations
    "DataLocation",
    "Filepath",
    "URL",
    "ParsedPath",
    "ParsedURL",
    "URLFormatOptions",
    "build_url_href",
    # Capabilities
    "Extended",
    "add_extension",
    "implements_protocol",
    # Configuration
    "LocationConfig",
    "current_config",
    "default_config",
    "use_config",
    # Errors
    "DataLocationError",
    "NotAFilepathError",
    "NotAURLError",
    "InvalidPortError",
    "THROW_THE_ERROR",
    "log_the_error",
    "ConsoleErrorReporter",
]
