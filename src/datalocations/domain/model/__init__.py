"""Domain model: immutable location values and their parts."""

from datalocations.domain.model.configuration import LocationConfig
from datalocations.domain.model.data_location import DataLocation
from datalocations.domain.model.extension import (
    Extended,
    ExtensionSource,
    ProtocolDefinition,
    add_extension,
    implements_protocol,
)
from datalocations.domain.model.filepath import Filepath, must_be_filepath, resolve_filepath
from datalocations.domain.model.href import build_url_href
from datalocations.domain.model.ip_port import IpPort, format_ip_port_as_string, is_ip_port
from datalocations.domain.model.parsed_path import ParsedPath
from datalocations.domain.model.parsed_url import ParsedURL
from datalocations.domain.model.url import URL
from datalocations.domain.model.url_format_options import (
    PRURLFormatOptions,
    URLFormatOptions,
    URLFormatOptionsWithHash,
    URLFormatOptionsWithHostname,
    URLFormatOptionsWithPathname,
    URLFormatOptionsWithSearch,
    is_pr_url_format_options,
    is_url_format_options_with_hostname,
)

__all__ = [
    # Locations
    "DataLocation",
    "Filepath",
    "URL",
    "must_be_filepath",
    "resolve_filepath",
    # Capabilities
    "Extended",
    "ExtensionSource",
    "ProtocolDefinition",
    "add_extension",
    "implements_protocol",
    # Parts
    "ParsedPath",
    "ParsedURL",
    "IpPort",
    "is_ip_port",
    "format_ip_port_as_string",
    # Href assembly
    "build_url_href",
    "URLFormatOptions",
    "URLFormatOptionsWithHostname",
    "PRURLFormatOptions",
    "URLFormatOptionsWithPathname",
    "URLFormatOptionsWithSearch",
    "URLFormatOptionsWithHash",
    "is_pr_url_format_options",
    "is_url_format_options_with_hostname",
    # Configuration
    "LocationConfig",
]
