"""Href assembly: URL parts → single string.

Pure function. Values are copied verbatim; nothing is percent-encoded and
nothing is validated except the port.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datalocations.domain.model.ip_port import format_ip_port_as_string
from datalocations.domain.model.url_format_options import (
    is_pr_url_format_options,
    is_url_format_options_with_hostname,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from datalocations.domain.model.parsed_url import ParsedURL
    from datalocations.domain.model.url_format_options import URLFormatOptions


def build_url_href(parts: URLFormatOptions | ParsedURL) -> str:
    """Assemble a URL string from its parts.

    Three branches, picked by the keys present:

    - protocol_relative: '//' + host[:port] + common elements
    - hostname: protocol + '//' + host[:port] + common elements
    - neither: common elements only (pathname, ?search, #hash)

    When there is an authority but no pathname, a '/' separates the
    authority from ?search / #hash, so host + hash gives 'host/#hash'.

    Args:
        parts: Structural description of the URL

    Returns:
        Assembled href

    Raises:
        InvalidPortError: If `port` is present and not in 0..65535
    """
    if is_pr_url_format_options(parts):
        return _build_protocol_relative_href(parts)
    if is_url_format_options_with_hostname(parts):
        return _build_href_with_hostname(parts)
    return _build_common_elements(parts)


def _build_protocol_relative_href(parts: Mapping[str, object]) -> str:
    href = "//" if parts["protocol_relative"] else ""
    return href + _build_authority(parts) + _build_common_elements(parts)


def _build_href_with_hostname(parts: Mapping[str, object]) -> str:
    href = ""
    protocol = parts.get("protocol")
    if protocol:
        # accept both 'https' and 'https:'
        href = f"{protocol}//" if str(protocol).endswith(":") else f"{protocol}://"
    return href + _build_authority(parts) + _build_common_elements(parts)


def _build_authority(parts: Mapping[str, object]) -> str:
    authority = str(parts["hostname"])
    port = parts.get("port")
    if port is not None and port != "":
        authority += ":" + format_ip_port_as_string(port)  # type: ignore[arg-type]

    search = _strip_marker(parts.get("search"), "?")
    fragment = _strip_marker(parts.get("hash"), "#")
    if not parts.get("pathname") and (search or fragment):
        authority += "/"
    return authority


def _build_common_elements(parts: Mapping[str, object]) -> str:
    href = str(parts.get("pathname") or "")
    search = _strip_marker(parts.get("search"), "?")
    if search:
        href += "?" + search
    fragment = _strip_marker(parts.get("hash"), "#")
    if fragment:
        href += "#" + fragment
    return href


def _strip_marker(value: object, marker: str) -> str:
    """'?a=1' and 'a=1' both give 'a=1'."""
    if not value:
        return ""
    text = str(value)
    return text.removeprefix(marker)
