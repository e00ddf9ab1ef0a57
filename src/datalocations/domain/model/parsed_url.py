"""Parsed URL structure."""

from __future__ import annotations

from collections.abc import Mapping
from typing import NotRequired, TypedDict


class ParsedURL(TypedDict):
    """The parts of an absolute URL, using WHATWG terms.

    Sparse: optional keys are present only when they carry a value.
    `pathname` is always present; every absolute URL has at least '/'.

    NOTE: `username` and `password` are not supported. RFC 3986 deprecates
    them, and many clients and servers refuse them.

    Required keys:
        protocol: Scheme with trailing ':' (e.g. 'https:')
        hostname: Server name, without port
        pathname: Path, starting with '/'

    Optional keys:
        port: Non-default port, as a string
        search: Query string, starting with '?'
        search_params: Query string as a read-only multi-mapping
        hash: Fragment, starting with '#'
    """

    protocol: str
    hostname: str
    pathname: str
    port: NotRequired[str]
    search: NotRequired[str]
    search_params: NotRequired[Mapping[str, str]]
    hash: NotRequired[str]
