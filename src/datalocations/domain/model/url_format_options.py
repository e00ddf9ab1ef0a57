"""Structural descriptions of URLs, used as input to href assembly.

Five shapes, discriminated by which keys are present:

- URLFormatOptionsWithHostname: has `hostname`
- PRURLFormatOptions: has `protocol_relative` (and `hostname`)
- URLFormatOptionsWithPathname: has `pathname`
- URLFormatOptionsWithSearch: has `search`
- URLFormatOptionsWithHash: has `hash`

Values are copied verbatim into the href; nothing is percent-encoded.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Required, TypedDict, TypeGuard

from datalocations.domain.model.ip_port import IpPort


class URLFormatOptionsWithHostname(TypedDict, total=False):
    """URL parts for a URL that definitely contains a hostname."""

    protocol: str
    hostname: Required[str]
    port: IpPort
    pathname: str
    search: str
    hash: str


class PRURLFormatOptions(TypedDict, total=False):
    """URL parts for a protocol-relative URL ('//example.com/...').

    protocol_relative=False builds the same URL without the leading '//'.
    """

    protocol_relative: Required[bool]
    hostname: Required[str]
    port: IpPort
    pathname: str
    search: str
    hash: str


class URLFormatOptionsWithPathname(TypedDict, total=False):
    """URL parts for a relative URL that contains a path."""

    protocol: str
    pathname: Required[str]
    search: str
    hash: str


class URLFormatOptionsWithSearch(TypedDict, total=False):
    """URL parts for a relative URL that contains a query string."""

    protocol: str
    pathname: str
    search: Required[str]
    hash: str


class URLFormatOptionsWithHash(TypedDict, total=False):
    """URL parts for a relative URL that contains a fragment."""

    protocol: str
    pathname: str
    search: str
    hash: Required[str]


URLFormatOptions = (
    URLFormatOptionsWithHostname
    | PRURLFormatOptions
    | URLFormatOptionsWithPathname
    | URLFormatOptionsWithSearch
    | URLFormatOptionsWithHash
)


def is_pr_url_format_options(parts: Mapping[str, object]) -> TypeGuard[PRURLFormatOptions]:
    """Check if `parts` describes a protocol-relative URL."""
    return "protocol_relative" in parts and "hostname" in parts


def is_url_format_options_with_hostname(
    parts: Mapping[str, object],
) -> TypeGuard[URLFormatOptionsWithHostname]:
    """Check if `parts` contains a (non-empty) hostname."""
    return bool(parts.get("hostname"))
