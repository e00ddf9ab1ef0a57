"""Network port value helpers."""

from __future__ import annotations

from typing import TypeAlias

from datalocations.domain.exceptions.location import InvalidPortError

IpPort: TypeAlias = int | str
"""A TCP/UDP port, as a number or its decimal string form."""

MIN_PORT = 0
MAX_PORT = 65535


def is_ip_port(value: object) -> bool:
    """Check if `value` is a port number in 0..65535.

    bool is rejected even though it is an int subclass.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        if not value.isdigit():
            return False
        value = int(value)
    if not isinstance(value, int):
        return False
    return MIN_PORT <= value <= MAX_PORT


def format_ip_port_as_string(port: IpPort) -> str:
    """Format a port number for use in a URL authority.

    Args:
        port: Port number or decimal string

    Returns:
        Decimal string without leading zeros

    Raises:
        InvalidPortError: If `port` is not a number in 0..65535
    """
    if not is_ip_port(port):
        raise InvalidPortError(port)
    return str(int(port))
