"""Location shape predicates.

Cheap prefix checks used to classify raw strings before any parsing:
is it a full URL, a query string, a fragment, or a candidate filepath?
"""

URL_MARKERS: tuple[str, ...] = (
    # relative or absolute HTTP request
    "http:",
    # relative or absolute HTTPS request
    "https:",
    # absolute request using the current protocol
    "//",
)


def is_url(location: str) -> bool:
    """Check if `location` starts with a URL marker.

    Args:
        location: Raw location string

    Returns:
        True if `location` is a full (possibly protocol-relative) URL
    """
    return location.startswith(URL_MARKERS)


def is_url_search(location: str) -> bool:
    """Check if `location` is a query string (starts with '?')."""
    return location.startswith("?")


def is_url_hash(location: str) -> bool:
    """Check if `location` is a fragment (starts with '#')."""
    return location.startswith("#")


def is_filepath(base: str | None, location: str) -> bool:
    """Check if `base` and `location` could combine into a filepath.

    Does not check that the path exists, or that it is legal for any
    particular filesystem. Only rejects URL-shaped input.

    Args:
        base: Directory / file to start from, or None
        location: Path to apply to `base` (possibly absolute)

    Returns:
        True if neither input looks like a URL
    """
    if base is not None and is_url(base):
        return False
    return not is_url(location)
