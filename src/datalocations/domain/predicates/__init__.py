"""Domain predicates."""

from datalocations.domain.predicates.location_predicates import (
    URL_MARKERS,
    is_filepath,
    is_url,
    is_url_hash,
    is_url_search,
)

__all__ = [
    "URL_MARKERS",
    "is_filepath",
    "is_url",
    "is_url_hash",
    "is_url_search",
]
