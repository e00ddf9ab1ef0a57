"""Domain ports (interfaces/protocols)."""

from datalocations.domain.ports.on_error import OnError
from datalocations.domain.ports.path_api import PathApiPort
from datalocations.domain.ports.url_api import ParsedUrlPort, UrlApiPort

__all__ = [
    "OnError",
    "PathApiPort",
    "ParsedUrlPort",
    "UrlApiPort",
]
