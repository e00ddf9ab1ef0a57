"""Domain exceptions."""

from datalocations.domain.exceptions.base import DataLocationError
from datalocations.domain.exceptions.location import (
    InvalidPortError,
    NotAFilepathError,
    NotAURLError,
)
from datalocations.domain.exceptions.reporting import THROW_THE_ERROR, report_error

__all__ = [
    "DataLocationError",
    "NotAFilepathError",
    "NotAURLError",
    "InvalidPortError",
    "THROW_THE_ERROR",
    "report_error",
]
