"""Error hook port."""

from collections.abc import Callable

from datalocations.domain.exceptions.base import DataLocationError

OnError = Callable[[DataLocationError], object]
"""Hook called with the structured error when validation fails.

The return value is ignored: returning from the hook never suppresses the
failure. Raise from the hook to replace the default exception.
"""
