"""Location construction exceptions."""

from __future__ import annotations

from datalocations.domain.exceptions.base import DataLocationError


class NotAFilepathError(DataLocationError, ValueError):
    """`base` or `location` looks like a URL where a filepath was required.

    Inherits ValueError for semantic correctness (right type, wrong shape).

    Attributes:
        base: The `base` passed to the Filepath constructor (may be None)
        location: The `location` passed to the Filepath constructor
    """

    def __init__(self, base: str | None, location: str) -> None:
        # FAIL-FIRST: validate required parameters
        if location is None:
            raise TypeError("location must not be None")

        self.base = base
        self.location = location
        super().__init__(f"not a filepath: base={base!r}, location={location!r}")


class NotAURLError(DataLocationError, ValueError):
    """`base` and `location` do not combine into an absolute URL.

    Attributes:
        base: The `base` passed to the URL constructor (may be None)
        location: The `location` passed to the URL constructor
        reason: Why the URL capability rejected the input
    """

    def __init__(self, base: str | None, location: str, reason: str) -> None:
        if location is None:
            raise TypeError("location must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.base = base
        self.location = location
        self.reason = reason
        super().__init__(f"not a URL: base={base!r}, location={location!r}: {reason}")


class InvalidPortError(DataLocationError, ValueError):
    """Port number outside 0..65535 or not a number.

    Attributes:
        port: Invalid port value as given
    """

    def __init__(self, port: object) -> None:
        self.port = port
        super().__init__(f"port must be an integer in 0..65535, got {port!r}")
