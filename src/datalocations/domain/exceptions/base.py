"""Base exceptions for datalocations domain."""


class DataLocationError(Exception):
    """Root exception for all datalocations errors.

    All domain exceptions inherit from this.
    Allows catching all datalocations-specific errors.
    """
