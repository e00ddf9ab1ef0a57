"""Reporters for location errors."""

from datalocations.application.reporters.console import (
    ConsoleErrorConfig,
    ConsoleErrorReporter,
)

__all__ = [
    "ConsoleErrorConfig",
    "ConsoleErrorReporter",
]
