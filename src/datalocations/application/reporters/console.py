"""Console reporter: DataLocationError → rich panel."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from datalocations.domain.exceptions.location import (
    InvalidPortError,
    NotAFilepathError,
    NotAURLError,
)

if TYPE_CHECKING:
    from datalocations.domain.exceptions.base import DataLocationError


@dataclass(frozen=True, slots=True)
class ConsoleErrorConfig:
    """Configuration for console error reporter.

    All fields have defaults (convenience).
    Immutable (frozen dataclass).

    Attributes:
        show_cause: Show the exception that caused the error, if any.
        width: Console width used by render().
    """

    show_cause: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate configuration. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


class ConsoleErrorReporter:
    """Error hook that prints each validation error as a rich panel.

    Use as `on_error`: the panel is printed, then the core raises the error.
    render() returns the same panel as a string; caller decides destination.
    """

    def __init__(
        self,
        console: Console | None = None,
        config: ConsoleErrorConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            console: Destination for __call__. None = stderr.
            config: Reporter configuration. Uses defaults if None.
        """
        self._console = console if console is not None else Console(stderr=True)
        self._config = config or ConsoleErrorConfig()

    def __call__(self, error: DataLocationError) -> None:
        """Print `error` to the console."""
        self._console.print(self._build_panel(error))

    def render(self, error: DataLocationError) -> str:
        """Format `error` as a rich formatted string.

        Args:
            error: Error to format.

        Returns:
            Formatted string with colors.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)
        console.print(self._build_panel(error))
        return output.getvalue()

    def _build_panel(self, error: DataLocationError) -> Panel:
        """Build panel: one row per input that caused the error."""
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()

        match error:
            case NotAFilepathError() | NotAURLError():
                table.add_row("base", Text(repr(error.base)))
                table.add_row("location", Text(repr(error.location)))
                if isinstance(error, NotAURLError):
                    table.add_row("reason", Text(error.reason))
            case InvalidPortError():
                table.add_row("port", Text(repr(error.port)))
            case _:
                table.add_row("message", Text(str(error)))

        if self._config.show_cause and error.__cause__ is not None:
            cause = error.__cause__
            table.add_row("cause", Text(f"{type(cause).__name__}: {cause}", style="dim"))

        return Panel(
            table,
            title=f"[bold red]{type(error).__name__}[/bold red]",
            title_align="left",
            border_style="red",
        )
