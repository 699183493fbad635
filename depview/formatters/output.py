"""Output formatter for messages printed outside the full-screen view.

The viewer owns the terminal while it runs; everything printed before it
starts or after it stops (errors, the final summary) goes through here.

Usage:
    output = OutputFormatter(no_color=False)
    output.print_error("terminal became unavailable")
"""

from rich.console import Console
from rich.text import Text

from .symbols import SymbolsFormatter


class OutputFormatter:
    """Prints errors and the end-of-session summary on the regular terminal."""

    def __init__(self, no_color: bool = False):
        """Initialize output formatter.

        Args:
            no_color: If True, disable all colors and styling
        """
        self._console = Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )
        self._error_console = Console(
            no_color=no_color,
            highlight=False,
            stderr=True,
        )
        self._symbols = SymbolsFormatter(no_color=no_color)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr.

        Args:
            message: Error message to print
        """
        line = Text()
        line.append(f"{self._symbols.Cross} ", style="red")
        line.append("Error: ", style="bold red")
        line.append(message)
        self._error_console.print(line, highlight=False)

    def print_summary(self, rows: int, finished: bool) -> None:
        """Print a one-line summary once the view is closed.

        Args:
            rows: Number of rows received during the session
            finished: Whether the computation reached its final state
        """
        line = Text()
        if finished:
            line.append(f"{self._symbols.Check} ", style="green")
            line.append("Verification finished: ", style="bold green")
        else:
            line.append(f"{self._symbols.Warning} ", style="yellow")
            line.append("Verification interrupted: ", style="bold yellow")
        line.append(f"{rows} dependencies")
        self._console.print(line, highlight=False)
