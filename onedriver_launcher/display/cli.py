"""CLI display implementation using Rich library."""

import shutil
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..constants import MAX_DISPLAY_WIDTH
from .base import Display


class CLIDisplay(Display):
    """Messages go to STDERR, structured output to STDOUT."""

    def __init__(self):
        # Limit console width to MAX_DISPLAY_WIDTH for consistent display
        detected_width = shutil.get_terminal_size().columns
        console_width = min(detected_width or MAX_DISPLAY_WIDTH, MAX_DISPLAY_WIDTH)
        self.console = Console(width=console_width)
        self.stderr_console = Console(stderr=True, width=console_width)

    def status(self, message: str, **kwargs) -> None:
        """Display a status message in blue."""
        self.stderr_console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:
        """Display a success message in green."""
        self.stderr_console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        """Display an error message in red."""
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message in yellow."""
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:
        """Display an informational message (may contain Rich markup)."""
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        """Output JSON on STDOUT (highlighted on a terminal)."""
        self.console.print_json(data=data, indent=kwargs.get("indent", 2))
