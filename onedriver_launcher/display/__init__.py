"""Display layer for CLI output."""

from .base import Display
from .cli import CLIDisplay

__all__ = ["CLIDisplay", "Display"]
