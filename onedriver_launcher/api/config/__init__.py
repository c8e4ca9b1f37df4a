"""Config module - launcher configuration and version information."""

from .LauncherConfig import LauncherConfig

__all__ = ["LauncherConfig"]
