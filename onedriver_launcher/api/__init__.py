"""API module for the launcher.

Command functions defined here (``cmd_*``) are the single source of truth
for the CLI; the GUI talks to the same layer through ``launcher.Launcher``.
"""

__all__ = []
