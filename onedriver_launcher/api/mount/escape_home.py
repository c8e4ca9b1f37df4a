"""Abbreviate the home directory as ``~``."""

from pathlib import Path


def escape_home(path: str, home: str | None = None) -> str:
    """Replace a leading home directory in ``path`` with ``~``."""
    home = (home or str(Path.home())).rstrip("/")
    if home and (path == home or path.startswith(home + "/")):
        return "~" + path[len(home):]
    return path
