"""Normalize a path string for comparison."""

from pathlib import Path


def canonicalize_path(path_str: str) -> str:
    """Expand ``~`` and resolve symlinks to create a canonical path string.

    If resolution fails (e.g., a permission problem on a parent), returns the
    expanded path without resolution.

    Examples:
        >>> canonicalize_path("~/OneDrive")
        "/home/user/OneDrive"
    """
    path_obj = Path(path_str).expanduser()
    try:
        return str(path_obj.resolve(strict=False))
    except OSError:
        return str(path_obj)
