"""Escape a filesystem path for use as a unit instance (``systemd-escape --path``)."""

import posixpath

from .unit_name_escape import unit_name_escape


def unit_name_path_escape(path: str) -> str:
    """Escape ``path`` by systemd path rules.

    Duplicate slashes, trailing slashes and ``.`` components do not change
    the result. Leading and trailing slashes are dropped; the root directory
    (and the empty path) becomes ``-``. ``..`` is not resolved, since that
    would silently map the path to another directory's unit.

    Examples:
        >>> unit_name_path_escape("/home/user/OneDrive")
        'home-user-OneDrive'
        >>> unit_name_path_escape("/")
        '-'

    Raises:
        ValueError: If ``path`` has a ``..`` component
    """
    if not path:
        return "-"
    if ".." in path.split("/"):
        raise ValueError(f"Path {path!r} is not normalized: '..' components are not allowed")
    stripped = posixpath.normpath(path).strip("/")
    if not stripped:
        return "-"
    return unit_name_escape(stripped)
