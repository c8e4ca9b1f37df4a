"""Reverse ``unit_name_path_escape``."""

from .unit_name_unescape import unit_name_unescape


def unit_name_path_unescape(text: str) -> str:
    """Turn a path-escaped instance back into an absolute path.

    Examples:
        >>> unit_name_path_unescape("home-user-OneDrive")
        '/home/user/OneDrive'

    Raises:
        ValueError: On a malformed escape, or if the result is not a
            normalized path (empty, ``.`` or ``..`` components)
    """
    if text == "-":
        return "/"
    path = "/" + unit_name_unescape(text)
    if any(part in ("", ".", "..") for part in path[1:].split("/")):
        raise ValueError(f"Escaped path {text!r} does not name a normalized path")
    return path
