"""Check whether a directory can be used as a new mountpoint."""

import os


def mountpoint_is_valid(mountpoint: str) -> bool:
    """A mountpoint must be an existing, readable, empty directory."""
    if not mountpoint:
        return False
    try:
        with os.scandir(mountpoint) as entries:
            return next(entries, None) is None
    except OSError:
        return False
