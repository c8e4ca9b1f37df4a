"""Discover mountpoints onedriver has been set up for."""

import logging
from pathlib import Path

from ..systemd.unit_name_path_unescape import unit_name_path_unescape

logger = logging.getLogger(__name__)


def get_known_mounts(cache_dir: Path) -> list[str]:
    """List mountpoints that have an authenticated onedriver cache.

    onedriver keeps one cache folder per mountpoint, named after the
    path-escaped mountpoint, with ``auth_tokens.json`` inside once the
    account has been signed in.

    Returns:
        Absolute mountpoint paths, sorted
    """
    if not cache_dir.is_dir():
        return []

    mounts = []
    for entry in cache_dir.iterdir():
        if not entry.is_dir() or not (entry / "auth_tokens.json").is_file():
            continue
        try:
            mounts.append(unit_name_path_unescape(entry.name))
        except ValueError as e:
            logger.warning("Skipping cache folder %s: %s", entry, e)
    return sorted(mounts)
