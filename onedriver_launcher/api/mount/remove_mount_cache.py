"""Delete onedriver's cache for a mountpoint."""

import shutil
from pathlib import Path


def remove_mount_cache(cache_dir: Path, escaped_mount: str) -> bool:
    """Remove ``cache_dir/escaped_mount``; returns False if there was nothing to remove."""
    target = cache_dir / escaped_mount
    if not escaped_mount or target.resolve().parent != cache_dir.resolve():
        raise ValueError(f"Refusing to remove {target}: not a cache folder of {cache_dir}")
    if not target.exists():
        return False
    shutil.rmtree(target)
    return True
