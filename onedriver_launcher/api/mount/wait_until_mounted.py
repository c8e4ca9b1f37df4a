"""Poll until a filesystem shows up at a mountpoint."""

import os
import time
from collections.abc import Callable


def wait_until_mounted(
    mountpoint: str,
    timeout: float,
    interval: float = 0.5,
    ismount: Callable[[str], bool] = os.path.ismount,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> bool:
    """Return True once ``mountpoint`` is a mount, False after ``timeout`` seconds."""
    if not mountpoint:
        return False
    deadline = clock() + timeout
    while True:
        if ismount(mountpoint):
            return True
        if clock() >= deadline:
            return False
        sleep(interval)
