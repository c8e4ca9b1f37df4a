"""Unified logging setup for the launcher."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_launcher_home import get_launcher_home

# Prevent multiple configurations
_CONFIGURED = False


def is_configured() -> bool:
    return _CONFIGURED


def configure_logging(
    launcher_home: Path | None = None,
    level: int | str = logging.INFO,
    stderr: bool = False,
) -> None:
    """Configure the ``onedriver_launcher`` logger.

    Args:
        launcher_home: Directory holding ``launcher.log``. If None, derived from environment.
        level: Logging level, either numeric or a name such as ``"DEBUG"``
        stderr: Also log to STDERR (the CLI does this when ``--log`` is given)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if launcher_home is None:
        launcher_home = get_launcher_home()

    # Ensure directory exists
    launcher_home.mkdir(parents=True, exist_ok=True)
    log_file = launcher_home / "launcher.log"

    root_logger = logging.getLogger("onedriver_launcher")
    root_logger.setLevel(level if isinstance(level, int) else level.upper())

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if stderr:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%H:%M:%S"))
        root_logger.addHandler(stream_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Drop handlers installed by configure_logging (used by tests)."""
    global _CONFIGURED
    root_logger = logging.getLogger("onedriver_launcher")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
