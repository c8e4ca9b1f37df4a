"""Utility to discover the launcher home directory."""

import os
from pathlib import Path

from ..constants import LAUNCHER_HOME_ENV


def get_launcher_home() -> Path:
    """Get launcher home from ONEDRIVER_LAUNCHER_HOME, else the XDG config dir."""
    home_env = os.environ.get(LAUNCHER_HOME_ENV)
    if home_env:
        return Path(home_env).expanduser().resolve()
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config).expanduser() if xdg_config else Path.home() / ".config"
    return base / "onedriver-launcher"
