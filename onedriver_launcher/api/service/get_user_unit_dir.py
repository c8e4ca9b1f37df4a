"""Location of per-user systemd unit files."""

import os
from pathlib import Path


def get_user_unit_dir() -> Path:
    """``$XDG_CONFIG_HOME/systemd/user``, default ``~/.config/systemd/user``."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config).expanduser() if xdg_config else Path.home() / ".config"
    return base / "systemd" / "user"
