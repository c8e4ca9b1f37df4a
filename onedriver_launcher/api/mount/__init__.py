"""Mount module - onedriver mountpoints and their systemd units."""

from .escape_home import escape_home
from .get_account_name import get_account_name
from .get_known_mounts import get_known_mounts
from .mount_unit_name import mount_unit_name
from .mountpoint_is_valid import mountpoint_is_valid
from .remove_mount_cache import remove_mount_cache
from .wait_until_mounted import wait_until_mounted

__all__ = [
    "escape_home",
    "get_account_name",
    "get_known_mounts",
    "mount_unit_name",
    "mountpoint_is_valid",
    "remove_mount_cache",
    "wait_until_mounted",
]
