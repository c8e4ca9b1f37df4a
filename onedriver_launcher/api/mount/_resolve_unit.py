"""Shared first steps of the mount commands."""

from ...utils.canonicalize_path import canonicalize_path
from ..config.LauncherConfig import LauncherConfig
from .mount_unit_name import mount_unit_name


def _resolve_unit(mountpoint: str) -> tuple[LauncherConfig, str, str]:
    """Load config and derive the unit for ``mountpoint``.

    Returns:
        (config, absolute mountpoint, unit name)

    Raises:
        ValueError: Invalid configuration, or a malformed unit template
    """
    config = LauncherConfig.load()
    mount = canonicalize_path(mountpoint)
    return config, mount, mount_unit_name(mount, config.unit_template)
