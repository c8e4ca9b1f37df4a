"""Row data for one known mountpoint."""

from dataclasses import dataclass

from ..systemd.UnitStatus import UnitStatus


@dataclass
class MountInfo:
    mountpoint: str
    unit_name: str
    label: str
    """Path with ``~`` for home, prefixed by the account name when known."""

    status: UnitStatus | None = None
    """None when the service manager could not be queried."""
