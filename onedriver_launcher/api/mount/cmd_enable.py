"""Mount enable command."""

from ..StageResult import StageResult
from ._set_unit_state import _set_unit_state


def cmd_enable(mountpoint: str) -> StageResult:
    """Mount automatically on login."""
    return _set_unit_state(mountpoint, "enable")
