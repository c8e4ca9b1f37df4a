"""Mount start command."""

from ..StageResult import StageResult
from ._set_unit_state import _set_unit_state


def cmd_start(mountpoint: str) -> StageResult:
    """Start the onedriver unit of a mountpoint."""
    return _set_unit_state(mountpoint, "start")
