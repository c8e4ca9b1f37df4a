"""Mount stop command."""

from ..StageResult import StageResult
from ._set_unit_state import _set_unit_state


def cmd_stop(mountpoint: str) -> StageResult:
    """Stop the onedriver unit of a mountpoint (unmounts it)."""
    return _set_unit_state(mountpoint, "stop")
