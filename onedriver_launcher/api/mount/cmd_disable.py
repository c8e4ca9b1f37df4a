"""Mount disable command."""

from ..StageResult import StageResult
from ._set_unit_state import _set_unit_state


def cmd_disable(mountpoint: str) -> StageResult:
    """Stop mounting automatically on login."""
    return _set_unit_state(mountpoint, "disable")
