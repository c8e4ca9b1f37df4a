"""Shared implementation of mount start/stop/enable/disable."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.mount import MountActionOutput
from ..systemd.ManagerUnreachableError import ManagerUnreachableError
from ..systemd.SystemdManager import SystemdManager
from ..systemd.UnitCommandError import UnitCommandError
from ._resolve_unit import _resolve_unit

_ANNOUNCE = {
    "start": "Starting",
    "stop": "Stopping",
    "enable": "Enabling",
    "disable": "Disabling",
}


def _set_unit_state(mountpoint: str, action: str) -> StageResult:
    """Run ``systemctl <action>`` on the unit of ``mountpoint``.

    Args:
        mountpoint: Mountpoint path (``~`` and relative paths allowed)
        action: One of start, stop, enable, disable
    """
    if action not in _ANNOUNCE:
        raise ValueError(f"Unsupported unit action: {action!r} (supported: {list(_ANNOUNCE)})")

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Building unit name...")
        mount, unit_name = mountpoint, ""
        try:
            config, mount, unit_name = _resolve_unit(mountpoint)
            manager = SystemdManager.from_config(config)
            yield (0.5, f"Running systemctl {action}...")
            if action in ("start", "stop"):
                manager.set_active(unit_name, action == "start")
            else:
                manager.set_enabled(unit_name, action == "enable")
        except (ValueError, ManagerUnreachableError, UnitCommandError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = MountActionOutput(
                errors=[str(e)],
                warnings=[],
                mountpoint=mount,
                unit_name=unit_name,
                action=action,
                changed=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"{unit_name}: {action} succeeded"
        result_obj.output = MountActionOutput(
            errors=[],
            warnings=[],
            mountpoint=mount,
            unit_name=unit_name,
            action=action,
            changed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"{_ANNOUNCE[action]} mountpoint {mountpoint}...",
        progress_callback=do_work,
    )
