"""Mount status command - reports whether a mountpoint's unit is active and enabled."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.mount import MountStatusOutput
from ..systemd.ManagerUnreachableError import ManagerUnreachableError
from ..systemd.SystemdManager import SystemdManager
from ._resolve_unit import _resolve_unit


def cmd_status(mountpoint: str) -> StageResult:
    """Escape the mountpoint, build its unit name and query both unit states."""
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def fail(message: str, mount: str, unit_name: str = "") -> None:
            result_obj.result = f"Error: {message}"
            result_obj.output = MountStatusOutput(
                errors=[message],
                warnings=[],
                mountpoint=mount,
                unit_name=unit_name,
                active="",
                enabled="",
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.2, "Building unit name...")
        try:
            config, mount, unit_name = _resolve_unit(mountpoint)
        except ValueError as e:
            yield (1.0, "Complete")
            fail(str(e), mountpoint)
            return

        yield (0.5, "Querying service manager...")
        try:
            status = SystemdManager.from_config(config).status(unit_name)
        except ManagerUnreachableError as e:
            yield (1.0, "Complete")
            fail(str(e), mount, unit_name)
            return

        yield (1.0, "Complete")
        result_obj.result = f"{unit_name}: {status.active_text}, {status.enabled_text}"
        result_obj.output = MountStatusOutput(
            errors=[],
            warnings=[],
            mountpoint=mount,
            unit_name=unit_name,
            active=status.active_text,
            enabled=status.enabled_text,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Checking mountpoint {mountpoint}...",
        progress_callback=do_work,
    )
