"""Mount unit-name command - prints the unit a mountpoint maps to."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.mount import MountUnitNameOutput
from ..systemd.unit_name_path_escape import unit_name_path_escape
from ._resolve_unit import _resolve_unit


def cmd_unit_name(mountpoint: str) -> StageResult:
    """Derive the unit name without contacting the service manager."""
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Building unit name...")
        try:
            _config, mount, unit_name = _resolve_unit(mountpoint)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = MountUnitNameOutput(
                errors=[str(e)], warnings=[], mountpoint=mountpoint, escaped="", unit_name=""
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = unit_name
        result_obj.output = MountUnitNameOutput(
            errors=[],
            warnings=[],
            mountpoint=mount,
            escaped=unit_name_path_escape(mount),
            unit_name=unit_name,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Deriving unit name for {mountpoint}...",
        progress_callback=do_work,
    )
