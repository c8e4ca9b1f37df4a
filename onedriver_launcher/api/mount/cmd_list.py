"""Mount list command - known mountpoints with their unit state."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .._output_schemas.mount import MountListOutput
from ..config.LauncherConfig import LauncherConfig
from ..systemd.ManagerUnreachableError import ManagerUnreachableError
from ..systemd.SystemdManager import SystemdManager
from ..systemd.unit_name_path_escape import unit_name_path_escape
from .get_account_name import get_account_name
from .get_known_mounts import get_known_mounts
from .mount_unit_name import mount_unit_name


def cmd_list() -> StageResult:
    """List mountpoints found in the onedriver cache."""
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LauncherConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = MountListOutput(
                errors=[str(e)], warnings=[], cache_dir="", mounts=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        cache_dir = config.get_cache_dir()
        yield (0.3, f"Scanning {cache_dir}...")
        known = get_known_mounts(cache_dir)

        manager = SystemdManager.from_config(config)
        errors: list[str] = []
        warnings: list[str] = []
        mounts: list[dict[str, Any]] = []
        for index, mount in enumerate(known):
            yield (0.3 + 0.7 * index / len(known), f"Querying {mount}...")
            escaped = unit_name_path_escape(mount)
            entry: dict[str, Any] = {"mountpoint": mount, "unit_name": "", "account": "", "active": "", "enabled": ""}
            try:
                entry["account"] = get_account_name(cache_dir, escaped)
            except (OSError, ValueError) as e:
                warnings.append(f"Could not determine account name for {mount}: {e}")
            try:
                entry["unit_name"] = mount_unit_name(mount, config.unit_template)
                status = manager.status(entry["unit_name"])
                entry["active"] = status.active_text
                entry["enabled"] = status.enabled_text
            except (ValueError, ManagerUnreachableError) as e:
                errors.append(str(e))
            mounts.append(entry)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(mounts)} mountpoint(s)"
        result_obj.output = MountListOutput(
            errors=errors,
            warnings=warnings,
            cache_dir=str(cache_dir),
            mounts=mounts,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Listing known mountpoints...",
        progress_callback=do_work,
    )
