"""Service install-template command - writes the onedriver template unit."""

import shutil
from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.service import ServiceInstallTemplateOutput
from ..config.LauncherConfig import LauncherConfig
from ..systemd.ManagerUnreachableError import ManagerUnreachableError
from ..systemd.SystemdManager import SystemdManager
from ..systemd.UnitCommandError import UnitCommandError
from .get_user_unit_dir import get_user_unit_dir
from .render_unit_template import render_unit_template


def cmd_install_template(force: bool = False) -> StageResult:
    """Install the template unit into the user's systemd directory.

    An existing unit file is left alone unless ``force`` is set. After
    writing, the user manager is asked to reload its unit files.
    """
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        def finish(errors: list[str], warnings: list[str], unit_path: str, installed: bool, message: str) -> None:
            result_obj.result = message
            result_obj.output = ServiceInstallTemplateOutput(
                errors=errors,
                warnings=warnings,
                unit_path=unit_path,
                installed=installed,
            ).model_dump(mode="python")
            result_obj.success = not errors

        yield (0.1, "Loading configuration...")
        try:
            config = LauncherConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            finish([str(e)], [], "", False, f"Error: {e}")
            return

        unit_path = get_user_unit_dir() / config.unit_template
        if unit_path.exists() and not force:
            yield (1.0, "Complete")
            finish([], [f"{unit_path} already exists (use --force to overwrite)"], str(unit_path), False,
                   f"Template unit already installed at {unit_path}")
            return

        yield (0.3, "Locating binaries...")
        warnings: list[str] = []
        onedriver_path = shutil.which("onedriver")
        if not onedriver_path:
            onedriver_path = "/usr/bin/onedriver"
            warnings.append(f"onedriver not found in PATH, assuming {onedriver_path}")
        fusermount_path = shutil.which("fusermount3") or shutil.which("fusermount") or "/usr/bin/fusermount"

        yield (0.5, "Writing unit file...")
        try:
            unit_path.parent.mkdir(parents=True, exist_ok=True)
            unit_path.write_text(render_unit_template(onedriver_path, fusermount_path), encoding="utf-8")
        except OSError as e:
            yield (1.0, "Complete")
            finish([f"Failed to write {unit_path}: {e}"], warnings, str(unit_path), False, f"Error writing {unit_path}")
            return

        yield (0.8, "Reloading service manager...")
        try:
            SystemdManager.from_config(config).daemon_reload()
        except (ManagerUnreachableError, UnitCommandError) as e:
            warnings.append(f"Unit written but daemon-reload failed: {e}")

        yield (1.0, "Complete")
        finish([], warnings, str(unit_path), True, f"Template unit installed at {unit_path}")

    return StageResult(
        announce="Installing onedriver template unit...",
        progress_callback=do_work,
    )
