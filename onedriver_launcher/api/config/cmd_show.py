"""Config show command - prints the effective configuration."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigShowOutput
from .LauncherConfig import LauncherConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (file values over defaults)."""
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        path = LauncherConfig.get_config_path()
        try:
            config = LauncherConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                content={},
                config_path=str(path),
                exists=path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if path.exists() else [f"No config file at {path}, using defaults"]
        result_obj.result = f"Configuration loaded from {path}" if path.exists() else "Default configuration"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            content=config.to_dict(),
            config_path=str(path),
            exists=path.exists(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
