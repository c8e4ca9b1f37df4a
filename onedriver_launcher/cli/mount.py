"""Mount Typer app factory."""

import typer

from onedriver_launcher.api.mount.cmd_disable import cmd_disable
from onedriver_launcher.api.mount.cmd_enable import cmd_enable
from onedriver_launcher.api.mount.cmd_list import cmd_list
from onedriver_launcher.api.mount.cmd_start import cmd_start
from onedriver_launcher.api.mount.cmd_status import cmd_status
from onedriver_launcher.api.mount.cmd_stop import cmd_stop
from onedriver_launcher.api.mount.cmd_unit_name import cmd_unit_name
from onedriver_launcher.cli._handle_stage_result import _handle_stage_result


def _print_words(output: dict) -> None:
    """Print the two state words, one per line (nothing if unknown)."""
    for key in ("active", "enabled"):
        if output[key]:
            typer.echo(output[key])


def _print_unit_name(output: dict) -> None:
    if output["unit_name"]:
        typer.echo(output["unit_name"])


def mount() -> typer.Typer:
    """Create and configure the mount Typer app."""
    app = typer.Typer(
        name="mount",
        help="Inspect and control onedriver mountpoints",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Mount operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd(
        mountpoint: str = typer.Argument(..., help="Mountpoint directory"),
        plain: bool = typer.Option(False, "--plain", help="Print only the two state words"),
    ) -> None:
        """Show whether the mountpoint's unit is active and enabled."""
        _handle_stage_result(cmd_status, result_printer=_print_words if plain else None)(mountpoint)

    @app.command(name="start")
    def start_cmd(mountpoint: str = typer.Argument(..., help="Mountpoint directory")) -> None:
        """Mount now."""
        _handle_stage_result(cmd_start)(mountpoint)

    @app.command(name="stop")
    def stop_cmd(mountpoint: str = typer.Argument(..., help="Mountpoint directory")) -> None:
        """Unmount now."""
        _handle_stage_result(cmd_stop)(mountpoint)

    @app.command(name="enable")
    def enable_cmd(mountpoint: str = typer.Argument(..., help="Mountpoint directory")) -> None:
        """Mount on login."""
        _handle_stage_result(cmd_enable)(mountpoint)

    @app.command(name="disable")
    def disable_cmd(mountpoint: str = typer.Argument(..., help="Mountpoint directory")) -> None:
        """Do not mount on login."""
        _handle_stage_result(cmd_disable)(mountpoint)

    @app.command(name="list")
    def list_cmd() -> None:
        """List mountpoints known from the onedriver cache."""
        _handle_stage_result(cmd_list)()

    @app.command(name="unit-name")
    def unit_name_cmd(
        mountpoint: str = typer.Argument(..., help="Mountpoint directory"),
        plain: bool = typer.Option(False, "--plain", help="Print only the unit name"),
    ) -> None:
        """Print the systemd unit a mountpoint maps to."""
        _handle_stage_result(cmd_unit_name, result_printer=_print_unit_name if plain else None)(mountpoint)

    return app
