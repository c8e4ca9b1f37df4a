"""Config Typer app factory."""

import typer

from onedriver_launcher.api.config.cmd_show import cmd_show
from onedriver_launcher.api.config.cmd_version import cmd_version
from onedriver_launcher.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Launcher configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Config operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)()

    @app.command(name="version")
    def version_cmd() -> None:
        """Show version information."""
        _handle_stage_result(cmd_version)()

    return app
