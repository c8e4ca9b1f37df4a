"""Service Typer app factory."""

import typer

from onedriver_launcher.api.service.cmd_install_template import cmd_install_template
from onedriver_launcher.cli._handle_stage_result import _handle_stage_result


def service() -> typer.Typer:
    """Create and configure the service Typer app."""
    app = typer.Typer(
        name="service",
        help="onedriver template unit",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install-template")
    def install_template_cmd(
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing unit file"),
    ) -> None:
        """Install the onedriver@.service template for the current user."""
        _handle_stage_result(cmd_install_template)(force=force)

    return app
