"""Create the main Typer CLI app."""

import typer

from onedriver_launcher.cli.config import config
from onedriver_launcher.cli.mount import mount
from onedriver_launcher.cli.service import service
from onedriver_launcher.constants import LOG_LEVELS


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="onedriver-launcher - Manage and configure onedriver mountpoints",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(mount(), name="mount")
    app.add_typer(service(), name="service")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        log: str | None = typer.Option(
            None,
            "--log",
            "-l",
            help=f"Set logging level/verbosity and also log to stderr. One of: {', '.join(LOG_LEVELS).lower()}",
        ),
    ) -> None:
        """Without a command, opens the launcher window."""
        from onedriver_launcher.api.config.LauncherConfig import LauncherConfig
        from onedriver_launcher.utils.configure_logging import configure_logging

        if log is not None and log.upper() not in LOG_LEVELS:
            typer.echo(f"Error: --log must be one of {', '.join(LOG_LEVELS).lower()}, got '{log}'", err=True)
            raise typer.Exit(1)

        try:
            launcher_config = LauncherConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        configure_logging(
            level=(log or launcher_config.log_level).upper(),
            stderr=log is not None,
        )

        ctx.ensure_object(dict)
        ctx.obj["config"] = launcher_config

        if ctx.invoked_subcommand is None:
            from onedriver_launcher.gui.app import run_app

            raise typer.Exit(run_app(launcher_config))

    return app
