"""Gtk.Application wiring for the launcher window."""

from gi.repository import Gio, Gtk

from ..api.config.LauncherConfig import LauncherConfig
from ..api.launcher.Launcher import Launcher
from ..api.systemd.SystemdManager import SystemdManager
from ..utils.get_logger import get_logger
from ..utils.get_package_version import get_package_version
from .LauncherWindow import LauncherWindow
from .dir_chooser import dir_chooser
from .dispatch import run_in_thread
from .open_mount import open_mount

logger = get_logger("gui")


def run_app(config: LauncherConfig) -> int:
    """Run the launcher until its window is closed; returns the exit status."""
    logger.info("onedriver-launcher %s", get_package_version())

    app = Gtk.Application(application_id=config.app_id, flags=Gio.ApplicationFlags.FLAGS_NONE)

    def on_activate(application: Gtk.Application) -> None:
        window: LauncherWindow | None = None

        def choose() -> str | None:
            return dir_chooser("Select a mountpoint", parent=window)

        launcher = Launcher(
            config=config,
            manager=SystemdManager.from_config(config),
            chooser=choose,
            dispatcher=run_in_thread,
            opener=open_mount,
        )
        window = LauncherWindow(application, launcher)
        window.show_all()

    app.connect("activate", on_activate)
    return app.run(None)
