"""Open a mountpoint in the default file browser once it is mounted."""

import logging
import threading

from gi.repository import Gio, GLib

from ..api.mount.wait_until_mounted import wait_until_mounted
from ..constants import MOUNT_POLL_TIMEOUT

logger = logging.getLogger(__name__)


def open_mount(mountpoint: str) -> None:
    """Wait for the filesystem in the background, then launch the file browser."""
    def _launch() -> bool:
        try:
            Gio.AppInfo.launch_default_for_uri(Gio.File.new_for_path(mountpoint).get_uri(), None)
        except GLib.Error as e:
            logger.error("Could not open %s: %s", mountpoint, e.message)
        return False

    def _worker() -> None:
        logger.debug("Waiting for %s to be mounted", mountpoint)
        if not wait_until_mounted(mountpoint, MOUNT_POLL_TIMEOUT):
            logger.error("Timed out waiting for the filesystem at %s to become available", mountpoint)
            return
        GLib.idle_add(_launch)

    threading.Thread(target=_worker, daemon=True).start()
