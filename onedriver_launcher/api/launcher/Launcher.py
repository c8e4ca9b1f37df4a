"""Event handlers behind the launcher window.

The window owns the widgets; this class owns the sequence of calls made for
each user action, so the same logic runs under GTK and in tests.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from ..config.LauncherConfig import LauncherConfig
from ..mount.escape_home import escape_home
from ..mount.get_account_name import get_account_name
from ..mount.get_known_mounts import get_known_mounts
from ..mount.mount_unit_name import mount_unit_name
from ..mount.mountpoint_is_valid import mountpoint_is_valid
from ..mount.remove_mount_cache import remove_mount_cache
from ..systemd.MalformedTemplateError import MalformedTemplateError
from ..systemd.ManagerUnreachableError import ManagerUnreachableError
from ..systemd.UnitCommandError import UnitCommandError
from ..systemd.UnitStatus import UnitStatus
from ..systemd._AbstractManager import _AbstractManager
from ..systemd.unit_name_path_escape import unit_name_path_escape
from .InteractionResult import InteractionResult
from .MountInfo import MountInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

Chooser = Callable[[], str | None]
Dispatcher = Callable[[Callable[[], Any], Callable[[Any], None]], None]
Opener = Callable[[str], None]
Render = Callable[[str, str], None]
ReportError = Callable[[str], None]


def run_inline(work: Callable[[], T], done: Callable[[T], None]) -> None:
    """Default dispatcher: do the work on the calling thread."""
    done(work())


class Launcher:
    """One method per user action.

    ``chooser`` returns a directory path, or None when the user cancels.
    ``dispatcher(work, done)`` runs ``work`` and hands its result to ``done``;
    a GUI passes one that runs ``work`` off the event thread and calls
    ``done`` back on it. The work handed to a dispatcher never raises.
    ``opener`` is called with a freshly started mountpoint, e.g. to show it
    in the file browser.
    """

    def __init__(
        self,
        config: LauncherConfig,
        manager: _AbstractManager,
        chooser: Chooser,
        dispatcher: Dispatcher | None = None,
        opener: Opener | None = None,
    ):
        self.config = config
        self.manager = manager
        self.chooser = chooser
        self.opener = opener
        self._dispatch: Dispatcher = dispatcher or run_inline
        self._lock = threading.Lock()
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def _acquire(self) -> bool:
        with self._lock:
            if self._busy:
                return False
            self._busy = True
            return True

    def _release(self) -> None:
        with self._lock:
            self._busy = False

    def unit_for(self, mountpoint: str) -> str:
        """Raises MalformedTemplateError for a bad configured template, ValueError for a path with `..`."""
        return mount_unit_name(mountpoint, self.config.unit_template)

    def _unit_or_none(self, mount: str) -> str | None:
        try:
            return self.unit_for(mount)
        except ValueError as e:
            logger.error("Cannot build unit name for %s: %s", mount, e)
            return None

    def request_new_mountpoint(
        self,
        render: Render,
        report_error: ReportError,
        on_done: Callable[[InteractionResult], None] | None = None,
    ) -> None:
        """Handle a click on "New mountpoint".

        Asks for a directory, derives its unit, shows the unit's state
        through ``render(active_text, enabled_text)``, then starts the unit
        and hands the mountpoint to ``opener``. Failures go to
        ``report_error``; a cancelled chooser ends the interaction silently.
        ``on_done`` receives the InteractionResult in every case.
        """
        def finish(result: InteractionResult) -> None:
            self._release()
            if result.ok and result.status is not None:
                render(result.status.active_text, result.status.enabled_text)
                if not result.started:
                    report_error(result.message)
                elif self.opener is not None and result.mountpoint:
                    self.opener(result.mountpoint)
            elif result.outcome not in ("cancelled", "busy"):
                report_error(result.message)
            if on_done is not None:
                on_done(result)

        if not self._acquire():
            logger.debug("Ignoring new mountpoint request while another is in flight")
            if on_done is not None:
                on_done(InteractionResult("busy", message="Another mountpoint request is in progress"))
            return

        try:
            prepared = self._prepare()
        except BaseException:
            self._release()
            raise
        if isinstance(prepared, InteractionResult):
            finish(prepared)
            return

        mount, unit_name = prepared
        try:
            self._dispatch(lambda: self._query(mount, unit_name), finish)
        except BaseException:
            self._release()
            raise

    def _prepare(self) -> InteractionResult | tuple[str, str]:
        mount = self.chooser()
        if mount is None:
            logger.info("Mountpoint selection cancelled")
            return InteractionResult("cancelled")

        if self.config.validate_mountpoint and not mountpoint_is_valid(mount):
            message = f"Mountpoint {mount} is not valid. Mountpoint must be an empty directory."
            logger.error(message)
            return InteractionResult("invalid", mountpoint=mount, message=message)

        try:
            unit_name = self.unit_for(mount)
        except MalformedTemplateError as e:
            logger.error("Cannot build unit name for %s: %s", mount, e)
            return InteractionResult("malformed-template", mountpoint=mount, message=str(e))
        except ValueError as e:
            logger.error("Mountpoint %s is not valid: %s", mount, e)
            return InteractionResult("invalid", mountpoint=mount, message=str(e))

        logger.info("Querying unit %s for mountpoint %s", unit_name, mount)
        return mount, unit_name

    def _query(self, mount: str, unit_name: str) -> InteractionResult:
        """Query, then start, the unit; runs on the dispatcher's thread."""
        try:
            status = self.manager.status(unit_name)
        except ManagerUnreachableError as e:
            logger.error("Service manager unreachable for %s: %s", unit_name, e.reason)
            return InteractionResult("unreachable", mountpoint=mount, unit_name=unit_name, message=str(e))
        except Exception as e:
            logger.exception("Unexpected error querying %s", unit_name)
            return InteractionResult(
                "failed", mountpoint=mount, unit_name=unit_name, message=f"Could not query {unit_name}: {e}"
            )
        logger.info("Unit %s is %s and %s", unit_name, status.active_text, status.enabled_text)

        try:
            self.manager.set_active(unit_name, True)
        except (ManagerUnreachableError, UnitCommandError) as e:
            logger.error("Failed to start unit %s: %s", unit_name, e)
            return InteractionResult("ok", mountpoint=mount, unit_name=unit_name, status=status, message=str(e))
        except Exception as e:
            logger.exception("Unexpected error starting %s", unit_name)
            return InteractionResult(
                "ok", mountpoint=mount, unit_name=unit_name, status=status, message=f"Could not start {unit_name}: {e}"
            )
        logger.info("Started %s for mountpoint %s", unit_name, mount)
        return InteractionResult("ok", mountpoint=mount, unit_name=unit_name, status=status, started=True)

    def known_mounts(self) -> list[MountInfo]:
        """Mountpoints found in the onedriver cache, for the window's list."""
        cache_dir = self.config.get_cache_dir()
        infos = []
        for mount in get_known_mounts(cache_dir):
            logger.info("Found existing mount %s", mount)
            infos.append(self.describe(mount))
        return infos

    def describe(self, mount: str, status: UnitStatus | None = None) -> MountInfo:
        """Row data for ``mount``; queries the unit unless ``status`` is given.

        ``unit_name`` is empty and ``status`` None when no unit name can be
        built (malformed template).
        """
        label = escape_home(mount)
        try:
            escaped = unit_name_path_escape(mount)
            label = f"{get_account_name(self.config.get_cache_dir(), escaped)} ({label})"
        except (OSError, ValueError) as e:
            logger.warning("Could not determine account name for %s: %s", mount, e)

        unit_name = self._unit_or_none(mount)
        if unit_name is None:
            return MountInfo(mountpoint=mount, unit_name="", label=label, status=None)
        if status is None:
            try:
                status = self.manager.status(unit_name)
            except ManagerUnreachableError as e:
                logger.error("Error checking state of %s: %s", unit_name, e.reason)
        return MountInfo(mountpoint=mount, unit_name=unit_name, label=label, status=status)

    def describe_result(self, result: InteractionResult) -> MountInfo:
        """Row data for a finished interaction, without querying again."""
        status = result.status
        if status is not None and result.started:
            status = UnitStatus(active=True, enabled=status.enabled)
        if result.mountpoint is None or status is None:
            raise ValueError(f"Interaction for {result.mountpoint!r} has no unit status")
        return self.describe(result.mountpoint, status=status)

    def toggle_active(self, mount: str, active: bool) -> bool:
        """Start or stop the unit of ``mount``; returns False on failure."""
        unit_name = self._unit_or_none(mount)
        if unit_name is None:
            return False
        logger.info("Changing %s active state to %s", unit_name, active)
        try:
            self.manager.set_active(unit_name, active)
        except (ManagerUnreachableError, UnitCommandError) as e:
            logger.error("Could not change active state of %s: %s", unit_name, e)
            return False
        return True

    def toggle_enabled(self, mount: str, enabled: bool) -> bool:
        """Enable or disable the unit of ``mount``; returns False on failure."""
        unit_name = self._unit_or_none(mount)
        if unit_name is None:
            return False
        logger.info("Changing %s enabled state to %s", unit_name, enabled)
        try:
            self.manager.set_enabled(unit_name, enabled)
        except (ManagerUnreachableError, UnitCommandError) as e:
            logger.error("Could not change enabled state of %s: %s", unit_name, e)
            return False
        return True

    def remove_mount(self, mount: str) -> bool:
        """Disable and stop the unit of ``mount`` and delete its cache.

        The cache is deleted even if the unit could not be changed.
        """
        logger.info("Deleting mount %s", mount)
        ok = self.toggle_enabled(mount, False)
        ok = self.toggle_active(mount, False) and ok
        try:
            remove_mount_cache(self.config.get_cache_dir(), unit_name_path_escape(mount))
        except (OSError, ValueError) as e:
            logger.error("Could not remove cache for %s: %s", mount, e)
            ok = False
        return ok
