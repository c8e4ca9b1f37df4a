"""systemd backend - queries and changes units through ``systemctl``."""

import logging
import re
import subprocess
from collections.abc import Callable
from typing import TYPE_CHECKING

from ._AbstractManager import _AbstractManager
from .ManagerUnreachableError import ManagerUnreachableError
from .UnitCommandError import UnitCommandError

if TYPE_CHECKING:
    from ..config.LauncherConfig import LauncherConfig

logger = logging.getLogger(__name__)

# Everything `systemctl is-active` may print
ACTIVE_STATES = frozenset(
    {
        "active",
        "reloading",
        "refreshing",
        "inactive",
        "failed",
        "activating",
        "deactivating",
        "maintenance",
        "unknown",
    }
)

# Everything `systemctl is-enabled` may print
UNIT_FILE_STATES = frozenset(
    {
        "enabled",
        "enabled-runtime",
        "linked",
        "linked-runtime",
        "alias",
        "masked",
        "masked-runtime",
        "static",
        "indirect",
        "disabled",
        "generated",
        "transient",
        "bad",
        "not-found",
    }
)

ENABLED_STATES = frozenset({"enabled", "enabled-runtime"})

_NOT_FOUND = re.compile(r"No such file or directory|not found|does not exist", re.IGNORECASE)
_BUS_FAILURE = re.compile(
    r"Failed to connect to bus|Access denied|Permission denied|Connection refused|Transport endpoint",
    re.IGNORECASE,
)

Runner = Callable[..., subprocess.CompletedProcess]


def _first_line(text: str | None) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0].strip() if lines else ""


def _reason(proc: subprocess.CompletedProcess) -> str:
    stderr = (proc.stderr or "").strip()
    if stderr:
        return stderr
    stdout = (proc.stdout or "").strip()
    if stdout:
        return f"unexpected output {stdout!r}"
    return f"no output (exit code {proc.returncode})"


class SystemdManager(_AbstractManager):
    """Talks to the (user) systemd instance via the systemctl CLI."""

    def __init__(self, user: bool = True, timeout: float = 10.0, runner: Runner | None = None):
        """
        Args:
            user: Address the per-user manager (``systemctl --user``)
            timeout: Seconds to wait for each systemctl call
            runner: Replacement for ``subprocess.run`` (tests)
        """
        self.user = user
        self.timeout = timeout
        self._runner: Runner = runner or subprocess.run

    @classmethod
    def from_config(cls, config: "LauncherConfig") -> "SystemdManager":
        return cls(user=config.user_manager, timeout=config.systemctl_timeout)

    def _command(self, *args: str) -> list[str]:
        cmd = ["systemctl"]
        if self.user:
            cmd.append("--user")
        cmd.extend(args)
        return cmd

    def _run(self, unit: str, *args: str) -> subprocess.CompletedProcess:
        cmd = self._command(*args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            return self._runner(
                cmd, capture_output=True, text=True, errors="replace", timeout=self.timeout, check=False
            )
        except FileNotFoundError as e:
            raise ManagerUnreachableError(unit, "systemctl not found; systemd does not appear to be available") from e
        except subprocess.TimeoutExpired as e:
            raise ManagerUnreachableError(unit, f"systemctl timed out after {self.timeout}s") from e
        except OSError as e:
            raise ManagerUnreachableError(unit, str(e)) from e

    def active_state(self, unit: str) -> str:
        """Raw ``systemctl is-active`` state, e.g. active, inactive, failed."""
        proc = self._run(unit, "is-active", unit)
        state = _first_line(proc.stdout)
        if state not in ACTIVE_STATES:
            raise ManagerUnreachableError(unit, _reason(proc))
        return state

    def enabled_state(self, unit: str) -> str:
        """Raw ``systemctl is-enabled`` state, e.g. enabled, disabled, static."""
        proc = self._run(unit, "is-enabled", unit)
        state = _first_line(proc.stdout)
        if state in UNIT_FILE_STATES:
            return state
        stderr = proc.stderr or ""
        # Older systemd reports unknown units only on stderr
        if proc.returncode != 0 and not state and _NOT_FOUND.search(stderr) and not _BUS_FAILURE.search(stderr):
            return "not-found"
        raise ManagerUnreachableError(unit, _reason(proc))

    def is_active(self, unit: str) -> bool:
        return self.active_state(unit) == "active"

    def is_enabled(self, unit: str) -> bool:
        return self.enabled_state(unit) in ENABLED_STATES

    def _change(self, unit: str, action: str) -> None:
        proc = self._run(unit, action, *([unit] if unit else []))
        if proc.returncode == 0:
            logger.info("systemctl %s %s", action, unit or "(manager)")
            return
        stderr = (proc.stderr or "").strip()
        if _BUS_FAILURE.search(stderr):
            raise ManagerUnreachableError(unit, stderr)
        raise UnitCommandError(unit, action, stderr or f"exit code {proc.returncode}")

    def set_active(self, unit: str, active: bool) -> None:
        self._change(unit, "start" if active else "stop")

    def set_enabled(self, unit: str, enabled: bool) -> None:
        self._change(unit, "enable" if enabled else "disable")

    def daemon_reload(self) -> None:
        self._change("", "daemon-reload")
