"""Integration test against a real systemd user manager.

Skipped unless ``systemctl --user`` can talk to a running user instance.
"""

import subprocess
import uuid
from pathlib import Path

import pytest

from onedriver_launcher.api.mount.mount_unit_name import mount_unit_name
from onedriver_launcher.api.systemd.ManagerUnreachableError import ManagerUnreachableError
from onedriver_launcher.api.systemd.SystemdManager import SystemdManager
from onedriver_launcher.api.systemd.UnitStatus import UnitStatus


def _check_user_manager_available() -> bool:
    try:
        init_process = Path("/proc/1/comm").read_text().strip()
    except OSError:
        return False
    if init_process != "systemd":
        return False
    try:
        result = subprocess.run(
            ["systemctl", "--user", "list-units", "--no-pager"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0


pytestmark = pytest.mark.skipif(
    not _check_user_manager_available(),
    reason="systemd user manager not available",
)


def test_unknown_unit_is_off_and_disabled():
    unit = mount_unit_name(f"/tmp/launcher-test-{uuid.uuid4().hex}", "onedriver@.service")
    status = SystemdManager(user=True).status(unit)
    assert status == UnitStatus(active=False, enabled=False)
    assert (status.active_text, status.enabled_text) == ("off", "disabled")


def test_missing_user_bus_is_not_off(monkeypatch):
    monkeypatch.setenv("DBUS_SESSION_BUS_ADDRESS", "unix:path=/nonexistent/bus")
    monkeypatch.setenv("XDG_RUNTIME_DIR", "/nonexistent")
    manager = SystemdManager(user=True, timeout=5)
    with pytest.raises(ManagerUnreachableError):
        manager.status("onedriver@mnt-x.service")
