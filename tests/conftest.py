"""Shared pytest configuration and fixtures for all tests."""

import io
import json
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import pytest

from onedriver_launcher.api.systemd.ManagerUnreachableError import ManagerUnreachableError
from onedriver_launcher.api.systemd.SystemdManager import SystemdManager
from onedriver_launcher.api.systemd.UnitCommandError import UnitCommandError
from onedriver_launcher.api.systemd._AbstractManager import _AbstractManager
from onedriver_launcher.utils.configure_logging import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests (applied from directory)")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def launcher_home(tmp_path, monkeypatch) -> Path:
    """Point launcher home, XDG config and XDG cache into tmp_path."""
    home = tmp_path / "launcher-home"
    monkeypatch.setenv("ONEDRIVER_LAUNCHER_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    yield home
    reset_logging()


@pytest.fixture
def cache_dir(tmp_path) -> Path:
    """The onedriver cache dir implied by the isolated XDG_CACHE_HOME."""
    path = tmp_path / "xdg-cache" / "onedriver"
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_config(home: Path, **values) -> Path:
    home.mkdir(parents=True, exist_ok=True)
    path = home / "config.json"
    path.write_text(json.dumps(values))
    return path


def add_known_mount(cache_dir: Path, escaped: str, account: str | None = "user@example.com") -> Path:
    """Create a cache folder the way onedriver leaves it after sign-in."""
    folder = cache_dir / escaped
    folder.mkdir(parents=True, exist_ok=True)
    tokens = {"access_token": "x"} if account is None else {"access_token": "x", "account": account}
    (folder / "auth_tokens.json").write_text(json.dumps(tokens))
    return folder


# =============================================================================
# Fake service manager
# =============================================================================


class FakeManager(_AbstractManager):
    """In-memory service manager.

    Set ``unreachable`` to make every call fail as if the bus were down, and
    add units to ``refuse`` to make state changes fail.
    """

    def __init__(self):
        self.active: set[str] = set()
        self.enabled: set[str] = set()
        self.refuse: set[str] = set()
        self.unreachable = False
        self.calls: list[tuple[str, str]] = []
        self.reloads = 0

    def _check(self, op: str, unit: str) -> None:
        self.calls.append((op, unit))
        if self.unreachable:
            raise ManagerUnreachableError(unit, "Failed to connect to bus: No medium found")

    def is_active(self, unit: str) -> bool:
        self._check("is-active", unit)
        return unit in self.active

    def is_enabled(self, unit: str) -> bool:
        self._check("is-enabled", unit)
        return unit in self.enabled

    def set_active(self, unit: str, active: bool) -> None:
        action = "start" if active else "stop"
        self._check(action, unit)
        if unit in self.refuse:
            raise UnitCommandError(unit, action, "Unit not found.")
        (self.active.add if active else self.active.discard)(unit)

    def set_enabled(self, unit: str, enabled: bool) -> None:
        action = "enable" if enabled else "disable"
        self._check(action, unit)
        if unit in self.refuse:
            raise UnitCommandError(unit, action, "Unit not found.")
        (self.enabled.add if enabled else self.enabled.discard)(unit)

    def daemon_reload(self) -> None:
        self._check("daemon-reload", "")
        self.reloads += 1


@pytest.fixture
def fake_manager(monkeypatch) -> FakeManager:
    """A FakeManager that every command receives instead of systemctl."""
    manager = FakeManager()
    monkeypatch.setattr(SystemdManager, "from_config", classmethod(lambda cls, config: manager))
    return manager


# =============================================================================
# Command / CLI helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def run_cli(args):
    """Execute CLI command and capture stdout/stderr."""
    from onedriver_launcher.cli import main

    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = main(args)
        except SystemExit as exc:
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()
