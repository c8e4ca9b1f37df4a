"""Unit tests for onedriver_launcher.api.mount.cmd_status."""

from onedriver_launcher.api.mount.cmd_status import cmd_status
from onedriver_launcher.api.validate_output import validate_output
from tests.conftest import run_cmd, write_config

UNIT = "onedriver@home-user-OneDrive.service"


def test_status_words(fake_manager):
    fake_manager.active.add(UNIT)

    result = run_cmd(cmd_status, "/home/user/OneDrive")

    assert result.success is True
    assert result.output["unit_name"] == UNIT
    assert result.output["active"] == "active"
    assert result.output["enabled"] == "disabled"
    assert result.result == f"{UNIT}: active, disabled"
    validate_output(cmd_status, result.output)


def test_status_off_and_enabled(fake_manager):
    fake_manager.enabled.add(UNIT)
    result = run_cmd(cmd_status, "/home/user/OneDrive/")
    assert (result.output["active"], result.output["enabled"]) == ("off", "enabled")


def test_status_unreachable_is_not_reported_as_off(fake_manager):
    fake_manager.unreachable = True

    result = run_cmd(cmd_status, "/home/user/OneDrive")

    assert result.success is False
    assert result.output["unit_name"] == UNIT
    assert result.output["active"] == ""
    assert result.output["enabled"] == ""
    assert "Failed to connect to bus" in result.output["errors"][0]


def test_status_malformed_template_skips_manager(fake_manager, launcher_home):
    write_config(launcher_home, unit_template="onedriver.service")

    result = run_cmd(cmd_status, "/home/user/OneDrive")

    assert result.success is False
    assert "onedriver.service" in result.output["errors"][0]
    assert fake_manager.calls == []


def test_status_invalid_config(fake_manager, launcher_home):
    write_config(launcher_home, user_manager="sometimes")
    result = run_cmd(cmd_status, "/home/user/OneDrive")
    assert result.success is False
    assert "user_manager" in result.output["errors"][0]
