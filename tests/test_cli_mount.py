"""CLI tests for the mount and service commands."""

import json

from tests.conftest import add_known_mount, run_cli

UNIT = "onedriver@home-user-OneDrive.service"


def test_status_json(fake_manager):
    fake_manager.enabled.add(UNIT)

    rc, out, err = run_cli(["mount", "status", "/home/user/OneDrive"])

    assert rc == 0
    data = json.loads(out)
    assert data["unit_name"] == UNIT
    assert (data["active"], data["enabled"]) == ("off", "enabled")
    assert "Checking mountpoint" in err


def test_status_plain_prints_only_words(fake_manager):
    fake_manager.active.add(UNIT)
    rc, out, _err = run_cli(["mount", "status", "--plain", "/home/user/OneDrive"])
    assert rc == 0
    assert out.split() == ["active", "disabled"]


def test_status_unreachable_exit_code(fake_manager):
    fake_manager.unreachable = True
    rc, out, err = run_cli(["mount", "status", "--plain", "/home/user/OneDrive"])
    assert rc == 1
    assert out == ""
    assert "Could not query service manager" in err


def test_start_then_status(fake_manager):
    rc, _out, _err = run_cli(["mount", "start", "/home/user/OneDrive"])
    assert rc == 0
    assert UNIT in fake_manager.active

    rc, out, _err = run_cli(["mount", "status", "--plain", "/home/user/OneDrive"])
    assert out.split() == ["active", "disabled"]


def test_enable_refused(fake_manager):
    fake_manager.refuse.add(UNIT)
    rc, out, _err = run_cli(["mount", "enable", "/home/user/OneDrive"])
    assert rc == 1
    assert json.loads(out)["changed"] is False


def test_unit_name_plain():
    rc, out, _err = run_cli(["mount", "unit-name", "--plain", "/mnt/x"])
    assert rc == 0
    assert out == "onedriver@mnt-x.service\n"


def test_list(fake_manager, cache_dir):
    add_known_mount(cache_dir, "home-user-OneDrive")
    rc, out, _err = run_cli(["mount", "list"])
    assert rc == 0
    assert [m["mountpoint"] for m in json.loads(out)["mounts"]] == ["/home/user/OneDrive"]


def test_service_install_template(fake_manager, tmp_path):
    rc, out, _err = run_cli(["service", "install-template"])
    assert rc == 0
    assert json.loads(out)["installed"] is True
    assert (tmp_path / "xdg-config" / "systemd" / "user" / "onedriver@.service").exists()

    rc, out, err = run_cli(["service", "install-template"])
    assert rc == 0
    assert json.loads(out)["installed"] is False
    assert "--force" in err
