"""Unit tests for the mountpoint helpers."""

import pytest

from onedriver_launcher.api.mount.escape_home import escape_home
from onedriver_launcher.api.mount.get_account_name import get_account_name
from onedriver_launcher.api.mount.get_known_mounts import get_known_mounts
from onedriver_launcher.api.mount.mount_unit_name import mount_unit_name
from onedriver_launcher.api.mount.mountpoint_is_valid import mountpoint_is_valid
from onedriver_launcher.api.mount.remove_mount_cache import remove_mount_cache
from onedriver_launcher.api.mount.wait_until_mounted import wait_until_mounted
from onedriver_launcher.api.systemd.MalformedTemplateError import MalformedTemplateError
from tests.conftest import add_known_mount


def test_mount_unit_name_end_to_end():
    assert mount_unit_name("/home/user/OneDrive", "onedriver@.service") == "onedriver@home-user-OneDrive.service"


def test_mount_unit_name_malformed_template():
    with pytest.raises(MalformedTemplateError):
        mount_unit_name("/home/user/OneDrive", "onedriver.service")


def test_mountpoint_is_valid(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    full = tmp_path / "full"
    full.mkdir()
    (full / "file.txt").write_text("x")
    a_file = tmp_path / "plain.txt"
    a_file.write_text("x")

    assert mountpoint_is_valid(str(empty)) is True
    assert mountpoint_is_valid(str(full)) is False
    assert mountpoint_is_valid(str(a_file)) is False
    assert mountpoint_is_valid(str(tmp_path / "missing")) is False
    assert mountpoint_is_valid("") is False


def test_get_known_mounts(cache_dir):
    add_known_mount(cache_dir, "home-user-OneDrive")
    add_known_mount(cache_dir, "mnt-work\\x20drive")
    (cache_dir / "home-user-NotSignedIn").mkdir()
    (cache_dir / "stray-file").write_text("")
    add_known_mount(cache_dir, "bad\\xzz")
    add_known_mount(cache_dir, "mnt-..-etc")

    assert get_known_mounts(cache_dir) == ["/home/user/OneDrive", "/mnt/work drive"]


def test_get_known_mounts_missing_dir(tmp_path):
    assert get_known_mounts(tmp_path / "nope") == []


def test_get_account_name(cache_dir):
    add_known_mount(cache_dir, "home-user-OneDrive", account="someone@outlook.com")
    assert get_account_name(cache_dir, "home-user-OneDrive") == "someone@outlook.com"


def test_get_account_name_missing_account(cache_dir):
    add_known_mount(cache_dir, "home-user-OneDrive", account=None)
    with pytest.raises(ValueError, match="No account"):
        get_account_name(cache_dir, "home-user-OneDrive")


def test_get_account_name_missing_file(cache_dir):
    with pytest.raises(OSError):
        get_account_name(cache_dir, "home-user-Nothing")


def test_escape_home():
    assert escape_home("/home/user/OneDrive", home="/home/user") == "~/OneDrive"
    assert escape_home("/home/user", home="/home/user/") == "~"
    assert escape_home("/home/username/x", home="/home/user") == "/home/username/x"
    assert escape_home("/mnt/x", home="/home/user") == "/mnt/x"


def test_remove_mount_cache(cache_dir):
    folder = add_known_mount(cache_dir, "home-user-OneDrive")
    assert remove_mount_cache(cache_dir, "home-user-OneDrive") is True
    assert not folder.exists()
    assert remove_mount_cache(cache_dir, "home-user-OneDrive") is False


@pytest.mark.parametrize("escaped", ["", "..", "a/../../b"])
def test_remove_mount_cache_refuses_outside_paths(cache_dir, escaped):
    with pytest.raises(ValueError, match="Refusing"):
        remove_mount_cache(cache_dir, escaped)


def test_wait_until_mounted_polls_until_true():
    answers = iter([False, False, True])
    sleeps = []
    assert wait_until_mounted(
        "/mnt/x", timeout=10, interval=1, ismount=lambda p: next(answers), sleep=sleeps.append, clock=lambda: 0.0
    ) is True
    assert sleeps == [1, 1]


def test_wait_until_mounted_times_out():
    now = [0.0]

    def sleep(seconds):
        now[0] += seconds

    assert wait_until_mounted(
        "/mnt/x", timeout=2, interval=0.5, ismount=lambda p: False, sleep=sleep, clock=lambda: now[0]
    ) is False
    assert now[0] == 2.0


def test_wait_until_mounted_empty_path():
    assert wait_until_mounted("", timeout=1) is False
