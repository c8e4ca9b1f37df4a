"""Unit tests for systemd unescaping."""

import pytest

from onedriver_launcher.api.systemd.unit_name_path_escape import unit_name_path_escape
from onedriver_launcher.api.systemd.unit_name_path_unescape import unit_name_path_unescape
from onedriver_launcher.api.systemd.unit_name_unescape import unit_name_unescape


def test_unescape_dashes_and_hex():
    assert unit_name_unescape("-mnt-my\\x20mount") == "/mnt/my mount"


def test_unescape_multibyte():
    assert unit_name_unescape("\\xc3\\xa9t\\xc3\\xa9") == "été"


def test_unescape_uppercase_hex():
    assert unit_name_unescape("a\\x2Db") == "a-b"


@pytest.mark.parametrize("bad", ["\\", "\\x", "\\x2", "\\xzz", "\\y20", "\\x+f"])
def test_unescape_rejects_malformed_sequences(bad):
    with pytest.raises(ValueError, match="Invalid escape sequence"):
        unit_name_unescape(bad)


def test_unescape_rejects_invalid_utf8():
    with pytest.raises(ValueError, match="UTF-8"):
        unit_name_unescape("\\xff")


def test_path_unescape():
    assert unit_name_path_unescape("home-user-OneDrive") == "/home/user/OneDrive"
    assert unit_name_path_unescape("-") == "/"


@pytest.mark.parametrize("path", ["/home/user/OneDrive", "/mnt/my mount", "/srv/one-drive/é", "/"])
def test_path_unescape_inverts_path_escape(path):
    assert unit_name_path_unescape(unit_name_path_escape(path)) == path


@pytest.mark.parametrize("text", ["mnt-..-x", "mnt--x", "mnt-.-x", "mnt-"])
def test_path_unescape_rejects_non_normalized_paths(text):
    with pytest.raises(ValueError, match="normalized"):
        unit_name_path_unescape(text)
