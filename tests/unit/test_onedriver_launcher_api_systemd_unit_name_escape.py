"""Unit tests for onedriver_launcher.api.systemd.unit_name_escape."""

import string

import pytest

from onedriver_launcher.api.systemd.template_unit import template_unit
from onedriver_launcher.api.systemd.unit_name_escape import unit_name_escape


@pytest.mark.parametrize("text", ["OneDrive", "a.b:c_d", "x", "abc123", "A:B", "a."])
def test_plain_names_are_unchanged(text):
    assert unit_name_escape(text) == text


def test_every_allowed_character_is_identity():
    allowed = string.ascii_letters + string.digits + ":_."
    assert unit_name_escape(allowed) == allowed


def test_slashes_become_dashes():
    assert unit_name_escape("/mnt/x") == "-mnt-x"
    assert "/" not in unit_name_escape("//a///b/")


def test_dash_is_escaped():
    assert unit_name_escape("foo-bar") == "foo\\x2dbar"


def test_space_is_escaped():
    assert unit_name_escape("my mount") == "my\\x20mount"


def test_leading_dot_is_escaped_only_at_start():
    assert unit_name_escape(".hidden") == "\\x2ehidden"
    assert unit_name_escape("a.b") == "a.b"


def test_unicode_is_escaped_per_utf8_byte():
    assert unit_name_escape("é") == "\\xc3\\xa9"


def test_non_ascii_digits_and_letters_are_escaped():
    # str.isalnum() would accept these; systemd does not
    assert unit_name_escape("ß") == "\\xc3\\x9f"
    assert unit_name_escape("٣") == "\\xd9\\xa3"


def test_empty_string():
    assert unit_name_escape("") == ""


def test_deterministic():
    text = "/home/user/My Files (2)/ünï"
    assert unit_name_escape(text) == unit_name_escape(text)


def test_output_has_only_unit_name_characters():
    escaped = unit_name_escape("/weird path/#1!$&*?[]")
    allowed = set(string.ascii_letters + string.digits + ":_.\\-")
    assert set(escaped) <= allowed
    assert "/" not in escaped


def test_template_with_escaped_absolute_path():
    assert template_unit("onedriver@.service", unit_name_escape("/mnt/x")) == "onedriver@-mnt-x.service"


def test_template_with_escaped_space():
    unit = template_unit("onedriver@.service", unit_name_escape("my mount"))
    assert "\\x20" in unit
    assert " " not in unit
