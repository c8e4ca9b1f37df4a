"""Unit tests for onedriver_launcher.gui.dispatch.run_in_thread."""

import threading

import pytest

gi = pytest.importorskip("gi")
try:
    gi.require_version("Gtk", "3.0")
except ValueError:
    pytest.skip("GTK 3 introspection data not installed", allow_module_level=True)

from onedriver_launcher.gui import dispatch  # noqa: E402


@pytest.fixture
def idle_calls(monkeypatch):
    """Replace GLib.idle_add so callbacks run as soon as they are queued."""
    calls = []
    queued = threading.Event()

    def idle_add(callback, *args):
        calls.append(callback(*args))
        queued.set()
        return 1

    monkeypatch.setattr(dispatch.GLib, "idle_add", idle_add)
    return calls, queued


def test_result_is_delivered(idle_calls):
    calls, queued = idle_calls
    results = []

    dispatch.run_in_thread(lambda: 42, results.append)

    assert queued.wait(timeout=5)
    assert results == [42]
    assert calls == [False]


def test_exception_goes_to_on_error(idle_calls):
    _calls, queued = idle_calls
    results, errors = [], []

    def work():
        raise RuntimeError("boom")

    dispatch.run_in_thread(work, results.append, on_error=errors.append)

    assert queued.wait(timeout=5)
    assert results == []
    assert str(errors[0]) == "boom"
