"""Run blocking work off the GTK main loop."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from gi.repository import GLib

logger = logging.getLogger(__name__)


def run_in_thread(
    work: Callable[[], Any],
    done: Callable[[Any], None],
    on_error: Callable[[Exception], None] | None = None,
) -> None:
    """Run ``work`` on a worker thread, then ``done(result)`` on the main loop.

    If ``work`` raises, the exception is logged and handed to ``on_error``
    on the main loop instead.
    """
    def _call(callback: Callable[[Any], None], value: Any) -> bool:
        callback(value)
        return False  # remove the idle source

    def _worker() -> None:
        try:
            result = work()
        except Exception as e:
            logger.exception("Background task failed")
            if on_error is not None:
                GLib.idle_add(_call, on_error, e)
            return
        GLib.idle_add(_call, done, result)

    threading.Thread(target=_worker, daemon=True).start()
