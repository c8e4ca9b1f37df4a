"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ..display.cli import CLIDisplay
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (STDERR)
    2. Progress (STDERR)
    3. Result (STDERR)
    4. Output (STDOUT as JSON, or through ``result_printer``)

    The wrapped function raises ``typer.Exit`` with 0 on success, 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), result_printer)

    return wrapper  # type: ignore[return-value]
