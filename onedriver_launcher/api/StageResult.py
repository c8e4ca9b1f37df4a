"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    1. announce - printed before any work starts
    2. progress_callback - generator doing the work, yielding (fraction, message)
    3. result - one-line summary set by the callback
    4. output - structured dict set by the callback, validated against a schema
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
