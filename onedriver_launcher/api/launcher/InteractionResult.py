"""Outcome of one "new mountpoint" interaction."""

from dataclasses import dataclass
from typing import Literal

from ..systemd.UnitStatus import UnitStatus

Outcome = Literal["ok", "cancelled", "busy", "invalid", "malformed-template", "unreachable", "failed"]


@dataclass
class InteractionResult:
    outcome: Outcome
    mountpoint: str | None = None
    unit_name: str | None = None
    status: UnitStatus | None = None
    """State of the unit as queried, before it was started."""

    message: str = ""
    started: bool = False
    """Whether the unit was started after the query."""

    @property
    def ok(self) -> bool:
        return self.outcome == "ok"
