"""Unit status DTO."""

from dataclasses import dataclass

from ...constants import ACTIVE_TEXT, DISABLED_TEXT, ENABLED_TEXT, INACTIVE_TEXT


@dataclass(frozen=True)
class UnitStatus:
    """Active and enabled state of one unit, computed fresh per query."""

    active: bool
    """Whether the unit is currently running."""

    enabled: bool
    """Whether the unit starts automatically on login."""

    @property
    def active_text(self) -> str:
        return ACTIVE_TEXT if self.active else INACTIVE_TEXT

    @property
    def enabled_text(self) -> str:
        return ENABLED_TEXT if self.enabled else DISABLED_TEXT
