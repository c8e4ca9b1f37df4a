"""Error for rejected unit state changes."""


class UnitCommandError(RuntimeError):
    """systemctl ran but refused ``action`` on ``unit``."""

    def __init__(self, unit: str, action: str, reason: str):
        self.unit = unit
        self.action = action
        self.reason = reason
        super().__init__(f"systemctl {action} {unit} failed: {reason}")
