"""Error for failed service manager queries."""


class ManagerUnreachableError(RuntimeError):
    """The service manager could not answer a query about ``unit``.

    Raised instead of returning False, so "not enabled" and "could not
    determine enablement" stay distinguishable.
    """

    def __init__(self, unit: str, reason: str):
        self.unit = unit
        self.reason = reason
        super().__init__(f"Could not query service manager about {unit}: {reason}")
