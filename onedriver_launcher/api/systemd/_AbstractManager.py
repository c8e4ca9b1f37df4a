"""Abstract base class for service manager backends."""

from abc import ABC, abstractmethod

from .UnitStatus import UnitStatus


class _AbstractManager(ABC):
    """Read and change the state of units.

    Queries raise ManagerUnreachableError when the manager cannot answer;
    they never fold that case into a False result.
    """

    @abstractmethod
    def is_active(self, unit: str) -> bool:
        """Whether ``unit``'s run state is exactly "active"."""
        pass

    @abstractmethod
    def is_enabled(self, unit: str) -> bool:
        """Whether ``unit`` is enabled (including enabled-runtime)."""
        pass

    @abstractmethod
    def set_active(self, unit: str, active: bool) -> None:
        """Start or stop ``unit``."""
        pass

    @abstractmethod
    def set_enabled(self, unit: str, enabled: bool) -> None:
        """Enable or disable ``unit``."""
        pass

    @abstractmethod
    def daemon_reload(self) -> None:
        """Make the manager re-read unit files."""
        pass

    def status(self, unit: str) -> UnitStatus:
        """Query both states of ``unit``."""
        return UnitStatus(active=self.is_active(unit), enabled=self.is_enabled(unit))
