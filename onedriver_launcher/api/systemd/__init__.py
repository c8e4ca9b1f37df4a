"""systemd helpers - unit name escaping, templating and unit state queries."""

from .MalformedTemplateError import MalformedTemplateError
from .ManagerUnreachableError import ManagerUnreachableError
from .SystemdManager import SystemdManager
from .UnitCommandError import UnitCommandError
from .UnitStatus import UnitStatus
from .template_unit import template_unit
from .unit_name_escape import unit_name_escape
from .unit_name_path_escape import unit_name_path_escape
from .unit_name_path_unescape import unit_name_path_unescape
from .unit_name_unescape import unit_name_unescape

__all__ = [
    "MalformedTemplateError",
    "ManagerUnreachableError",
    "SystemdManager",
    "UnitCommandError",
    "UnitStatus",
    "template_unit",
    "unit_name_escape",
    "unit_name_path_escape",
    "unit_name_path_unescape",
    "unit_name_unescape",
]
