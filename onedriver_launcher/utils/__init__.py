"""Launcher utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .canonicalize_path import canonicalize_path
from .get_launcher_home import get_launcher_home
from .get_logger import get_logger
from .get_package_version import get_package_version

__all__ = [
    "canonicalize_path",
    "get_launcher_home",
    "get_logger",
    "get_package_version",
]
