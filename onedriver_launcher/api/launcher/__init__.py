"""Launcher module - toolkit-independent handlers behind the launcher window."""

from .InteractionResult import InteractionResult
from .Launcher import Launcher
from .MountInfo import MountInfo

__all__ = ["InteractionResult", "Launcher", "MountInfo"]
