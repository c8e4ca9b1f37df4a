"""Service module - the onedriver template unit file."""

from .get_user_unit_dir import get_user_unit_dir
from .render_unit_template import render_unit_template

__all__ = ["get_user_unit_dir", "render_unit_template"]
