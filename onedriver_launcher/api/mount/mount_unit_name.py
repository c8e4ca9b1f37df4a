"""Derive the systemd unit for a mountpoint."""

from ..systemd.template_unit import template_unit
from ..systemd.unit_name_path_escape import unit_name_path_escape


def mount_unit_name(mountpoint: str, template: str) -> str:
    """Path-escape ``mountpoint`` and instantiate ``template`` with it.

    Examples:
        >>> mount_unit_name("/home/user/OneDrive", "onedriver@.service")
        'onedriver@home-user-OneDrive.service'

    Raises:
        MalformedTemplateError: If ``template`` has no usable instance slot
    """
    return template_unit(template, unit_name_path_escape(mountpoint))
