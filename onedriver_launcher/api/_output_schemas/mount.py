"""Output schemas for mount commands.

``active`` and ``enabled`` only ever hold a word from the fixed display
vocabulary ("active"/"off", "enabled"/"disabled"), or an empty string when
the state could not be determined.
"""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MountStatusOutput(BaseOutputSchema):
    """Output schema for mount status command."""
    mountpoint: str = Field(..., description="Absolute mountpoint path")
    unit_name: str = Field(..., description="Instantiated systemd unit, empty string if it could not be built")
    active: str = Field(..., description="'active' or 'off', empty string if unknown")
    enabled: str = Field(..., description="'enabled' or 'disabled', empty string if unknown")


class MountActionOutput(BaseOutputSchema):
    """Output schema for mount start/stop/enable/disable commands."""
    mountpoint: str = Field(..., description="Absolute mountpoint path")
    unit_name: str = Field(..., description="Instantiated systemd unit, empty string if it could not be built")
    action: str = Field(..., description="systemctl verb that was run")
    changed: bool = Field(..., description="Whether the service manager accepted the change")


class MountListOutput(BaseOutputSchema):
    """Output schema for mount list command.

    Each entry has mountpoint, unit_name, account, active and enabled keys.
    """
    cache_dir: str = Field(..., description="Directory scanned for known mountpoints")
    mounts: list[dict[str, Any]] = Field(..., description="Known mountpoints")


class MountUnitNameOutput(BaseOutputSchema):
    """Output schema for mount unit-name command."""
    mountpoint: str = Field(..., description="Absolute mountpoint path")
    escaped: str = Field(..., description="Path-escaped instance argument")
    unit_name: str = Field(..., description="Instantiated systemd unit, empty string if it could not be built")


register_output_schema("mount", "status", MountStatusOutput)
register_output_schema("mount", "start", MountActionOutput)
register_output_schema("mount", "stop", MountActionOutput)
register_output_schema("mount", "enable", MountActionOutput)
register_output_schema("mount", "disable", MountActionOutput)
register_output_schema("mount", "list", MountListOutput)
register_output_schema("mount", "unit_name", MountUnitNameOutput)
