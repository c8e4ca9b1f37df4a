"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceInstallTemplateOutput(BaseOutputSchema):
    """Output schema for service install-template command."""
    unit_path: str = Field(..., description="Path of the template unit file")
    installed: bool = Field(..., description="Whether the file was written by this call")


register_output_schema("service", "install_template", ServiceInstallTemplateOutput)
