"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages (e.g. config fallback)
    - config_path: str - path of the config file in use, empty string when defaults apply
    - content: dict[str, Any] - effective configuration, camelCase keys
    """

    config_path: str = Field(..., description="Config file in use, empty string when defaults apply")
    content: dict[str, Any] = Field(..., description="Effective configuration (camelCase keys)")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
