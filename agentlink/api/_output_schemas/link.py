"""Output schemas for link commands.

Every per-target entry carries the same keys regardless of command:
name, path, status, message, backup, link_to.
"""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkInstallOutput(BaseOutputSchema):
    """Output schema for link install command.

    Output structure:
    - errors: list[str] - one entry per failed target (or the source error)
    - warnings: list[str] - one entry per backed-up file
    - source: str - resolved source path, or the path as given when it was not found
    - targets: list[dict] - per-target results, in target order
    - linked: int - number of targets now linked to source
    - failed: int - number of targets that could not be linked
    """

    source: str = Field(..., description="Resolved absolute source path")
    targets: list[dict[str, Any]] = Field(..., description="Per-target install results")
    linked: int = Field(..., description="Number of targets linked successfully")
    failed: int = Field(..., description="Number of targets that failed")


class LinkUninstallOutput(BaseOutputSchema):
    """Output schema for link uninstall command."""

    targets: list[dict[str, Any]] = Field(..., description="Per-target uninstall results")
    removed: int = Field(..., description="Number of symlinks removed")


class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command."""

    source: str = Field(..., description="Source compared against, empty string if none given")
    targets: list[dict[str, Any]] = Field(..., description="Per-target observed state")
    installed: bool = Field(..., description="True when every target is a working link (to source, if given)")


register_output_schema("link", "install", LinkInstallOutput)
register_output_schema("link", "uninstall", LinkUninstallOutput)
register_output_schema("link", "status", LinkStatusOutput)
