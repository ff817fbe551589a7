"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    Output structure:
    - errors / warnings: list[str]
    - skipped: bool - True when the run was bypassed by the environment flag
    - base_dir: str - directory links and files were resolved against
    - files_checked: int - number of markdown files discovered
    - links_found: int - number of links extracted
    - stats: dict - total/valid/broken/internal/external counts
    - groups: dict[str, list[dict]] - broken results per failure group
    - results: list[dict] - every ValidationResult, serialized, in output order
    - all_valid: bool - True when no result is broken
    - report: list[str] - human report lines (quiet/verbose applied)
    """

    skipped: bool = Field(..., description="True when BUILD_SKIP_LINK_CHECK bypassed the run")
    base_dir: str = Field(..., description="Base directory for resolution")
    files_checked: int = Field(..., description="Number of markdown files discovered")
    links_found: int = Field(..., description="Number of links extracted")
    stats: dict[str, int] = Field(..., description="Aggregate counts")
    groups: dict[str, list[dict[str, Any]]] = Field(..., description="Broken results by failure group")
    results: list[dict[str, Any]] = Field(..., description="Serialized validation results")
    all_valid: bool = Field(..., description="True when nothing is broken")
    report: list[str] = Field(..., description="Human-readable report lines")


class LinkExtractOutput(BaseOutputSchema):
    """Output schema for link extract command."""

    base_dir: str = Field(..., description="Base directory for discovery")
    files_checked: int = Field(..., description="Number of markdown files discovered")
    counts: dict[str, int] = Field(..., description="Link counts by classification")
    links: list[dict[str, Any]] = Field(..., description="Serialized extracted links")


register_output_schema("link", "check", LinkCheckOutput)
register_output_schema("link", "extract", LinkExtractOutput)
