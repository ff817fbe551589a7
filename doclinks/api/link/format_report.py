"""Line-oriented rendering of a LinkReport."""

import json
from collections.abc import Sequence

from .ExtractedLink import ExtractedLink
from .LinkReport import LinkReport, serialize_results
from .ValidationResult import ValidationResult


def format_link_location(link: ExtractedLink) -> str:
    """Format a link location as ``file:line``."""
    return link.location


def format_broken_line(result: ValidationResult) -> str:
    return f"{format_link_location(result.link)} - {result.link.url} - {result.error}"


def format_report_lines(report: LinkReport, quiet: bool = False, verbose: bool = False) -> list[str]:
    """Render a report as plain text lines.

    Args:
        report: Report to render
        quiet: Only one ``file:line - url - error`` line per broken link
        verbose: Also list valid links

    Returns:
        Lines without trailing newlines
    """
    if quiet:
        return [format_broken_line(result) for result in report.broken]

    lines = ["Link Validation Results"]

    for group, items in report.groups.items():
        if not items:
            continue
        lines.extend(["", f"✗ {group.title} ({len(items)}):"])
        for result in items:
            lines.append(f"  {format_link_location(result.link)} {result.link.url}")
            lines.append(f"    {result.error}")

    if verbose:
        valid = [r for r in report.results if r.is_valid]
        lines.extend(["", f"✓ Valid Links ({len(valid)}):"])
        for result in valid:
            suffix = " (skipped)" if result.status_code == 0 else ""
            lines.append(f"  {format_link_location(result.link)} ✓ {result.link.url}{suffix}")

    stats = report.stats
    lines.extend(
        [
            "",
            "Summary:",
            f"  Total links:     {stats.total}",
            f"  Valid:           {stats.valid}",
            f"  Broken:          {stats.broken}",
            f"  Internal:        {stats.internal}",
            f"  External:        {stats.external}",
            "",
        ]
    )

    if report.all_valid:
        lines.append("All links are valid!")
    else:
        lines.append(f"Found {stats.broken} broken link(s)")
    return lines


def dump_results_json(serialized: list[dict], indent: int = 2) -> str:
    """Dump already-serialized results as the ``--json`` array."""
    return json.dumps(serialized, indent=indent, ensure_ascii=False)


def format_results_json(results: Sequence[ValidationResult], indent: int = 2) -> str:
    return dump_results_json(serialize_results(results), indent=indent)
