"""Aggregate validation results into counts and failure groups."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .ResultCategory import ResultCategory
from .ValidationResult import ValidationResult


class FailureGroup(str, Enum):
    NOT_FOUND = "not_found"
    BROKEN_ANCHOR = "broken_anchor"
    EXTERNAL_ERROR = "external_error"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    OTHER = "other"

    @property
    def title(self) -> str:
        return _GROUP_TITLES[self]


_GROUP_TITLES = {
    FailureGroup.NOT_FOUND: "Files Not Found",
    FailureGroup.BROKEN_ANCHOR: "Broken Anchors",
    FailureGroup.EXTERNAL_ERROR: "External Link Errors",
    FailureGroup.TIMEOUT: "Timeouts",
    FailureGroup.NETWORK_ERROR: "Network Errors",
    FailureGroup.OTHER: "Other Errors",
}

_GROUP_BY_CATEGORY = {
    ResultCategory.FILE_NOT_FOUND: FailureGroup.NOT_FOUND,
    ResultCategory.ANCHOR_NOT_FOUND: FailureGroup.BROKEN_ANCHOR,
    ResultCategory.HTTP_ERROR: FailureGroup.EXTERNAL_ERROR,
    ResultCategory.TIMEOUT: FailureGroup.TIMEOUT,
    ResultCategory.NETWORK_ERROR: FailureGroup.NETWORK_ERROR,
    ResultCategory.VALIDATION_ERROR: FailureGroup.OTHER,
}


@dataclass(frozen=True)
class ReportStats:
    total: int = 0
    valid: int = 0
    broken: int = 0
    internal: int = 0
    external: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "valid": self.valid,
            "broken": self.broken,
            "internal": self.internal,
            "external": self.external,
        }


def calculate_stats(results: Sequence[ValidationResult]) -> ReportStats:
    valid = sum(1 for r in results if r.is_valid)
    external = sum(1 for r in results if r.link.is_external)
    return ReportStats(
        total=len(results),
        valid=valid,
        broken=len(results) - valid,
        internal=len(results) - external,
        external=external,
    )


def group_by_failure(results: Sequence[ValidationResult]) -> dict[FailureGroup, list[ValidationResult]]:
    """Place every broken result in exactly one group; groups keep result order."""
    groups: dict[FailureGroup, list[ValidationResult]] = {group: [] for group in FailureGroup}
    for result in results:
        if not result.is_valid:
            groups[_GROUP_BY_CATEGORY[result.category]].append(result)
    return groups


def serialize_results(results: Sequence[ValidationResult]) -> list[dict[str, Any]]:
    """Machine-readable form of the full result list, order preserved."""
    return [result.to_dict() for result in results]


@dataclass
class LinkReport:
    """Counts, failure groups and the overall pass/fail signal for one run."""

    results: list[ValidationResult]
    stats: ReportStats = field(default_factory=ReportStats)
    groups: dict[FailureGroup, list[ValidationResult]] = field(default_factory=dict)

    @classmethod
    def from_results(cls, results: Sequence[ValidationResult]) -> "LinkReport":
        results = list(results)
        return cls(results=results, stats=calculate_stats(results), groups=group_by_failure(results))

    @property
    def all_valid(self) -> bool:
        return self.stats.broken == 0

    @property
    def broken(self) -> list[ValidationResult]:
        return [r for r in self.results if not r.is_valid]

    def groups_to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {group.value: serialize_results(items) for group, items in self.groups.items()}
