"""Link API domain: extraction, resolution, validation and reporting."""

from .._output_schemas.link import LinkCheckOutput, LinkExtractOutput
from .classify_link import classify_link, group_links_by_type
from .ExtractedLink import ExtractedLink
from .LinkKind import LinkKind
from .ResultCategory import ResultCategory
from .ValidationResult import ValidationResult

__all__ = [
    "ExtractedLink",
    "LinkCheckOutput",
    "LinkExtractOutput",
    "LinkKind",
    "ResultCategory",
    "ValidationResult",
    "classify_link",
    "group_links_by_type",
]
