"""Tag describing how a link validation ended."""

from enum import Enum


class ResultCategory(str, Enum):
    INTERNAL_VALID = "internal_valid"
    FILE_NOT_FOUND = "file_not_found"
    ANCHOR_NOT_FOUND = "anchor_not_found"
    EXTERNAL_VALID = "external_valid"
    EXTERNAL_SKIPPED = "external_skipped"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    NETWORK_ERROR = "network_error"
    VALIDATION_ERROR = "validation_error"

    @property
    def is_valid(self) -> bool:
        return self in _VALID_CATEGORIES


_VALID_CATEGORIES = frozenset(
    {ResultCategory.INTERNAL_VALID, ResultCategory.EXTERNAL_VALID, ResultCategory.EXTERNAL_SKIPPED}
)
