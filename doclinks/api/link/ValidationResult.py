"""Validation result dataclass."""

from dataclasses import dataclass
from typing import Any

from .ExtractedLink import ExtractedLink
from .ResultCategory import ResultCategory


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking one ExtractedLink. Immutable once created.

    ``error`` is set exactly when the result is broken. ``status_code`` is only
    set for external checks (0 means the domain was skipped). ``redirect_url``
    is only set when a redirect changed the final URL.
    """

    link: ExtractedLink
    category: ResultCategory
    error: str | None = None
    status_code: int | None = None
    redirect_url: str | None = None

    def __post_init__(self):
        if self.category.is_valid and self.error is not None:
            raise ValueError(f"valid result ({self.category.value}) cannot carry an error")
        if not self.category.is_valid and not self.error:
            raise ValueError(f"broken result ({self.category.value}) requires an error")

    @property
    def is_valid(self) -> bool:
        return self.category.is_valid

    def to_dict(self) -> dict[str, Any]:
        return {
            "link": self.link.to_dict(),
            "isValid": self.is_valid,
            "category": self.category.value,
            "error": self.error,
            "statusCode": self.status_code,
            "redirectUrl": self.redirect_url,
        }
