"""Link checker configuration."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _default_include() -> list[str]:
    return ["**/*.md", "**/*.mdx"]


def _default_exclude() -> list[str]:
    return ["**/node_modules/**", "**/dist/**", "**/.git/**"]


def _default_skip_domains() -> list[str]:
    return ["localhost", "127.0.0.1", "example.com"]


def _default_valid_extensions() -> list[str]:
    return [".md", ".mdx"]


class LinkCheckConfig(BaseModel):
    """Options threaded through extraction, validation and reporting.

    JSON files use camelCase keys (``baseDir``); attribute names are snake_case.
    Both spellings are accepted on input.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    base_dir: Path = Field(default_factory=Path.cwd, alias="baseDir", description="Root for '/'-style links")
    include: list[str] = Field(default_factory=_default_include, description="Globs of files to check")
    exclude: list[str] = Field(default_factory=_default_exclude, description="Globs of files to skip")
    check_external: bool = Field(False, alias="checkExternal", description="Probe http(s) links")
    timeout: int = Field(5000, gt=0, description="External probe timeout in milliseconds")
    concurrency: int = Field(10, ge=1, description="Maximum simultaneous external probes")
    skip_domains: list[str] = Field(
        default_factory=_default_skip_domains, alias="skipDomains", description="Hostname substrings never probed"
    )
    valid_extensions: list[str] = Field(
        default_factory=_default_valid_extensions,
        alias="validExtensions",
        description="Extensions tried, in order, for bare paths and index files",
    )
    static_dirs: list[Path] = Field(
        default_factory=list, alias="staticDirs", description="Directories searched first for '/'-style links"
    )

    @field_validator("valid_extensions")
    @classmethod
    def _validate_extensions(cls, value: list[str]) -> list[str]:
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.': {ext!r}")
        return value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000.0

    def resolved_static_dirs(self) -> list[Path]:
        """Static directories as absolute paths (relative entries hang off base_dir)."""
        return [d if d.is_absolute() else (self.base_dir / d).resolve() for d in self.static_dirs]

    def with_overrides(self, **overrides: Any) -> "LinkCheckConfig":
        """Return a validated copy with non-None overrides applied."""
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, as written in config files."""
        return self.model_dump(mode="json", by_alias=True)
