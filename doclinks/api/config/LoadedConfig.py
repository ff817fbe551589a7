"""Result of loading a configuration file."""

from dataclasses import dataclass, field
from pathlib import Path

from .LinkCheckConfig import LinkCheckConfig


@dataclass
class LoadedConfig:
    """Configuration plus where it came from and any fallback warnings."""

    config: LinkCheckConfig
    path: Path | None = None
    warnings: list[str] = field(default_factory=list)
