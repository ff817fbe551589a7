"""Error raised when an internal link target cannot be found."""

from pathlib import Path


class LinkResolutionError(ValueError):
    """No file matched a link after extension and index fallbacks."""

    def __init__(self, attempted_path: Path):
        self.attempted_path = attempted_path
        super().__init__(f"File not found: {attempted_path}")
