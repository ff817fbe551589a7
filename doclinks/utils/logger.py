import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified doclinks logging.

    Args:
        home: Path to doclinks home directory. If None, derived from environment.
        level: Level for the ``doclinks`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "doclinks.log"

    root_logger = logging.getLogger("doclinks")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers so the next get_logger() call configures again."""
    global _CONFIGURED
    root_logger = logging.getLogger("doclinks")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"doclinks.{name}")
