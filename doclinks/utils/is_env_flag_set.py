"""Boolean environment flag helper."""

import os

_TRUE_VALUES = {"1", "true", "yes"}


def is_env_flag_set(name: str) -> bool:
    """Return True when the variable is set to 1, true or yes (any case)."""
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES
