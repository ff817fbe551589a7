"""Load link checker configuration with fallback to defaults."""

import json
from pathlib import Path

from pydantic import ValidationError

from ...utils.logger import get_logger
from .ConfigError import ConfigError
from .find_config_file import find_config_file
from .LinkCheckConfig import LinkCheckConfig
from .LoadedConfig import LoadedConfig

logger = get_logger("config")


def _describe_validation_error(e: ValidationError) -> str:
    error_list = e.errors() or [{"msg": str(e), "loc": ()}]
    first = error_list[0]
    loc = first.get("loc", ())
    field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
    error_msg = first.get("msg", str(e))
    return f"{field}: {error_msg}" if field else error_msg


def _known_keys() -> set[str]:
    keys = set()
    for name, field in LinkCheckConfig.model_fields.items():
        keys.add(name)
        if field.alias:
            keys.add(field.alias)
    return keys


def load_config(config_path: str | Path | None = None, cwd: Path | None = None) -> LoadedConfig:
    """Load configuration from an explicit path or by discovery in cwd.

    A relative ``baseDir`` in the file is resolved against the file's directory;
    when the file names no ``baseDir`` the working directory is used.

    Unknown keys are dropped with a warning and the remaining settings apply.
    Malformed JSON or invalid values fall back to defaults with a warning.

    Raises:
        ConfigError: If an explicit config_path does not exist
    """
    cwd = (cwd or Path.cwd()).resolve()

    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_absolute():
            path = cwd / path
        if not path.is_file():
            raise ConfigError(f"Configuration file not found at {path}")
    else:
        path = find_config_file(cwd)

    if path is None:
        return LoadedConfig(config=LinkCheckConfig(baseDir=cwd))

    warnings: list[str] = []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ConfigError(f"expected a JSON object, got {type(raw).__name__}")
        base_dir = Path(raw.get("baseDir", raw.get("base_dir", cwd))).expanduser()
        if not base_dir.is_absolute():
            base_dir = path.parent / base_dir
        raw = {key: value for key, value in raw.items() if key not in ("baseDir", "base_dir")}
        unknown = sorted(key for key in raw if key not in _known_keys())
        if unknown:
            warnings.append(f"Unknown config key(s) ignored in {path}: {', '.join(unknown)}")
            raw = {key: value for key, value in raw.items() if key not in unknown}
        config = LinkCheckConfig(baseDir=base_dir.resolve(), **raw)
    except json.JSONDecodeError as e:
        message = f"Invalid JSON in config file {path}: {e}; using defaults"
    except ValidationError as e:
        message = f"Configuration validation error in {path}: {_describe_validation_error(e)}; using defaults"
    except (ConfigError, TypeError, OSError) as e:
        message = f"Cannot use config file {path}: {e}; using defaults"
    else:
        for warning in warnings:
            logger.warning(warning)
        logger.info("Loaded configuration from %s", path)
        return LoadedConfig(config=config, path=path, warnings=warnings)

    logger.warning(message)
    return LoadedConfig(config=LinkCheckConfig(baseDir=cwd), path=path, warnings=[message])
