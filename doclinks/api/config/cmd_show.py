"""Show configuration command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ConfigError import ConfigError
from .load_config import load_config


def cmd_show(config_path: str | None = None) -> StageResult:
    """Show the effective configuration and the file it was loaded from.

    Args:
        config_path: Explicit config file. Discovered in the working directory when None.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        try:
            loaded = load_config(config_path)
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], config_path=str(config_path), content={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        source = str(loaded.path) if loaded.path else ""
        result_obj.result = f"Configuration from {source}" if source else "Default configuration (no config file found)"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=loaded.warnings,
            config_path=source,
            content=loaded.config.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
