"""Link extract API function.

Lists the links found in markdown files without validating them.
Matches CLI: doclinks link extract
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkExtractOutput
from ..config.ConfigError import ConfigError
from ..config.load_config import load_config
from ..StageResult import StageResult
from .classify_link import group_links_by_type
from .extract_links import extract_links_from_files
from .find_markdown_files import find_markdown_files


def cmd_extract(
    base_dir: str | None = None,
    pattern: str | None = None,
    config_path: str | None = None,
) -> StageResult:
    """Extract and classify links from the markdown files under the base directory."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.2, "Loading configuration...")
        try:
            loaded = load_config(config_path)
            config = loaded.config.with_overrides(
                base_dir=Path(base_dir).expanduser().resolve() if base_dir else None,
                include=[pattern] if pattern else None,
            )
        except (ConfigError, ValueError) as e:
            result_obj.output = LinkExtractOutput(
                errors=[str(e)], warnings=[], base_dir="", files_checked=0, counts={}, links=[]
            ).model_dump(mode="python")
            result_obj.result = f"Invalid configuration: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.4, "Finding markdown files...")
        files = find_markdown_files(config.base_dir, config.include, config.exclude)

        yield (0.7, f"Extracting links from {len(files)} file(s)...")
        errors: list[str] = []
        links = extract_links_from_files(files, errors=errors)
        groups = group_links_by_type(links)

        yield (1.0, "Complete")
        result_obj.output = LinkExtractOutput(
            errors=[],
            warnings=loaded.warnings + errors,
            base_dir=str(config.base_dir),
            files_checked=len(files),
            counts={"total": len(links), **{name: len(items) for name, items in groups.items()}},
            links=[link.to_dict() for link in links],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} link(s) in {len(files)} file(s)"
        result_obj.success = bool(files)
        if not files:
            result_obj.result = f"No markdown files found in {config.base_dir}"
            result_obj.output["errors"] = [result_obj.result]

    return StageResult(
        announce="Extracting documentation links...",
        progress_callback=do_work,
    )
