"""Link check API function.

Discovers markdown files, extracts their links, validates them and reports.
Matches CLI: doclinks link check
"""

from collections.abc import Iterator
from pathlib import Path

from ...constants import SKIP_ENV_FLAG
from ...utils.is_env_flag_set import is_env_flag_set
from ...utils.logger import get_logger
from .._output_schemas.link import LinkCheckOutput
from ..config.ConfigError import ConfigError
from ..config.load_config import load_config
from ..StageResult import StageResult
from .extract_links import extract_links_from_files
from .find_markdown_files import find_markdown_files
from .format_report import format_report_lines
from .LinkReport import LinkReport, serialize_results
from .LinkValidator import validate_links

logger = get_logger("link.check")


def cmd_check(
    base_dir: str | None = None,
    pattern: str | None = None,
    external: bool | None = None,
    timeout: int | None = None,
    concurrency: int | None = None,
    config_path: str | None = None,
    quiet: bool = False,
    verbose: bool = False,
) -> StageResult:
    """Check every link in the markdown files under the base directory.

    Options left as None keep the configured value. ``pattern`` replaces the
    include globs.
    """

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        base: str = "",
        files_checked: int = 0,
        links_found: int = 0,
        report: LinkReport | None = None,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
        skipped: bool = False,
    ) -> None:
        report = report or LinkReport.from_results([])
        result_obj.output = LinkCheckOutput(
            errors=errors or [],
            warnings=warnings or [],
            skipped=skipped,
            base_dir=base,
            files_checked=files_checked,
            links_found=links_found,
            stats=report.stats.to_dict(),
            groups=report.groups_to_dict(),
            results=serialize_results(report.results),
            all_valid=success,
            report=format_report_lines(report, quiet=quiet, verbose=verbose) if files_checked else [],
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        if is_env_flag_set(SKIP_ENV_FLAG):
            message = f"Link check skipped ({SKIP_ENV_FLAG} is set)"
            logger.warning(message)
            _build_result(result_obj, True, message, warnings=[message], skipped=True)
            yield (1.0, "Complete")
            return

        yield (0.1, "Loading configuration...")
        try:
            loaded = load_config(config_path)
            config = loaded.config.with_overrides(
                base_dir=Path(base_dir).expanduser().resolve() if base_dir else None,
                include=[pattern] if pattern else None,
                check_external=external,
                timeout=timeout,
                concurrency=concurrency,
            )
        except (ConfigError, ValueError) as e:
            _build_result(result_obj, False, f"Invalid configuration: {e}", errors=[str(e)])
            yield (1.0, "Complete")
            return
        warnings = list(loaded.warnings)
        base = str(config.base_dir)

        yield (0.2, f"Finding markdown files in {base}...")
        files = find_markdown_files(config.base_dir, config.include, config.exclude)
        if not files:
            message = f"No markdown files found in {base}"
            logger.error(message)
            _build_result(result_obj, False, message, base=base, errors=[message], warnings=warnings)
            yield (1.0, "Complete")
            return

        yield (0.4, f"Extracting links from {len(files)} file(s)...")
        extraction_errors: list[str] = []
        links = extract_links_from_files(files, errors=extraction_errors)
        warnings.extend(extraction_errors)

        phase = "internal and external" if config.check_external else "internal"
        yield (0.6, f"Validating {len(links)} {phase} link(s)...")
        report = LinkReport.from_results(validate_links(links, config))

        yield (0.9, "Building report...")
        stats = report.stats
        logger.info(
            "Checked %d link(s) in %d file(s): %d valid, %d broken",
            stats.total,
            len(files),
            stats.valid,
            stats.broken,
        )
        if report.all_valid:
            message = f"All {stats.total} link(s) are valid"
        else:
            message = f"Found {stats.broken} broken link(s)"
        _build_result(
            result_obj,
            report.all_valid,
            message,
            base=base,
            files_checked=len(files),
            links_found=len(links),
            report=report,
            warnings=warnings,
        )
        yield (1.0, "Complete")

    return StageResult(
        announce="Checking documentation links...",
        progress_callback=do_work,
    )
