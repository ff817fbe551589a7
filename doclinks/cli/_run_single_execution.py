"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

from rich.markup import escape

from ..api.validate_output import validate_output

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> None:
    """Run command once and display result.

    Commands must handle all expected failures internally and report them
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not suppress_output:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if not suppress_output:
            display.info(f"[dim]Progress: {escape(message)} ({progress_percent:.0%})[/dim]")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if not suppress_output:
        for warning in result.output.get("warnings", []):
            display.warning(warning)
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output)
    elif not suppress_output:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
