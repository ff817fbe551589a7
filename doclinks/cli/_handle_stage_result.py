"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _get_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the main callback.

    Walks the Typer context chain; defaults to yaml when no context holds it.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return "yaml"


def _handle_stage_result(
    func: F,
    ctx: typer.Context | None = None,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, yaml/json or the command's own printer)

    Args:
        func: Function that returns StageResult
        ctx: Context of the invoking Typer command, carries ``--display``
        result_printer: Renders the output dict instead of the yaml/json dump
        suppress_output: Skip stages 1-3

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display import CLIDisplay

        display = CLIDisplay()
        display_format = _get_display_format(ctx)
        _run_single_execution(func, args, kwargs, display, display_format, result_printer, suppress_output)

    return wrapper  # type: ignore[return-value]
