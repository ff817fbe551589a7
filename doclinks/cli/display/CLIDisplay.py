"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from ...constants import DEFAULT_TIMESTAMP_FORMAT
from ...utils.display.Display import Display


class CLIDisplay(Display):
    """CLI display using Rich library.

    Status chatter goes to stderr; reports and structured output go to stdout.
    """

    def __init__(self):
        self.console = Console(file=sys.stdout, highlight=False, soft_wrap=True)
        self.stderr_console = Console(file=sys.stderr, highlight=False, soft_wrap=True)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def report(self, lines: list[str], **kwargs) -> None:
        console = self.stderr_console if kwargs.get("err") else self.console
        for line in lines:
            console.print(line, markup=False)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            print(text, end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False), file=sys.stdout)
