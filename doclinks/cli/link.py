"""Link Typer app factory."""

import typer

from ..api.link.cmd_check import cmd_check
from ..api.link.cmd_extract import cmd_extract
from ..api.link.format_report import dump_results_json
from ._handle_stage_result import _handle_stage_result
from .display import CLIDisplay


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Check and list documentation links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        base_dir: str | None = typer.Option(None, "--base-dir", "-b", help="Root of the documentation tree"),
        pattern: str | None = typer.Option(None, "--pattern", "-p", help="Glob of files to check"),
        external: bool = typer.Option(False, "--external", "-e", help="Also request http(s) links"),
        timeout: int | None = typer.Option(None, "--timeout", "-t", help="External probe timeout (ms)"),
        concurrency: int | None = typer.Option(None, "--concurrency", "-c", help="Simultaneous external probes"),
        config_path: str | None = typer.Option(None, "--config", help="Path to a config file"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only list broken links"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Also list valid links"),
        as_json: bool = typer.Option(False, "--json", help="Print results as a JSON array"),
    ) -> None:
        """Check every link in the markdown files under the base directory."""
        display = CLIDisplay()
        suppress_output = quiet or as_json

        def report_printer(output: dict) -> None:
            # Stage 3 is skipped when suppressed, errors still go to stderr
            if suppress_output:
                for error in output.get("errors", []):
                    display.error(error)
            if as_json:
                print(dump_results_json(output["results"]))
            else:
                display.report(output["report"])

        _handle_stage_result(cmd_check, ctx, result_printer=report_printer, suppress_output=suppress_output)(
            base_dir=base_dir,
            pattern=pattern,
            external=external or None,
            timeout=timeout,
            concurrency=concurrency,
            config_path=config_path,
            quiet=quiet,
            verbose=verbose,
        )

    @app.command(name="extract")
    def extract_cmd(
        ctx: typer.Context,
        base_dir: str | None = typer.Option(None, "--base-dir", "-b", help="Root of the documentation tree"),
        pattern: str | None = typer.Option(None, "--pattern", "-p", help="Glob of files to scan"),
        config_path: str | None = typer.Option(None, "--config", help="Path to a config file"),
    ) -> None:
        """List links found in markdown files without validating them."""
        _handle_stage_result(cmd_extract, ctx)(base_dir=base_dir, pattern=pattern, config_path=config_path)

    return app
