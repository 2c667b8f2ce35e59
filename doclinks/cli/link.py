"""Link Typer app factory."""

import typer

from doclinks.api.link.cmd_check import cmd_check
from doclinks.api.link.cmd_scan import cmd_scan
from doclinks.cli._handle_stage_result import _extract_display_format, _handle_stage_result
from doclinks.cli._print_check_summary import _print_check_summary


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Find and verify external links in documentation",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        content_dir: str | None = typer.Argument(None, help="Documentation root (default: configured content_dir)"),
    ) -> None:
        """Check that every external link in the documentation is live."""
        _handle_stage_result(
            cmd_check,
            display_format=_extract_display_format(ctx),
            result_printer=_print_check_summary,
        )(content_dir=content_dir)

    @app.command(name="scan")
    def scan_cmd(
        ctx: typer.Context,
        content_dir: str | None = typer.Argument(None, help="Documentation root (default: configured content_dir)"),
    ) -> None:
        """List external links and their locations without checking them."""
        _handle_stage_result(cmd_scan, display_format=_extract_display_format(ctx))(content_dir=content_dir)

    return app
