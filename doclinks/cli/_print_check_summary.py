"""Plain-text report for ``link check``."""

import typer


def _print_check_summary(output: dict) -> None:
    """Counters on stdout; one block per failed URL on stderr."""
    typer.echo(f"Scanned files: {output['files_scanned']}")
    typer.echo(f"Extracted external links: {output['links_extracted']}")
    typer.echo(f"Unique links checked: {output['unique_links']}")
    typer.echo(f"Failed links: {output['failed_count']}")

    if output["errors"]:
        for error in output["errors"]:
            typer.echo(error, err=True)
        return

    if not output["failures"]:
        typer.echo("No failed external links found.")
        return

    typer.echo("\nFailed external links:\n", err=True)
    for item in output["failures"]:
        typer.echo(item["url"], err=True)
        typer.echo(f"  reason: {item['reason']}", err=True)
        for occurrence in item["occurrences"]:
            typer.echo(f"  at: {occurrence['file']}:{occurrence['line']}", err=True)
        typer.echo("", err=True)
