"""ownerscope coverage command - how much of the tree has owners."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape

from ownerscope.cli.utils import collect_files, load_workspace
from ownerscope.core.formatting import coverage_style, format_percentage
from ownerscope.core.progress import get_console, spinner, status
from ownerscope.index.coverage import compute_coverage


@click.command()
@click.option("--files", "-f", "files", multiple=True, help="Only check these paths")
@click.option(
    "--files-from",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Only check paths listed in a file, one per line",
)
@click.option("--stdin", "from_stdin", is_flag=True, help="Only check paths read from stdin")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def coverage_command(
    ctx: click.Context,
    files: tuple[str, ...],
    files_from: Path | None,
    from_stdin: bool,
    as_json: bool,
) -> None:
    """Report the share of files matched by at least one rule.

    Exits 1 when coverage is below the configured fail_under (100% by default).
    """
    workspace = load_workspace(ctx)
    requested = collect_files(files, files_from, from_stdin)

    with spinner("Scanning files"):
        index = workspace.build_index()
    report = compute_coverage(index, workspace.rules, requested or None)

    below_threshold = report.percentage < workspace.config.coverage.fail_under

    if as_json:
        click.echo(json.dumps(report.to_dict()))
    else:
        console = get_console()
        pct = format_percentage(report.percentage)
        console.print(
            f"[bold]Coverage:[/bold] [{coverage_style(report.percentage)}]{pct}[/] "
            f"([green]{report.owned}[/green]/{report.total} {report.mode} files have owners)"
        )

        if report.is_complete:
            console.print()
            status("All files have owners!", style="success")
        else:
            limit = workspace.config.coverage.unowned_display_limit
            console.print(
                f"\n[yellow]Files without owners[/yellow] ([red]{len(report.unowned)}[/red]):"
            )
            for path in report.unowned[:limit]:
                console.print(f"  [dim]{escape(path)}[/dim]")
            if len(report.unowned) > limit:
                console.print(f"  [dim]...and[/dim] {len(report.unowned) - limit} more")

    if below_threshold:
        ctx.exit(1)
