"""ownerscope check command - show who owns specific files."""

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.markup import escape

from ownerscope.cli.utils import collect_files, load_workspace
from ownerscope.core.progress import get_console
from ownerscope.rules.resolver import OwnershipResolver


@click.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--files-from",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Read paths from a file, one per line",
)
@click.option("--stdin", "from_stdin", is_flag=True, help="Read paths from stdin, one per line")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    files_from: Path | None,
    from_stdin: bool,
    as_json: bool,
) -> None:
    """Show the owning rule and owners for each PATH.

    PATHS are relative to the repository root. Exits 1 when a single path
    was given and no rule matches it.
    """
    files = collect_files(paths, files_from, from_stdin)
    if not files:
        raise click.ClickException("No files specified")

    workspace = load_workspace(ctx)
    resolver = OwnershipResolver(workspace.rules)

    if as_json:
        results = {}
        for path in files:
            rule = resolver.resolve(path)
            results[path] = {
                "rule": rule.raw_pattern if rule else None,
                "line": rule.line_number + 1 if rule else None,
                "owners": list(rule.owners) if rule else [],
            }
        click.echo(json.dumps(results))
        return

    console = get_console()
    any_unmatched = False
    for i, path in enumerate(files):
        if i > 0:
            console.print()
        console.print(f"[bold]File:[/bold] {escape(path)}")
        rule = resolver.resolve(path)
        if rule is None:
            any_unmatched = True
            console.print("[red]✗[/red] [yellow]No matching rule - file has no owners[/yellow]")
            continue
        console.print(
            f"[bold]Rule:[/bold] [cyan]{escape(rule.raw_pattern)}[/cyan] "
            f"[dim](line {rule.line_number + 1})[/dim]"
        )
        owners = " ".join(rule.owners) if rule.owners else "(none - explicitly unowned)"
        console.print(f"[bold]Owners:[/bold] [green]{escape(owners)}[/green]")

    # Multi-file runs report rather than fail; use lint or coverage to gate
    if len(files) == 1 and any_unmatched:
        ctx.exit(1)
