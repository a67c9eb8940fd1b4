"""ownerscope lint command - find dead and suspicious rules."""

from __future__ import annotations

import json

import click
from rich.markup import escape

from ownerscope.cli.utils import load_workspace
from ownerscope.core.formatting import pluralize
from ownerscope.core.progress import get_console, spinner, status
from ownerscope.lint.checks import lint_rules
from ownerscope.lint.models import Severity

_SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
    Severity.HINT: "dim",
}


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors")
@click.option(
    "--no-files",
    "skip_files",
    is_flag=True,
    help="Skip the scan for patterns that match no files",
)
@click.pass_context
def lint_command(ctx: click.Context, as_json: bool, strict: bool, skip_files: bool) -> None:
    """Check the CODEOWNERS file for dead rules and other problems."""
    workspace = load_workspace(ctx)

    index = None
    if not skip_files:
        with spinner("Scanning files"):
            index = workspace.build_index()

    result = lint_rules(workspace.rules, path=workspace.display_path(), index=index)
    failed = result.failed(strict=strict or workspace.config.lint.strict)

    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        console = get_console()
        for diag in result.diagnostics:
            style = _SEVERITY_STYLES[diag.severity]
            console.print(
                f"{escape(result.path)}:{diag.line + 1}:{diag.column + 1}: "
                f"[{style}]{diag.severity.value}[/{style}] "
                f"[dim]{diag.code}[/dim] {escape(diag.message)}"
            )
        if not result.diagnostics:
            checked = pluralize(result.rules_checked, "rule")
            status(f"{checked} checked, no problems", style="success")
        else:
            console.print(
                f"\n{pluralize(result.error_count, 'error')}, "
                f"{pluralize(result.warning_count, 'warning')} "
                f"in {pluralize(result.rules_checked, 'rule')}"
            )

    if failed:
        ctx.exit(1)
