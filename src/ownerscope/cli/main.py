"""ownerscope CLI - CODEOWNERS resolution, coverage and lint."""

from pathlib import Path

import click

from ownerscope import __version__
from ownerscope.cli.check import check_command
from ownerscope.cli.coverage import coverage_command
from ownerscope.cli.lint import lint_command
from ownerscope.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="ownerscope")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Where to start looking for CODEOWNERS (default: current directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, root: Path | None) -> None:
    """ownerscope - who owns what, according to CODEOWNERS."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["start"] = root or Path.cwd()
    configure_logging(level="DEBUG" if verbose else "WARNING")
    set_run_id()


cli.add_command(check_command, name="check")
cli.add_command(coverage_command, name="coverage")
cli.add_command(lint_command, name="lint")


if __name__ == "__main__":
    cli()
