"""CLI interface for rmds."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from rmds.core.traverser import Traverser
from rmds.models.options import DS_STORE, UNLIMITED_DEPTH, ScanOptions
from rmds.utils import default_root

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int, quiet: bool) -> None:
    level = logging.WARNING
    if quiet:
        level = logging.ERROR
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _validate_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value or os.sep in value or (os.altsep and os.altsep in value):
        raise click.BadParameter("must be a bare file name")
    return value


class RmdsCommand(click.Command):
    """Command that exits with status 1 on usage errors instead of click's 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.command(
    cls=RmdsCommand,
    context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "RMDS"},
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
@click.option("--clean-all", "-A", is_flag=True, help="Also remove AppleDouble files (._*)")
@click.option("--dry-run", "-n", is_flag=True, help="Show what would be deleted without deleting")
@click.option("--quiet", "-q", is_flag=True, help="Only report deletion errors")
@click.option("--verbose", "-v", count=True, help="Report every directory scanned (-vv adds debug logging)")
@click.option("--interactive", "-i", is_flag=True, help="Ask before deleting each file")
@click.option(
    "--max-depth",
    "-d",
    type=click.IntRange(min=UNLIMITED_DEPTH),
    default=UNLIMITED_DEPTH,
    show_default=True,
    metavar="N",
    help="Do not descend more than N levels below each path (-1 = unlimited)",
)
@click.option("--one-file-system", "-x", is_flag=True, help="Stay on the filesystem of each starting path")
@click.option("--exclude", "-e", multiple=True, metavar="DIR", help="Skip directories with this name (repeatable)")
@click.option(
    "--name",
    "-m",
    default=DS_STORE,
    show_default=True,
    callback=_validate_name,
    help="File name to delete",
)
def main(
    paths: tuple[Path, ...],
    clean_all: bool,
    dry_run: bool,
    quiet: bool,
    verbose: int,
    interactive: bool,
    max_depth: int,
    one_file_system: bool,
    exclude: tuple[str, ...],
    name: str,
) -> None:
    """Recursively remove .DS_Store files under PATHS (default: $HOME)."""
    _setup_logging(verbose, quiet)

    roots = list(paths)
    if not roots:
        home = default_root()
        if home is None:
            click.echo("Could not determine starting path.", err=True)
            sys.exit(1)
        roots = [home]

    options = ScanOptions(
        dry_run=dry_run,
        quiet=quiet,
        verbose=verbose > 0,
        interactive=interactive,
        max_depth=max_depth,
        one_file_system=one_file_system,
        excluded_names=frozenset(exclude),
        target_name=name,
        clean_all=clean_all,
    )
    log.debug("Scanning %s with %s", ", ".join(str(r) for r in roots), options)

    traverser = Traverser(options)
    result = traverser.run(roots)
    traverser.reporter.summary(result, dry_run=dry_run)
