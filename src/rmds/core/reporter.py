"""Terminal output for a scan: progress lines, diagnostics and the prompt."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from rmds.models.scan_result import ScanResult
from rmds.utils import bytes_to_human, format_elapsed

log = logging.getLogger(__name__)


class Reporter:
    """Prints scan events to stdout and diagnostics to stderr.

    ``quiet`` silences everything except deletion failures and the
    interactive prompt. ``verbose`` adds per-directory and skip lines;
    quiet wins when both are set.
    """

    def __init__(self, *, quiet: bool = False, verbose: bool = False) -> None:
        self.quiet = quiet
        self.verbose = verbose and not quiet

    def banner(self, root: Path, label: str) -> None:
        if not self.quiet:
            click.echo(f"Scanning for {label} files in: {root}")

    def scanning(self, path: Path) -> None:
        if self.verbose:
            click.echo(f"Scanning: {path}")

    def skipped(self, path: Path, reason: str) -> None:
        if self.verbose:
            click.echo(f"{click.style('Skipping', fg='bright_black')} {reason}: {path}")

    def would_delete(self, path: Path) -> None:
        if not self.quiet:
            click.echo(f"{click.style('(dry-run) Would delete:', fg='yellow')} {path}")

    def deleted(self, path: Path) -> None:
        if not self.quiet:
            click.echo(f"{click.style('Deleted:', fg='green')} {path}")

    def warning(self, message: str) -> None:
        """Non-fatal traversal problem (unreadable directory, failed stat)."""
        if not self.quiet:
            click.echo(f"{click.style('Warning:', fg='yellow')} {message}", err=True)

    def delete_failed(self, path: Path, reason: str) -> None:
        # Shown even in quiet mode.
        click.echo(f"{click.style('Error deleting', fg='red')} {path}: {reason}", err=True)

    def confirm_delete(self, path: Path) -> bool:
        """Ask whether to delete *path*.

        Reads one whole line, so anything typed after the first character
        is discarded. Only an answer starting with ``y`` or ``Y`` confirms;
        end of input counts as "no".
        """
        click.echo(f"Delete {path}? [y/N] ", nl=False)
        answer = sys.stdin.readline()
        if not answer:
            click.echo()
            log.debug("End of input at prompt for %s, keeping file", path)
            return False
        return answer[:1] in ("y", "Y")

    def summary(self, result: ScanResult, *, dry_run: bool) -> None:
        if self.quiet:
            return
        if dry_run:
            count = len(result.would_delete)
            headline = (
                f"Dry run: {count:,} file{'s' if count != 1 else ''} matched "
                f"({bytes_to_human(result.matched_bytes)}), nothing removed"
            )
        else:
            count = len(result.deleted)
            headline = (
                f"Removed {count:,} file{'s' if count != 1 else ''}, "
                f"freed {click.style(bytes_to_human(result.freed_bytes), fg='green', bold=True)}"
            )
        errors = len(result.errors)
        click.echo(
            f"\n{headline} in {format_elapsed(result.elapsed)} "
            f"({result.dirs_scanned:,} directories, {result.skipped} skipped, "
            f"{errors} error{'s' if errors != 1 else ''})"
        )
