"""Depth-first traversal that finds and removes target files."""

from __future__ import annotations

import logging
import os
import stat
import time
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterable

from rmds.core.reporter import Reporter
from rmds.models.options import ScanOptions
from rmds.models.scan_result import FileEntry, ScanResult
from rmds.utils import describe_os_error

log = logging.getLogger(__name__)

ConfirmCallback = Callable[[Path], bool]


class Traverser:
    """Walks scan roots and removes entries matching the target predicate.

    Args:
        options: Scan policy. ``root_device_id`` is filled in per root by
            :meth:`run`; pass it explicitly when calling :meth:`scan` directly.
        reporter: Output sink. Defaults to a :class:`Reporter` honouring
            the quiet/verbose flags in *options*.
        confirm: Called once per match in interactive mode; returning False
            keeps the file. Defaults to the reporter's terminal prompt.
    """

    def __init__(
        self,
        options: ScanOptions,
        reporter: Reporter | None = None,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        self.options = options
        self.reporter = reporter or Reporter(quiet=options.quiet, verbose=options.verbose)
        self._confirm = confirm or self.reporter.confirm_delete
        self.result = ScanResult()

    def run(self, roots: Iterable[Path | str]) -> ScanResult:
        """Scan every root in turn and return the accumulated result.

        A root that cannot be stat'ed is reported and skipped; the
        remaining roots are still processed. Each call starts a fresh
        result.
        """
        self.result = ScanResult()
        started = time.monotonic()
        for root in roots:
            root = Path(root)
            try:
                device_id = os.stat(root).st_dev
            except OSError as exc:
                self._warn(f"Cannot access {root}: {describe_os_error(exc)}")
                continue

            options = replace(self.options, root_device_id=device_id)
            log.debug("Root %s is on device %d", root, device_id)
            self.reporter.banner(root, options.target_label)
            self.scan(root, options, 0)

        self.result.elapsed = time.monotonic() - started
        return self.result

    def scan(self, path: Path, options: ScanOptions, depth: int = 0) -> None:
        """Process *path* and everything below it, depth-first, pre-order.

        Uses an explicit stack so tree depth is not bounded by the
        interpreter's recursion limit. Each listing is closed before its
        subdirectories are visited.
        """
        stack: list[tuple[Path, int]] = [(Path(path), depth)]
        while stack:
            current, level = stack.pop()
            subdirs = self._scan_directory(current, options, level)
            stack.extend((child, level + 1) for child in reversed(subdirs))

    def _scan_directory(self, path: Path, options: ScanOptions, depth: int) -> list[Path]:
        """List one directory, handle its matching files, return subdirectories to visit."""
        if options.depth_exceeded(depth):
            log.debug("Depth limit %d reached, not descending into %s", options.max_depth, path)
            return []

        try:
            listing = os.scandir(path)
        except PermissionError:
            self._warn(f"Permission denied, cannot open directory: {path}")
            return []
        except OSError as exc:
            self._warn(f"Cannot open directory {path}: {describe_os_error(exc)}")
            return []

        self.result.dirs_scanned += 1
        self.reporter.scanning(path)

        subdirs: list[Path] = []
        with listing:
            for entry in listing:
                child = Path(entry.path)
                try:
                    st = entry.stat(follow_symlinks=False)
                except OSError as exc:
                    self._warn(f"Cannot stat {child}: {describe_os_error(exc)}")
                    continue

                if stat.S_ISDIR(st.st_mode):
                    if self._should_descend(child, st, options):
                        subdirs.append(child)
                elif options.matches(entry.name):
                    self._remove(FileEntry(path=child, size_bytes=st.st_size), options)
        return subdirs

    def _should_descend(self, path: Path, st: os.stat_result, options: ScanOptions) -> bool:
        if options.is_excluded(path.name):
            self.result.skipped += 1
            self.reporter.skipped(path, "excluded directory")
            return False
        if options.crosses_device(st.st_dev):
            self.result.skipped += 1
            log.debug("%s is on device %d, root is on %s", path, st.st_dev, options.root_device_id)
            self.reporter.skipped(path, "directory on another filesystem")
            return False
        return True

    def _remove(self, entry: FileEntry, options: ScanOptions) -> None:
        if options.interactive and not self._confirm(entry.path):
            self.result.skipped += 1
            self.reporter.skipped(entry.path, "(declined)")
            return

        if options.dry_run:
            self.result.would_delete.append(entry)
            self.reporter.would_delete(entry.path)
            return

        try:
            entry.path.unlink()
        except OSError as exc:
            reason = describe_os_error(exc)
            self.result.errors.append(f"{entry.path}: {reason}")
            self.reporter.delete_failed(entry.path, reason)
            return

        self.result.deleted.append(entry)
        self.reporter.deleted(entry.path)

    def _warn(self, message: str) -> None:
        self.result.errors.append(message)
        self.reporter.warning(message)
