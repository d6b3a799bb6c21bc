"""Scan result dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class FileEntry:
    """Single matched file."""

    path: Path
    size_bytes: int


@dataclass(slots=True)
class ScanResult:
    """Accumulated outcome of a traversal across all roots.

    ``skipped`` counts declined prompts as well as directories that were
    pruned by ``--exclude`` or ``--one-file-system``.
    """

    deleted: list[FileEntry] = field(default_factory=list)
    would_delete: list[FileEntry] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    skipped: int = 0
    dirs_scanned: int = 0
    elapsed: float = 0.0

    @property
    def freed_bytes(self) -> int:
        return sum(e.size_bytes for e in self.deleted)

    @property
    def matched_bytes(self) -> int:
        """Bytes a real run would have freed (dry-run only)."""
        return sum(e.size_bytes for e in self.would_delete)
