"""Scan options and the target-name predicate."""

from __future__ import annotations

from dataclasses import dataclass

DS_STORE = ".DS_Store"
APPLEDOUBLE_PREFIX = "._"
UNLIMITED_DEPTH = -1


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Policy for one traversal.

    ``root_device_id`` is left unset by the CLI and bound per scan root by
    ``Traverser.run`` through ``dataclasses.replace``.
    """

    dry_run: bool = False
    quiet: bool = False
    verbose: bool = False
    interactive: bool = False
    max_depth: int = UNLIMITED_DEPTH
    one_file_system: bool = False
    root_device_id: int | None = None
    excluded_names: frozenset[str] = frozenset()
    target_name: str = DS_STORE
    clean_all: bool = False

    def matches(self, name: str) -> bool:
        """Whether a non-directory entry called *name* should be removed."""
        if name == self.target_name:
            return True
        if self.clean_all:
            return name == DS_STORE or name.startswith(APPLEDOUBLE_PREFIX)
        return False

    def depth_exceeded(self, depth: int) -> bool:
        return self.max_depth != UNLIMITED_DEPTH and depth > self.max_depth

    def is_excluded(self, name: str) -> bool:
        return name in self.excluded_names

    def crosses_device(self, device_id: int) -> bool:
        """True when one-file-system is on and *device_id* is not the root's."""
        if not self.one_file_system or self.root_device_id is None:
            return False
        return device_id != self.root_device_id

    @property
    def target_label(self) -> str:
        """Human-readable description of what is being removed, e.g. '.DS_Store'."""
        if not self.clean_all:
            return self.target_name
        labels = [self.target_name]
        if self.target_name != DS_STORE:
            labels.append(DS_STORE)
        labels.append(f"{APPLEDOUBLE_PREFIX}*")
        return ", ".join(labels[:-1]) + f" and {labels[-1]}"
