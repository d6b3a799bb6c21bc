"""Shared utility functions."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)


def default_root() -> Path | None:
    """Return $HOME as the default scan root, or None if it is unset or empty."""
    home = os.environ.get("HOME")
    if not home:
        log.debug("HOME is not set; no default scan root")
        return None
    return Path(home)


def describe_os_error(exc: OSError) -> str:
    """Short reason for an OSError, e.g. 'Permission denied'."""
    return exc.strerror or str(exc)


_SIZE_UNITS = ("KB", "MB", "GB", "TB")


def bytes_to_human(size_bytes: int) -> str:
    """Render a byte count for the summary line, e.g. '512 B' or '2.0 KB'."""
    sign = "-" if size_bytes < 0 else ""
    value = float(abs(size_bytes))
    if value < 1024:
        return f"{sign}{int(value)} B"
    for unit in _SIZE_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{sign}{value:.1f} {unit}"


def format_elapsed(seconds: float) -> str:
    """Render a wall-clock duration: milliseconds, seconds, or minutes and seconds."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, remainder = divmod(seconds, 60)
    return f"{int(minutes)}m {remainder:.0f}s"
