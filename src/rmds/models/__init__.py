"""rmds data models."""

from rmds.models.options import APPLEDOUBLE_PREFIX, DS_STORE, UNLIMITED_DEPTH, ScanOptions
from rmds.models.scan_result import FileEntry, ScanResult

__all__ = [
    "APPLEDOUBLE_PREFIX",
    "DS_STORE",
    "FileEntry",
    "ScanOptions",
    "ScanResult",
    "UNLIMITED_DEPTH",
]
