"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def ds_tree(tmp_path):
    """root/{.DS_Store, sub/.DS_Store, sub/keep.txt}"""
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / ".DS_Store").write_bytes(b"d" * 16)
    (sub / ".DS_Store").write_bytes(b"d" * 8)
    (sub / "keep.txt").write_text("keep")
    return root


@pytest.fixture
def nested_tree(tmp_path):
    """Three levels of .DS_Store files plus AppleDouble and ordinary files."""
    root = tmp_path / "workspace"
    nest2 = root / "nest1" / "nest2"
    nest2.mkdir(parents=True)
    (root / ".DS_Store").write_bytes(b"")
    (root / "nest1" / ".DS_Store").write_bytes(b"")
    (nest2 / ".DS_Store").write_bytes(b"")
    (root / "._photo.jpg").write_bytes(b"a" * 4)
    (root / "nest1" / "._notes.txt").write_bytes(b"a" * 4)
    (root / "safe_file.txt").write_text("safe")
    (root / "nest1" / "other.c").write_text("int main(void) { return 0; }\n")
    return root
