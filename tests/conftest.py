"""Shared fixtures building annotated source trees on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

TreeSpec = dict[str, "str | TreeSpec"]
TreeWriter = Callable[[TreeSpec], Path]


def _write(root: Path, spec: TreeSpec) -> None:
    for name, content in spec.items():
        target = root / name
        if isinstance(content, dict):
            # Nested mappings describe sub-directories.
            target.mkdir()
            _write(target, content)
        else:
            target.write_text(content, encoding="utf-8")


@pytest.fixture
def write_tree(tmp_path: Path) -> TreeWriter:
    """Return a helper materializing a nested mapping as a directory tree."""

    def _writer(spec: TreeSpec) -> Path:
        root = tmp_path / "src"
        root.mkdir()
        _write(root, spec)
        return root

    return _writer
