from __future__ import annotations

from pathlib import Path

import pytest

from xtask.errors import ProjectRootNotFoundError
from xtask.workspace import find_project_root


def test_finds_marker_in_parent(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_project_root(nested) == tmp_path.resolve()


def test_custom_marker(tmp_path: Path) -> None:
    (tmp_path / "ROOT").write_text("", encoding="utf-8")
    assert find_project_root(tmp_path, marker="ROOT") == tmp_path.resolve()


def test_missing_marker_raises(tmp_path: Path) -> None:
    with pytest.raises(ProjectRootNotFoundError):
        find_project_root(tmp_path, marker="definitely-not-here.marker")
