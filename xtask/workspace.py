"""
xtask/workspace.py

Project root discovery for the developer commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from xtask.errors import ProjectRootNotFoundError


def find_project_root(start: Optional[Path] = None, *, marker: str = "pyproject.toml") -> Path:
    """Walk up from *start* (default: cwd) to the first directory holding *marker*."""
    here = Path(start or Path.cwd()).resolve()
    for candidate in (here, *here.parents):
        if (candidate / marker).exists():
            return candidate
    raise ProjectRootNotFoundError(f"Cannot find {marker} in parent directories of {here}")
