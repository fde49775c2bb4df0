"""
xtask/hooks.py

Install the repository's git hooks.

Every file in the hooks directory (``.workspace/hooks`` by default) is
linked into ``.git/hooks``. POSIX gets a symlink so edits to the tracked
hook take effect immediately; Windows gets a copy.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, List, Optional

from xtask.errors import HookInstallError

logger = logging.getLogger(__name__)


def install_hooks(
    hooks_dir: Path,
    git_hooks_dir: Path,
    *,
    use_symlinks: Optional[bool] = None,
    echo: Callable[[str], None] = print,
) -> List[Path]:
    """Install each hook and return the installed destination paths."""
    if use_symlinks is None:
        use_symlinks = os.name != "nt"

    if not hooks_dir.is_dir():
        raise HookInstallError(f"failed to read hooks dir: {hooks_dir}")

    try:
        git_hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise HookInstallError(f"failed to create {git_hooks_dir}: {exc}") from exc

    echo("Installing git hooks...")
    installed: List[Path] = []
    for src in sorted(hooks_dir.iterdir()):
        if not src.is_file():
            continue
        dest = git_hooks_dir / src.name
        try:
            if use_symlinks:
                if dest.is_symlink() or dest.exists():
                    dest.unlink()
                dest.symlink_to(src.resolve())
            else:
                shutil.copy2(src, dest)
        except OSError as exc:
            action = "symlink" if use_symlinks else "copy"
            raise HookInstallError(f"failed to {action} hook {src.name}: {exc}") from exc

        logger.debug("Hook %s -> %s", src, dest)
        echo(f"Installed {src.name}")
        installed.append(dest)
    return installed
