"""
xtask/tools.py

Make sure auxiliary developer tools (the coverage tool) are installed
into the current interpreter's environment via pip.
"""

from __future__ import annotations

import logging
import re
import subprocess
import sys
from typing import Callable, List

from xtask.errors import ToolInstallError

logger = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


def _pip(*args: str) -> List[str]:
    return [sys.executable, "-m", "pip", *args]


def _normalize(name: str) -> str:
    return re.sub(r"[-_.]+", "-", name).lower()


def is_tool_installed(tool_name: str, *, runner: Runner = subprocess.run) -> bool:
    try:
        result = runner(_pip("list", "--format=freeze"), capture_output=True, text=True, check=False)
    except OSError as exc:
        raise ToolInstallError(f"failed to list installed tools: {exc}") from exc
    if result.returncode != 0:
        raise ToolInstallError(f"failed to list installed tools: {result.stderr.strip()}")

    wanted = _normalize(tool_name)
    for line in result.stdout.splitlines():
        name = line.split("==", 1)[0].split(" @ ", 1)[0].strip()
        if name and _normalize(name) == wanted:
            return True
    return False


def install_tools(
    tool_name: str = "coverage",
    *,
    runner: Runner = subprocess.run,
    echo: Callable[[str], None] = print,
) -> bool:
    """Install *tool_name* if missing. Returns True if an install ran."""
    if is_tool_installed(tool_name, runner=runner):
        echo(f"{tool_name} already installed")
        return False

    echo(f"Installing {tool_name}...")
    try:
        result = runner(_pip("install", tool_name), check=False)
    except OSError as exc:
        raise ToolInstallError(f"failed to execute pip install {tool_name}: {exc}") from exc
    if result.returncode != 0:
        raise ToolInstallError(f"Failed to install {tool_name}")
    logger.info("Installed %s", tool_name)
    return True
