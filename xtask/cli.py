"""
xtask/cli.py

Command dispatch for developer tasks.

Run:
  python -m xtask install-hooks
  python -m xtask install-tools
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from core.config.config_service import ConfigService
from core.logging.setup import configure_logging
from xtask.errors import XtaskError
from xtask.hooks import install_hooks
from xtask.tools import install_tools
from xtask.workspace import find_project_root

logger = logging.getLogger(__name__)


def _cmd_install_hooks(config: ConfigService) -> None:
    ws = config.workspace
    root = find_project_root(marker=ws.root_marker)
    install_hooks(root / ws.hooks_dir, root / ws.git_hooks_dir)


def _cmd_install_tools(config: ConfigService) -> None:
    install_tools(config.tools.coverage_tool)


COMMANDS: Dict[str, Callable[[ConfigService], None]] = {
    "install-hooks": _cmd_install_hooks,
    "install-tools": _cmd_install_tools,
}


def _build_parser() -> argparse.ArgumentParser:
    # Only options are parsed here; the command is the first leftover token,
    # so unknown commands (dashed or not) reach the dispatcher below.
    parser = argparse.ArgumentParser(
        prog="xtask",
        usage="%(prog)s [-v] {" + ",".join(COMMANDS) + "} ...",
        description="Repository developer tasks.",
        allow_abbrev=False,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, *, config: Optional[ConfigService] = None) -> int:
    args, rest = _build_parser().parse_known_args(argv)

    if not rest:
        print("No xtask command given. Available: " + ", ".join(COMMANDS), file=sys.stderr)
        return 1
    command = rest[0]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown xtask command: {command}", file=sys.stderr)
        return 1
    if rest[1:]:
        logger.debug("Ignoring extra arguments: %s", rest[1:])

    cfg = config or ConfigService(project_root=_guess_root())
    configure_logging(cfg, level="DEBUG" if args.verbose else None)
    try:
        handler(cfg)
    except XtaskError as exc:
        logger.debug("%s failed", command, exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1
    return 0


def _guess_root() -> Optional[Path]:
    try:
        return find_project_root()
    except XtaskError:
        return None
