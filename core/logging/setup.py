"""
core/logging/setup.py

Root logger configuration for the command line entry points.
Library modules only ever call ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config.config_service import ConfigService, config_service


def configure_logging(config: Optional[ConfigService] = None, *, level: Optional[str] = None) -> None:
    """Apply the ``[Logging]`` section to the root logger.

    ``level`` overrides the configured level (e.g. from a ``--verbose`` flag).
    """
    cfg = (config or config_service).logging
    name = (level or cfg.level or "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=cfg.format,
        force=True,
    )
