"""xtask exceptions."""
from __future__ import annotations


class XtaskError(Exception):
    """Base exception for developer tooling commands."""


class ProjectRootNotFoundError(XtaskError):
    """Raised when no parent directory holds the project marker file."""


class HookInstallError(XtaskError):
    """Raised when a git hook cannot be linked or copied."""


class ToolInstallError(XtaskError):
    """Raised when the package manager fails to list or install a tool."""
