"""Publishing feature exceptions."""
from __future__ import annotations


class PublishingError(Exception):
    """Base exception for the publishing feature."""


class UnknownWorkflowEventError(PublishingError, ValueError):
    """Raised when a value that is not a workflow event is applied."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown workflow event: {value!r}")
        self.value = value
