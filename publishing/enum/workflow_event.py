"""publishing/enum/workflow_event.py
================================

Canonical event identifiers accepted by the content workflow.
"""
from __future__ import annotations

from enum import Enum


class WorkflowEvent(str, Enum):
    """Events that drive the workflow state machine."""

    REQUEST_REVIEW = "request_review"
    APPROVE = "approve"
