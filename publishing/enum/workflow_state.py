"""Workflow state enumeration for published content."""
from __future__ import annotations

from enum import Enum


class WorkflowState(str, Enum):
    """Approval stage of a document. Governs what callers can read."""

    DRAFT = "Draft"
    PENDING_REVIEW = "PendingReview"
    PUBLISHED = "Published"
