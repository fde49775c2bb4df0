"""
publishing/models/state_changed_event.py

Event object emitted by a Document when its workflow state changes.

Observers attached to the document's subject receive one of these per real
transition; no-op events (e.g. approve while still in draft) emit nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from publishing.enum.workflow_event import WorkflowEvent
from publishing.enum.workflow_state import WorkflowState


@dataclass(frozen=True, slots=True)
class StateChangedEvent:
    """Represents a workflow transition of one document."""

    document_id: str
    old_state: WorkflowState
    new_state: WorkflowState
    event: WorkflowEvent
    ts_utc: datetime
