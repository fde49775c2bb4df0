from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Union

from core.common.observer import Subject
from publishing.enum.workflow_event import WorkflowEvent
from publishing.enum.workflow_state import WorkflowState
from publishing.logic import workflow_engine
from publishing.models.state_changed_event import StateChangedEvent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Document:
    """
    Content whose visibility is gated by the review workflow.

    Notes:
    - 'body'      append-only; text is kept in every state, only reading is gated
    - 'state'     always one WorkflowState, starts at DRAFT
    - 'events'    subject notified with a StateChangedEvent on real transitions;
                  the state is already updated when observers run, and an
                  exception raised by an observer propagates to the caller
    """

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    state: WorkflowState = WorkflowState.DRAFT
    events: Subject[StateChangedEvent] = field(default_factory=Subject, repr=False, compare=False)
    _chunks: List[str] = field(default_factory=list, init=False, repr=False)

    # Content ----------------------------------------------------------------
    @property
    def body(self) -> str:
        return "".join(self._chunks)

    def append(self, text: str) -> None:
        # Allowed in every state, including after publication.
        self._chunks.append(text)

    def visible_content(self) -> str:
        """Body if published, otherwise an empty string."""
        if workflow_engine.is_visible(self.state):
            return self.body
        return ""

    # Workflow ---------------------------------------------------------------
    def request_review(self) -> None:
        self.apply(WorkflowEvent.REQUEST_REVIEW)

    def approve(self) -> None:
        self.apply(WorkflowEvent.APPROVE)

    def apply(self, event: Union[WorkflowEvent, str]) -> None:
        ev = workflow_engine.parse_event(event)
        old = self.state
        new = workflow_engine.next_state(old, ev)
        if new is old:
            logger.debug("Document %s: %s ignored in %s", self.id, ev.value, old.value)
            return

        # State is committed before observers run; their errors propagate.
        self.state = new
        logger.info("Document %s: %s -> %s (%s)", self.id, old.value, new.value, ev.value)
        self.events.notify_observers(
            StateChangedEvent(
                document_id=self.id,
                old_state=old,
                new_state=new,
                event=ev,
                ts_utc=datetime.now(timezone.utc),
            )
        )

    @property
    def is_published(self) -> bool:
        return self.state is WorkflowState.PUBLISHED
