# publishing/logic/workflow_engine.py
"""
Transition rules for the publishing workflow.

- Stateless: pure lookup, no storage or notification here.
- Every (state, event) pair has exactly one outcome. Pairs that do not move
  the document are explicit no-ops, never errors.

    DRAFT           --request_review-->  PENDING_REVIEW
    PENDING_REVIEW  --approve--------->  PUBLISHED
    everything else                      stays where it is
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from publishing.enum.workflow_event import WorkflowEvent
from publishing.enum.workflow_state import WorkflowState
from publishing.exceptions.errors import UnknownWorkflowEventError

_S = WorkflowState
_E = WorkflowEvent

TRANSITIONS: Mapping[Tuple[WorkflowState, WorkflowEvent], WorkflowState] = MappingProxyType({
    (_S.DRAFT, _E.REQUEST_REVIEW): _S.PENDING_REVIEW,
    (_S.DRAFT, _E.APPROVE): _S.DRAFT,
    (_S.PENDING_REVIEW, _E.REQUEST_REVIEW): _S.PENDING_REVIEW,
    (_S.PENDING_REVIEW, _E.APPROVE): _S.PUBLISHED,
    (_S.PUBLISHED, _E.REQUEST_REVIEW): _S.PUBLISHED,
    (_S.PUBLISHED, _E.APPROVE): _S.PUBLISHED,
})


def parse_event(value: Union[WorkflowEvent, str]) -> WorkflowEvent:
    """Accept an event or its string id ("approve", "REQUEST_REVIEW", ...)."""
    if isinstance(value, WorkflowEvent):
        return value
    raw = str(value or "").strip()
    try:
        return WorkflowEvent(raw.lower())
    except ValueError:
        pass
    try:
        return WorkflowEvent[raw.upper()]
    except KeyError:
        raise UnknownWorkflowEventError(value) from None


def next_state(state: WorkflowState, event: Union[WorkflowEvent, str]) -> WorkflowState:
    return TRANSITIONS[(state, parse_event(event))]


def is_terminal(state: WorkflowState) -> bool:
    """True if no event can move a document out of *state*."""
    return all(TRANSITIONS[(state, ev)] is state for ev in WorkflowEvent)


def is_visible(state: WorkflowState) -> bool:
    return state is WorkflowState.PUBLISHED
