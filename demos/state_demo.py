"""
demos/state_demo.py

Content workflow walkthrough: text stays hidden through draft and review
and becomes visible on approval.
"""

from __future__ import annotations

import logging

from publishing.models.document import Document
from publishing.models.state_changed_event import StateChangedEvent

logger = logging.getLogger(__name__)


class _TransitionLogger:
    def update(self, event: StateChangedEvent | None = None) -> None:
        if event is not None:
            logger.info("Workflow moved %s -> %s", event.old_state.value, event.new_state.value)


def run_state_demo() -> Document:
    doc = Document()
    doc.events.attach(_TransitionLogger())

    doc.append("hello")
    logger.info("Draft content: %r", doc.visible_content())

    doc.request_review()
    logger.info("Pending review content: %r", doc.visible_content())

    doc.approve()
    logger.info("Published content: %r", doc.visible_content())

    doc.append(" world")
    logger.info("After late edit: %r", doc.visible_content())
    return doc
