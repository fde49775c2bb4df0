"""
demos/observer_demo.py

Observer pattern walkthrough: two observers attached, both notified,
one detached, the remaining one notified again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.common.observer import Subject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConcreteObserver:
    id: int

    def update(self, event: Optional[object] = None) -> None:
        logger.info("Observer id:%s received event!", self.id)


def run_observer_demo() -> Subject[object]:
    subject: Subject[object] = Subject()
    observer_a = ConcreteObserver(id=1)
    observer_b = ConcreteObserver(id=2)

    subject.attach(observer_a)
    subject.attach(observer_b)
    subject.notify_observers()

    subject.detach(observer_b)
    subject.notify_observers()
    return subject
