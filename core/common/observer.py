"""
core/common/observer.py

Minimal subject/observer pair.

Components publish events through a ``Subject``; listeners implement
``update(event)`` and are called in attach order. Used by the publishing
workflow to announce state changes without coupling to its consumers.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")
E_contra = TypeVar("E_contra", contravariant=True)


class Observer(Protocol[E_contra]):
    """Anything with an ``update(event)`` method."""

    def update(self, event: Optional[E_contra] = None) -> None: ...


class Subject(Generic[E]):
    """Ordered list of observers with attach/detach/notify."""

    def __init__(self) -> None:
        self._observers: List[Observer[E]] = []

    def attach(self, observer: Observer[E]) -> None:
        self._observers.append(observer)
        logger.debug("Attached %r (%d observers)", observer, len(self._observers))

    def detach(self, observer: Observer[E]) -> None:
        """Remove the first observer equal to *observer*; unknown ones are ignored."""
        for idx, item in enumerate(self._observers):
            if item == observer:
                del self._observers[idx]
                logger.debug("Detached %r (%d observers)", observer, len(self._observers))
                return

    def notify_observers(self, event: Optional[E] = None) -> None:
        # snapshot: observers may detach themselves during update()
        for item in list(self._observers):
            item.update(event)

    @property
    def observers(self) -> List[Observer[E]]:
        return list(self._observers)

    def __len__(self) -> int:
        return len(self._observers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(observers={self._observers!r})"
