"""Domain events: base type and a synchronous in-process dispatcher."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainEvent:
    """Base domain event type. Subclasses are frozen dataclasses with fields."""
    pass


class InProcessEventDispatcher:
    """Dispatcher: subscribe by event type, publish invokes handlers in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[..., Any]]] = {}

    def subscribe(self, event_type: type, handler: Callable[..., Any]) -> None:
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def publish(self, event: object) -> None:
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))
        logger.debug("Publishing %s to %d handler(s)", event_type.__name__, len(handlers))
        for handler in handlers:
            handler(event)
