"""Gameplay notifications published by the simulation.

The HUD, toasts and the run controller listen here; the simulation never
waits on a listener and a broken listener never stops a run.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    RUN_STARTED = auto()
    RUN_ENDED = auto()
    STATE_CHANGED = auto()

    OBSTACLE_HIT = auto()
    PICKUP_COLLECTED = auto()
    PARKED = auto()
    LEVEL_COMPLETE = auto()


@dataclass
class Event:
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "simulation"


Handler = Callable[[Event], None]


class EventBus:
    """Synchronous fan-out of events to per-type handlers."""

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """Register ``handler`` for ``event_type``; returns a function that removes it."""
        handlers = self._handlers[event_type]
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        for handler in list(self._handlers.get(event.type, ())):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"{event.type.name} handler failed: {e}")
