# ============================================================================
# LIFECYCLE EVENTS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Host lifecycle notifications
# PURPOSE: Typed lifecycle events and an in-process subscription bus
# CREATED: 18 OCT 2026
# ============================================================================
"""
Lifecycle Events

The host publishes typed events; components subscribe handlers for the
event types they care about. Dispatch is synchronous on the publishing
thread, so handlers must be quick and must not block.

Events:
- ContextStartedEvent: the host finished starting
- RouteReloadedEvent: one route of a reload batch was reloaded
  (index is 0-based, total is the batch size)
- ContextStoppingEvent: the host is shutting down

Usage:
    bus = LifecycleEventBus()
    unsubscribe = bus.subscribe(on_started, ContextStartedEvent)
    bus.publish(ContextStartedEvent())
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional, Tuple, Type

logger = logging.getLogger(__name__)


class LifecycleEvent:
    """Base class for host lifecycle events."""


@dataclass(frozen=True)
class ContextStartedEvent(LifecycleEvent):
    """The host finished starting."""
    started_at: datetime = field(default_factory=datetime.utcnow)


@dataclass(frozen=True)
class RouteReloadedEvent(LifecycleEvent):
    """One route of a reload batch was reloaded."""
    index: int
    total: int
    route_id: Optional[str] = None

    @property
    def is_last(self) -> bool:
        """True for the final event of the batch."""
        return self.index == self.total - 1


@dataclass(frozen=True)
class ContextStoppingEvent(LifecycleEvent):
    """The host is shutting down."""


EventHandler = Callable[[LifecycleEvent], None]


class LifecycleEventBus:
    """
    Thread-safe publish/subscribe bus for lifecycle events.

    A handler that raises is logged and does not prevent delivery to the
    remaining handlers.
    """

    def __init__(self):
        self._subscribers: List[Tuple[EventHandler, Tuple[Type[LifecycleEvent], ...]]] = []
        self._lock = threading.Lock()

    def subscribe(
        self,
        handler: EventHandler,
        *event_types: Type[LifecycleEvent],
    ) -> Callable[[], None]:
        """
        Subscribe a handler.

        Args:
            handler: Called with each matching event
            *event_types: Event classes to receive (all events if omitted)

        Returns:
            Function that removes the subscription
        """
        entry = (handler, tuple(event_types))
        with self._lock:
            self._subscribers.append(entry)

        def unsubscribe() -> None:
            with self._lock:
                if entry in self._subscribers:
                    self._subscribers.remove(entry)

        return unsubscribe

    def publish(self, event: LifecycleEvent) -> None:
        """Deliver an event to every matching subscriber."""
        with self._lock:
            subscribers = list(self._subscribers)

        for handler, event_types in subscribers:
            if event_types and not isinstance(event, event_types):
                continue
            try:
                handler(event)
            except Exception:
                logger.exception(
                    f"Lifecycle handler {getattr(handler, '__qualname__', handler)!r} "
                    f"failed on {type(event).__name__}"
                )

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "LifecycleEvent",
    "ContextStartedEvent",
    "RouteReloadedEvent",
    "ContextStoppingEvent",
    "LifecycleEventBus",
]
