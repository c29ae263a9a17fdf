# ============================================================================
# HTTP ENDPOINTS SUMMARY
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Endpoint inventory logging
# PURPOSE: Log the exposed endpoints after startup and after reloads
# CREATED: 18 OCT 2026
# ============================================================================
"""
HTTP Endpoints Summary

Logs the full endpoint inventory once the host has started, and again after
a route reload batch completes, but only when the inventory changed since
the last summary:

    HTTP endpoints summary
        http://0.0.0.0:8080/dev
        http://0.0.0.0:8080/health

Reload events carry their position in the batch; only the last event of a
batch (index == total - 1) triggers an evaluation, so a half-applied reload
is never reported.
"""

import logging
import threading
from typing import Callable, FrozenSet, Optional

from server.endpoints import EndpointRegistry
from server.events import (
    ContextStartedEvent,
    LifecycleEvent,
    LifecycleEventBus,
    RouteReloadedEvent,
)

logger = logging.getLogger(__name__)

SUMMARY_HEADER = "HTTP endpoints summary"


class EndpointSummaryLogger:
    """Change-triggered logger of the endpoint inventory."""

    def __init__(
        self,
        endpoints: EndpointRegistry,
        port: int,
        host: str = "0.0.0.0",
    ):
        self.endpoints = endpoints
        self.port = port
        self.host = host
        self._last: Optional[FrozenSet[str]] = None
        self._lock = threading.Lock()

    def subscribe(self, events: LifecycleEventBus) -> Callable[[], None]:
        """Listen for started and reload events. Returns the unsubscribe function."""
        return events.subscribe(self.notify, ContextStartedEvent, RouteReloadedEvent)

    def notify(self, event: LifecycleEvent) -> None:
        """Handle a lifecycle event."""
        if isinstance(event, RouteReloadedEvent) and not event.is_last:
            return
        self.evaluate()

    def evaluate(self) -> bool:
        """
        Log the inventory if it changed since the last summary.

        Returns:
            True if a summary was logged
        """
        with self._lock:
            current = self.endpoints.get_http_endpoints()
            if not current:
                return False

            last = self._last
            if last is not None and len(last) == len(current) and last >= current:
                return False

            logger.info(SUMMARY_HEADER)
            for path in sorted(current):
                logger.info(f"    {self.url_for(path)}")

            self._last = frozenset(current)
        return True

    def url_for(self, path: str) -> str:
        return f"http://{self.host}:{self.port}{path}"

    @property
    def last_logged(self) -> Optional[FrozenSet[str]]:
        """Inventory at the last summary, None before the first one."""
        return self._last


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "SUMMARY_HEADER",
    "EndpointSummaryLogger",
]
