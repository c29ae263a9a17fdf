# ============================================================================
# STARTUP HEALTH CHECKS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Startup health checks
# PURPOSE: Basic process and host lifecycle checks
# CREATED: 18 OCT 2026
# ============================================================================
"""
Startup Health Checks

- ProcessCheck: Always UP if the process is running (liveness + readiness)
- ContextCheck: UP once the host published its started event (readiness)
"""

import os
import logging
import platform
import sys

from health.core import (
    HealthCheckPlugin,
    HealthCheckResult,
)
from health.registry import register_check
from server.events import (
    ContextStartedEvent,
    ContextStoppingEvent,
    LifecycleEvent,
    LifecycleEventBus,
)

logger = logging.getLogger(__name__)


@register_check(timeout_seconds=1.0)
class ProcessCheck(HealthCheckPlugin):
    """
    Basic process health check.

    Always returns UP if the check runs (proves process is alive).
    """

    name = "process"

    async def check(self) -> HealthCheckResult:
        return HealthCheckResult.up(
            python_version=platform.python_version(),
            platform=platform.platform(),
            pid=os.getpid(),
            executable=sys.executable,
        )


class ContextCheck(HealthCheckPlugin):
    """
    Host lifecycle readiness check.

    DOWN until the host publishes ContextStartedEvent, DOWN again once it
    publishes ContextStoppingEvent. Not part of liveness: a process that is
    still starting is alive.
    """

    name = "context"
    timeout_seconds = 1.0
    liveness = False
    readiness = True

    def __init__(self, events: LifecycleEventBus):
        self._started = False
        self._stopping = False
        self._unsubscribe = events.subscribe(
            self._on_event, ContextStartedEvent, ContextStoppingEvent
        )

    def _on_event(self, event: LifecycleEvent) -> None:
        if isinstance(event, ContextStartedEvent):
            self._started = True
        else:
            self._stopping = True

    async def check(self) -> HealthCheckResult:
        if self._stopping:
            return HealthCheckResult.down(message="Context is stopping")
        if not self._started:
            return HealthCheckResult.down(message="Context not started")
        return HealthCheckResult.up()


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ProcessCheck",
    "ContextCheck",
]
