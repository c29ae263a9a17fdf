# ============================================================================
# HEALTH CHECK EXECUTOR
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Concurrent health check execution
# PURPOSE: Invoke the checks selected by a health request
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Executor

Collects results for one health request:
- invoke_all: every registered check (/health)
- invoke_liveness: liveness checks only (/health/live)
- invoke_readiness: readiness checks only (/health/ready)

Checks run concurrently, each bounded by its own timeout_seconds.
A check that raises or times out is reported DOWN with the error attached;
it never fails the whole collection.
"""

import asyncio
import logging
import time
from typing import List, Optional

from health.core import (
    HealthCategory,
    HealthCheckResult,
    HealthCheckPlugin,
)
from health.registry import HealthCheckRegistry, get_registry

logger = logging.getLogger(__name__)


class HealthCheckExecutor:
    """Executes health checks concurrently with per-check timeouts."""

    def __init__(self, registry: Optional[HealthCheckRegistry] = None):
        """
        Initialize executor.

        Args:
            registry: Health check registry (uses default if None)
        """
        self.registry = registry if registry is not None else get_registry()

    async def invoke_all(self) -> List[HealthCheckResult]:
        """Execute all registered health checks."""
        return await self._execute(self.registry.get_all())

    async def invoke_liveness(self) -> List[HealthCheckResult]:
        """Execute liveness checks."""
        return await self._execute(self.registry.get_liveness_checks())

    async def invoke_readiness(self) -> List[HealthCheckResult]:
        """Execute readiness checks."""
        return await self._execute(self.registry.get_readiness_checks())

    async def invoke(self, category: HealthCategory) -> List[HealthCheckResult]:
        """Execute the checks selected by a request category."""
        if category == HealthCategory.LIVENESS:
            return await self.invoke_liveness()
        if category == HealthCategory.READINESS:
            return await self.invoke_readiness()
        return await self.invoke_all()

    async def _execute(
        self,
        checks: List[HealthCheckPlugin],
    ) -> List[HealthCheckResult]:
        if not checks:
            return []
        return list(await asyncio.gather(*(self._execute_check(c) for c in checks)))

    async def _execute_check(
        self,
        check: HealthCheckPlugin,
    ) -> HealthCheckResult:
        """Execute a single check with timeout."""
        start_time = time.monotonic()

        try:
            result = await asyncio.wait_for(
                check.check(),
                timeout=check.timeout_seconds,
            )

        except asyncio.TimeoutError as e:
            logger.warning(
                f"Health check {check.name} timed out after {check.timeout_seconds}s"
            )
            result = HealthCheckResult.down(
                message=f"Timeout after {check.timeout_seconds}s",
                error=e,
            )

        except Exception as e:
            logger.error(f"Health check {check.name} failed: {e}")
            result = HealthCheckResult.from_exception(e)

        result.check_id = check.name
        result.duration_ms = (time.monotonic() - start_time) * 1000

        logger.debug(
            f"Health check {check.name}: {result.state.value} "
            f"({result.duration_ms:.1f}ms)"
        )

        return result


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckExecutor",
]
