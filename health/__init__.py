# ============================================================================
# HEALTH CHECK MODULE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Health check plugin system
# PURPOSE: Liveness, readiness and overall health responses
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Module

Plugin-based health check system:
- /health: every registered check
- /health/live: liveness checks
- /health/ready: readiness checks

Architecture:
- HealthCheckPlugin: Base class for health checks
- HealthCheckRegistry: Plugin registration and exposure level
- HealthCheckExecutor: Concurrent execution with per-check timeouts
- HealthAggregator: Renders results as oneline / full / default JSON

Usage:
    from health import HealthCheckPlugin, HealthCheckResult, register_check

    @register_check(liveness=False)
    class MyCheck(HealthCheckPlugin):
        name = "my-check"

        async def check(self) -> HealthCheckResult:
            return HealthCheckResult.up()
"""

from health.core import (
    HealthState,
    HealthCategory,
    ExposureLevel,
    HealthCheckResult,
    HealthCheckPlugin,
)
from health.registry import (
    HealthCheckRegistry,
    register_check,
    get_registry,
)
from health.executor import HealthCheckExecutor
from health.render import HealthAggregator

__all__ = [
    # Core types
    "HealthState",
    "HealthCategory",
    "ExposureLevel",
    "HealthCheckResult",
    "HealthCheckPlugin",
    # Registry
    "HealthCheckRegistry",
    "register_check",
    "get_registry",
    # Execution and rendering
    "HealthCheckExecutor",
    "HealthAggregator",
]
