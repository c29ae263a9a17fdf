# ============================================================================
# HEALTH RESPONSE RENDERING
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Health response aggregation
# PURPOSE: Turn check results into oneline / full / default JSON bodies
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Response Rendering

The overall status is UP unless at least one result is DOWN (UNKNOWN does
not count against it). What else the body carries depends on the exposure
level:

    oneline  {"status": "UP"}
    full     {"status": ..., "checks": [every result]}
    default  {"status": "UP"}  or  {"status": "DOWN", "checks": [DOWN results]}

Each rendered check carries name, status, and when present error-message,
message and data. Detail keys are sorted so identical input renders
identically.
"""

import json
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from core.logging import ComponentType, get_logger
from health.core import (
    ExposureLevel,
    HealthCategory,
    HealthCheckResult,
    HealthState,
)
from health.executor import HealthCheckExecutor
from health.registry import HealthCheckRegistry

logger = get_logger(__name__, ComponentType.HEALTH)


def is_up(results: Iterable[HealthCheckResult]) -> bool:
    """True when no result is DOWN."""
    return not any(r.state == HealthState.DOWN for r in results)


def overall_state(results: Iterable[HealthCheckResult]) -> HealthState:
    return HealthState.UP if is_up(results) else HealthState.DOWN


def render_check(result: HealthCheckResult) -> Dict[str, Any]:
    """Render one check result."""
    body: Dict[str, Any] = {
        "name": result.check_id,
        "status": result.state.value,
    }
    if result.error is not None:
        body["error-message"] = result.error_message
    if result.message is not None:
        body["message"] = result.message
    if result.details:
        body["data"] = {
            key: "null" if result.details[key] is None else str(result.details[key])
            for key in sorted(result.details)
        }
    return body


def render_oneline(results: List[HealthCheckResult]) -> Dict[str, Any]:
    return {"status": overall_state(results).value}


def render_full(results: List[HealthCheckResult]) -> Dict[str, Any]:
    return {
        "status": overall_state(results).value,
        "checks": [render_check(r) for r in results],
    }


def render_default(results: List[HealthCheckResult]) -> Dict[str, Any]:
    if is_up(results):
        return {"status": HealthState.UP.value}
    return {
        "status": HealthState.DOWN.value,
        "checks": [render_check(r) for r in results if r.state == HealthState.DOWN],
    }


RENDERERS: Dict[ExposureLevel, Callable[[List[HealthCheckResult]], Dict[str, Any]]] = {
    ExposureLevel.ONELINE: render_oneline,
    ExposureLevel.FULL: render_full,
    ExposureLevel.DEFAULT: render_default,
}


def to_json(body: Dict[str, Any]) -> str:
    """Encode a response body: 4-space indent, newline terminated."""
    return json.dumps(body, indent=4) + "\n"


class HealthAggregator:
    """
    Renders health responses for the three health endpoints.

    Check execution is delegated to the executor; the exposure level is read
    from the registry once per request unless the caller supplies one.
    """

    def __init__(
        self,
        registry: HealthCheckRegistry,
        executor: Optional[HealthCheckExecutor] = None,
    ):
        self.registry = registry
        self.executor = executor if executor is not None else HealthCheckExecutor(registry)

    async def collect(self, category: HealthCategory) -> List[HealthCheckResult]:
        """Invoke the checks for a category. Errors propagate to the caller."""
        return list(await self.executor.invoke(category))

    async def render_health(
        self,
        category: HealthCategory,
        exposure_level: Union[str, ExposureLevel, None] = None,
    ) -> str:
        """
        Run the checks for a category and render the JSON body.

        Args:
            category: all / liveness / readiness
            exposure_level: oneline / full / default (registry value if None)
        """
        body, _ = await self.render(category, exposure_level)
        return body

    async def render(
        self,
        category: HealthCategory,
        exposure_level: Union[str, ExposureLevel, None] = None,
    ):
        """Like render_health(), also returning the overall state."""
        if exposure_level is None:
            exposure_level = self.registry.exposure_level
        level = ExposureLevel.parse(exposure_level)

        results = await self.collect(category)
        state = overall_state(results)

        logger.debug(
            f"Health {category.value}: {state.value} "
            f"({len(results)} checks, exposure={level.value})"
        )
        return to_json(RENDERERS[level](results)), state


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthAggregator",
    "is_up",
    "overall_state",
    "render_check",
    "render_oneline",
    "render_full",
    "render_default",
    "to_json",
]
