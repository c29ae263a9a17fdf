# ============================================================================
# HEALTH CHECK ROUTES
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Health check endpoints
# PURPOSE: Liveness, readiness and overall health endpoints
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Routes

Endpoints:
    GET /health        - Every registered check
    GET /health/live   - Liveness checks (is the process alive?)
    GET /health/ready  - Readiness checks (can we serve traffic?)

The route that received the request decides which checks run; the body
shape is decided by the registry's exposure level.

Response Codes:
    200 - UP
    503 - DOWN (service unavailable)
"""

import logging
from typing import Dict

from fastapi.responses import Response

from health.core import HealthCategory, HealthState
from health.render import HealthAggregator
from server.routing import HttpRouter, RouteHandler

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

HEALTH_PATH = "/health"
LIVENESS_PATH = "/health/live"
READINESS_PATH = "/health/ready"

HEALTH_ROUTES: Dict[str, HealthCategory] = {
    HEALTH_PATH: HealthCategory.ALL,
    LIVENESS_PATH: HealthCategory.LIVENESS,
    READINESS_PATH: HealthCategory.READINESS,
}


def _status_to_http_code(state: HealthState) -> int:
    """Map overall health state to HTTP status code."""
    return 503 if state == HealthState.DOWN else 200


def health_handler(aggregator: HealthAggregator, category: HealthCategory) -> RouteHandler:
    """Build the handler for one health route."""
    async def handle() -> Response:
        body, state = await aggregator.render(category)
        return Response(
            content=body,
            status_code=_status_to_http_code(state),
            media_type=JSON_MEDIA_TYPE,
        )

    handle.__name__ = f"health_{category.value}"
    return handle


def register_health_routes(router: HttpRouter, aggregator: HealthAggregator) -> None:
    """Register /health, /health/live and /health/ready."""
    for path, category in HEALTH_ROUTES.items():
        (
            router.route(path)
            .method("GET")
            .produces(JSON_MEDIA_TYPE)
            .handler(health_handler(aggregator, category))
        )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HEALTH_PATH",
    "LIVENESS_PATH",
    "READINESS_PATH",
    "HEALTH_ROUTES",
    "health_handler",
    "register_health_routes",
]
