# ============================================================================
# DEVELOPER CONSOLE ROUTE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Developer console endpoint
# PURPOSE: Serve the diagnostic providers' text output at /dev
# CREATED: 18 OCT 2026
# ============================================================================
"""
Developer Console Route

Endpoints:
    GET /dev - Text dump of every enabled diagnostic provider
"""

from console.render import DiagnosticsRenderer
from server.routing import HttpRouter

TEXT_MEDIA_TYPE = "text/plain"

DEV_PATH = "/dev"


def register_console_routes(router: HttpRouter, renderer: DiagnosticsRenderer) -> None:
    """Register /dev."""
    async def developer_console() -> str:
        return renderer.render_console()

    router.route(DEV_PATH).method("GET").produces(TEXT_MEDIA_TYPE).handler(developer_console)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DEV_PATH",
    "register_console_routes",
]
