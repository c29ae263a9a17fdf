# ============================================================================
# RUNTIME INTROSPECTION - MAIN APPLICATION
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Core - FastAPI application entry point
# PURPOSE: Wire health checks, developer console and endpoint summary
# CREATED: 18 OCT 2026
# ============================================================================
"""
Runtime Introspection Main Application

Builds the introspection server from environment configuration:
1. HTTP server on PORT (default 8080)
2. /dev developer console (DEV_CONSOLE_ENABLED)
3. /health, /health/live, /health/ready (HEALTH_ENABLED, HEALTH_EXPOSURE_LEVEL)

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8080
    python main.py
"""

import os

from __version__ import __version__, BUILD_DATE, EPOCH
from console.providers import EndpointsConsole, ProcessConsole
from console.registry import DiagnosticRegistry
from core.config import Defaults, get_defaults
from core.logging import ComponentType, configure_logging, get_logger
from health import get_registry
from health.checks import ContextCheck
from server.events import LifecycleEventBus
from server.http import IntrospectionServer

configure_logging(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    json_output=os.environ.get("LOG_FORMAT", "").lower() == "json",
)
logger = get_logger(__name__, ComponentType.SERVER)


def build_server(defaults: Defaults = None) -> IntrospectionServer:
    """Create and activate the introspection features."""
    defaults = defaults or get_defaults()

    events = LifecycleEventBus()

    health_registry = get_registry()
    health_registry.exposure_level = defaults.health.exposure_level
    health_registry.register(ContextCheck(events))

    console_registry = DiagnosticRegistry(enabled=defaults.console.enabled)

    server = IntrospectionServer(
        events=events,
        health_registry=health_registry,
        console_registry=console_registry,
    )
    console_registry.register(ProcessConsole())
    console_registry.register(EndpointsConsole(server.endpoints))

    server.register_server(defaults.server.port)
    server.register_console()
    if defaults.health.enabled:
        server.register_health_check()

    logger.info(
        f"Runtime Introspection v{__version__} (Epoch {EPOCH}, Build {BUILD_DATE}): "
        f"{len(health_registry)} health checks, {len(console_registry)} console providers"
    )
    return server


server = build_server()
app = server.app


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_defaults().server.host,
        port=server.port,
    )
