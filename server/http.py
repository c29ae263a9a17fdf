# ============================================================================
# INTROSPECTION HTTP SERVER
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Feature activation on the embedded server
# PURPOSE: Activate the HTTP server, developer console and health endpoints
# CREATED: 18 OCT 2026
# ============================================================================
"""
Introspection HTTP Server

Owns the state of one running introspection surface: activation flags,
endpoint inventory, the FastAPI application and its router.

    server = IntrospectionServer(events=bus, health_registry=registry)
    server.register_server(port=8080)
    server.register_console()
    server.register_health_check()

Each register_* call takes effect once; repeated calls are no-ops, so only
the first register_server() port is used.

Registration must happen in order: register_server() before
register_console() or register_health_check(). Calls are serialized, so a
console or health call made while the server is still being set up on
another thread waits for it. A console or health call made before
register_server() was called at all fails with ActivationError and, like
any failed activation, is not retried.

The application's lifespan publishes ContextStartedEvent on startup and
ContextStoppingEvent on shutdown.
"""

import threading
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from __version__ import __version__
from console.registry import DiagnosticRegistry
from console.render import DiagnosticsRenderer
from console.router import DEV_PATH, register_console_routes
from core.logging import ComponentType, get_logger
from health.registry import HealthCheckRegistry, get_registry
from health.render import HealthAggregator
from health.router import HEALTH_PATH, register_health_routes
from server.activation import ActivationGate, Feature
from server.endpoints import EndpointRegistry
from server.events import (
    ContextStartedEvent,
    ContextStoppingEvent,
    LifecycleEventBus,
)
from server.routing import HttpRouter
from server.summary import EndpointSummaryLogger

logger = get_logger(__name__, ComponentType.SERVER)

DEFAULT_PORT = 8080


class IntrospectionServer:
    """Composition root for the introspection features."""

    def __init__(
        self,
        events: Optional[LifecycleEventBus] = None,
        health_registry: Optional[HealthCheckRegistry] = None,
        console_registry: Optional[DiagnosticRegistry] = None,
        gate: Optional[ActivationGate] = None,
        endpoints: Optional[EndpointRegistry] = None,
    ):
        self.events = events if events is not None else LifecycleEventBus()
        self.health_registry = health_registry if health_registry is not None else get_registry()
        self.console_registry = console_registry
        self.gate = gate if gate is not None else ActivationGate()
        self.endpoints = endpoints if endpoints is not None else EndpointRegistry()

        self.app: Optional[FastAPI] = None
        self.router: Optional[HttpRouter] = None
        self.port: Optional[int] = None
        self.summary: Optional[EndpointSummaryLogger] = None
        self._setup_lock = threading.RLock()

    # ========================================================================
    # SERVER
    # ========================================================================

    def register_server(self, port: int = DEFAULT_PORT) -> bool:
        """Create the HTTP application. Returns True on the activating call."""
        with self._setup_lock:
            return self.gate.activate(Feature.SERVER, lambda: self._do_register_server(port))

    def _do_register_server(self, port: int) -> None:
        self.port = port
        self.app = FastAPI(
            title="Runtime Introspection",
            version=__version__,
            lifespan=self._lifespan,
        )
        self.router = HttpRouter(self.app)

        self.summary = EndpointSummaryLogger(self.endpoints, port)
        self.summary.subscribe(self.events)

        logger.info(f"HTTP server registered on port {port}")

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        self.events.publish(ContextStartedEvent())
        yield
        self.events.publish(ContextStoppingEvent())

    def _require_router(self, feature: Feature) -> HttpRouter:
        if self.router is None:
            raise RuntimeError(
                f"HTTP server must be registered before {feature.value}"
            )
        return self.router

    # ========================================================================
    # DEVELOPER CONSOLE
    # ========================================================================

    def register_console(self) -> bool:
        """Expose /dev. Returns True on the activating call."""
        with self._setup_lock:
            return self.gate.activate(Feature.CONSOLE, self._do_register_console)

    def _do_register_console(self) -> None:
        router = self._require_router(Feature.CONSOLE)
        register_console_routes(router, DiagnosticsRenderer(self.console_registry))
        self.endpoints.add_http_endpoint(DEV_PATH)

    # ========================================================================
    # HEALTH
    # ========================================================================

    def register_health_check(self) -> bool:
        """Expose /health, /health/live, /health/ready. Returns True on the activating call."""
        with self._setup_lock:
            return self.gate.activate(Feature.HEALTH, self._do_register_health_check)

    def _do_register_health_check(self) -> None:
        router = self._require_router(Feature.HEALTH)
        register_health_routes(router, HealthAggregator(self.health_registry))
        self.endpoints.add_http_endpoint(HEALTH_PATH)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DEFAULT_PORT",
    "IntrospectionServer",
]
