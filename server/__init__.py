# ============================================================================
# SERVER MODULE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Embedded HTTP server support
# PURPOSE: Activation, routing, lifecycle events and endpoint inventory
# CREATED: 18 OCT 2026
# ============================================================================
"""
Server Module

Building blocks shared by the health and console features. The composition
root lives in server.http (import it directly):

    from server.http import IntrospectionServer
"""

from server.activation import ActivationError, ActivationGate, Feature
from server.endpoints import EndpointRegistry
from server.events import (
    LifecycleEvent,
    ContextStartedEvent,
    RouteReloadedEvent,
    ContextStoppingEvent,
    LifecycleEventBus,
)
from server.routing import HttpRouter, RouteHandle
from server.summary import EndpointSummaryLogger

__all__ = [
    # Activation
    "Feature",
    "ActivationError",
    "ActivationGate",
    # Endpoints
    "EndpointRegistry",
    "EndpointSummaryLogger",
    # Events
    "LifecycleEvent",
    "ContextStartedEvent",
    "RouteReloadedEvent",
    "ContextStoppingEvent",
    "LifecycleEventBus",
    # Routing
    "HttpRouter",
    "RouteHandle",
]
