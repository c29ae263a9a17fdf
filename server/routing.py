# ============================================================================
# HTTP ROUTING
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Route registration on the embedded server
# PURPOSE: Builder-style route registration over a FastAPI application
# CREATED: 18 OCT 2026
# ============================================================================
"""
HTTP Routing

Thin builder over FastAPI route registration:

    router = HttpRouter(app)
    router.route("/dev").method("GET").produces("text/plain").handler(render)

A handler is an async callable without arguments. It returns either a body
string, which is sent with the route's media type, or a ready Response.
Routes can be added before or after the application has started.
"""

import logging
from typing import Awaitable, Callable, List, Optional, Union

from fastapi import FastAPI
from fastapi.responses import Response

logger = logging.getLogger(__name__)

RouteHandler = Callable[[], Awaitable[Union[str, Response]]]


class RouteHandle:
    """A route being configured. handler() completes the registration."""

    def __init__(self, router: "HttpRouter", path: str):
        self._router = router
        self.path = path
        self.methods: List[str] = []
        self.media_type: Optional[str] = None

    def method(self, verb: str) -> "RouteHandle":
        """Accept an HTTP method (GET if none is given)."""
        verb = verb.upper()
        if verb not in self.methods:
            self.methods.append(verb)
        return self

    def produces(self, media_type: str) -> "RouteHandle":
        """Media type of string bodies returned by the handler."""
        self.media_type = media_type
        return self

    def handler(self, fn: RouteHandler) -> "RouteHandle":
        """Attach the handler and register the route."""
        media_type = self.media_type

        async def endpoint() -> Response:
            result = await fn()
            if isinstance(result, Response):
                return result
            return Response(content=result, media_type=media_type)

        endpoint.__name__ = getattr(fn, "__name__", "endpoint")
        self._router.app.add_api_route(
            self.path,
            endpoint,
            methods=self.methods or ["GET"],
            response_class=Response,
        )
        logger.debug(f"Registered route {self.methods or ['GET']} {self.path}")
        return self


class HttpRouter:
    """Route factory bound to one FastAPI application."""

    def __init__(self, app: FastAPI):
        self.app = app

    def route(self, path: str) -> RouteHandle:
        return RouteHandle(self, path)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "RouteHandler",
    "RouteHandle",
    "HttpRouter",
]
