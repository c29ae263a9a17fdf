# ============================================================================
# BUILT-IN DIAGNOSTIC PROVIDERS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Developer console providers
# PURPOSE: Process and endpoint diagnostics for /dev
# CREATED: 18 OCT 2026
# ============================================================================
"""
Built-in Diagnostic Providers

- ProcessConsole: pid, interpreter, uptime, memory and thread counts
- EndpointsConsole: HTTP endpoints currently exposed
"""

import os
import platform
import time
from typing import Any, Dict, Optional

import psutil

from __version__ import __version__
from console.core import DiagnosticProvider, MediaType
from server.endpoints import EndpointRegistry


class ProcessConsole(DiagnosticProvider):
    """Process information."""

    id = "process"
    display_name = "Process"
    media_types = frozenset({MediaType.TEXT, MediaType.JSON})

    def __init__(self):
        self._process = psutil.Process(os.getpid())

    def snapshot(self) -> Dict[str, Any]:
        memory = self._process.memory_info()
        return {
            "pid": self._process.pid,
            "version": __version__,
            "python": platform.python_version(),
            "platform": platform.platform(),
            "uptime_seconds": round(time.time() - self._process.create_time(), 1),
            "rss_mb": round(memory.rss / (1024 * 1024), 1),
            "threads": self._process.num_threads(),
        }

    def render(self, media_type: MediaType) -> Optional[Any]:
        data = self.snapshot()
        if media_type == MediaType.JSON:
            return data
        width = max(len(key) for key in data)
        return "\n".join(f"    {key.ljust(width)}: {value}" for key, value in data.items())


class EndpointsConsole(DiagnosticProvider):
    """HTTP endpoints exposed by the embedded server."""

    id = "endpoints"
    display_name = "HTTP Endpoints"
    media_types = frozenset({MediaType.TEXT, MediaType.JSON})

    def __init__(self, endpoints: EndpointRegistry):
        self.endpoints = endpoints

    def render(self, media_type: MediaType) -> Optional[Any]:
        paths = sorted(self.endpoints.get_http_endpoints())
        if not paths:
            return None
        if media_type == MediaType.JSON:
            return {"endpoints": paths}
        return "\n".join(f"    {path}" for path in paths)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ProcessConsole",
    "EndpointsConsole",
]
