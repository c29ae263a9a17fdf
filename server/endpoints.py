# ============================================================================
# HTTP ENDPOINT REGISTRY
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Exposed endpoint inventory
# PURPOSE: Record which URL paths the embedded server exposes
# CREATED: 18 OCT 2026
# ============================================================================
"""
HTTP Endpoint Registry

Append-only set of exposed URL paths. Activation code adds paths;
the endpoint summary logger and the endpoints console read snapshots.
"""

import logging
import threading
from typing import FrozenSet, Set

logger = logging.getLogger(__name__)


class EndpointRegistry:
    """Thread-safe, append-only set of exposed HTTP paths."""

    def __init__(self):
        self._endpoints: Set[str] = set()
        self._lock = threading.Lock()

    def add_http_endpoint(self, path: str) -> None:
        """Record an exposed path. Adding a known path is a no-op."""
        with self._lock:
            if path in self._endpoints:
                return
            self._endpoints.add(path)
        logger.debug(f"Added HTTP endpoint: {path}")

    def get_http_endpoints(self) -> FrozenSet[str]:
        """Snapshot of the exposed paths."""
        with self._lock:
            return frozenset(self._endpoints)

    def __len__(self) -> int:
        with self._lock:
            return len(self._endpoints)

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._endpoints


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "EndpointRegistry",
]
