# ============================================================================
# DEVELOPER CONSOLE REGISTRY
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Diagnostic provider registration
# PURPOSE: Register diagnostic providers and switch the console on or off
# CREATED: 18 OCT 2026
# ============================================================================
"""
Developer Console Registry

Holds diagnostic providers in registration order. Providers are only
rendered while the registry is enabled.
"""

import logging
from typing import Dict, Iterator, List

from console.core import DiagnosticProvider

logger = logging.getLogger(__name__)


class DiagnosticRegistry:
    """Registry for diagnostic providers."""

    def __init__(self, enabled: bool = True):
        self._providers: Dict[str, DiagnosticProvider] = {}
        self.enabled = enabled

    def register(self, provider: DiagnosticProvider) -> None:
        """Register a provider. A provider with the same id is replaced."""
        if provider.id in self._providers:
            logger.warning(f"Overwriting diagnostic provider: {provider.id}")

        self._providers[provider.id] = provider
        logger.debug(f"Registered diagnostic provider: {provider.id}")

    def get_all(self) -> List[DiagnosticProvider]:
        return list(self._providers.values())

    def is_enabled(self) -> bool:
        return self.enabled

    def __iter__(self) -> Iterator[DiagnosticProvider]:
        return iter(self.get_all())

    def __len__(self) -> int:
        return len(self._providers)

    def __contains__(self, provider_id: str) -> bool:
        return provider_id in self._providers


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DiagnosticRegistry",
]
