# ============================================================================
# HEALTH CHECK REGISTRY
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Health check plugin registration
# PURPOSE: Register and discover health check plugins
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Registry

Manages registration and discovery of health check plugins, and owns the
exposure level that health responses are rendered with.

Usage:
    # Decorator registration (default registry)
    @register_check(liveness=False)
    class DatabaseCheck(HealthCheckPlugin):
        ...

    # Manual registration
    registry = get_registry()
    registry.register(DatabaseCheck())

    # Select checks for a probe
    checks = registry.get_readiness_checks()
"""

import logging
from typing import Dict, List, Optional, Type, Union

from health.core import ExposureLevel, HealthCheckPlugin

logger = logging.getLogger(__name__)


class HealthCheckRegistry:
    """
    Registry for health check plugins.

    Checks are kept in registration order. Supports both class-based and
    instance registration.
    """

    def __init__(self, exposure_level: Union[str, ExposureLevel] = ExposureLevel.DEFAULT):
        self._checks: Dict[str, HealthCheckPlugin] = {}
        self._exposure_level = ExposureLevel.parse(exposure_level)

    def register(self, check: HealthCheckPlugin) -> None:
        """
        Register a health check plugin instance.

        A check registered under an existing name replaces the old one.
        """
        if check.name in self._checks:
            logger.warning(f"Overwriting health check: {check.name}")

        self._checks[check.name] = check
        logger.debug(
            f"Registered health check: {check.name} "
            f"(liveness={check.liveness}, readiness={check.readiness})"
        )

    def register_class(
        self,
        check_class: Type[HealthCheckPlugin],
        **kwargs
    ) -> HealthCheckPlugin:
        """
        Instantiate and register a health check class.

        Args:
            check_class: Plugin class to instantiate
            **kwargs: Arguments passed to constructor

        Returns:
            The instantiated plugin
        """
        instance = check_class(**kwargs)
        self.register(instance)
        return instance

    def get_all(self) -> List[HealthCheckPlugin]:
        """Get all registered checks."""
        return list(self._checks.values())

    def get_liveness_checks(self) -> List[HealthCheckPlugin]:
        """Get checks included in /health/live."""
        return [c for c in self._checks.values() if c.liveness]

    def get_readiness_checks(self) -> List[HealthCheckPlugin]:
        """Get checks included in /health/ready."""
        return [c for c in self._checks.values() if c.readiness]

    @property
    def exposure_level(self) -> ExposureLevel:
        """Exposure level health responses are rendered with."""
        return self._exposure_level

    @exposure_level.setter
    def exposure_level(self, value: Union[str, ExposureLevel]) -> None:
        self._exposure_level = ExposureLevel.parse(value)

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks


# ============================================================================
# GLOBAL REGISTRY & DECORATOR
# ============================================================================

_registry: Optional[HealthCheckRegistry] = None


def get_registry() -> HealthCheckRegistry:
    """Get the default health check registry."""
    global _registry
    if _registry is None:
        _registry = HealthCheckRegistry()
    return _registry


def register_check(
    timeout_seconds: float = None,
    liveness: bool = None,
    readiness: bool = None,
):
    """
    Decorator to register a health check class with the default registry.

    Args:
        timeout_seconds: Override timeout
        liveness: Override inclusion in /health/live
        readiness: Override inclusion in /health/ready

    Example:
        @register_check(liveness=False)
        class DatabaseCheck(HealthCheckPlugin):
            name = "database"

            async def check(self) -> HealthCheckResult:
                ...
    """
    def decorator(cls: Type[HealthCheckPlugin]) -> Type[HealthCheckPlugin]:
        if timeout_seconds is not None:
            cls.timeout_seconds = timeout_seconds

        if liveness is not None:
            cls.liveness = liveness

        if readiness is not None:
            cls.readiness = readiness

        get_registry().register_class(cls)

        return cls

    return decorator


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "HealthCheckRegistry",
    "get_registry",
    "register_check",
]
