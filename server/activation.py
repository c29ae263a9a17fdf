# ============================================================================
# FEATURE ACTIVATION
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - One-time feature activation
# PURPOSE: Guarantee each introspection feature is set up exactly once
# CREATED: 18 OCT 2026
# ============================================================================
"""
Feature Activation

Each feature (server, console, health) has an activated flag that goes from
False to True exactly once. activate() flips the flag under a short lock and
runs the setup work outside it, so only the caller that won the flip does
the setup and slow setup never blocks other features.

A failing setup is wrapped in ActivationError and propagated. The flag stays
set: activation is a startup-time operation and is not retried.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Dict

from core.logging import log_checkpoint, log_context

logger = logging.getLogger(__name__)


class Feature(str, Enum):
    """Introspection features that can be activated."""
    SERVER = "server"
    CONSOLE = "console"
    HEALTH = "health"


class ActivationError(RuntimeError):
    """Raised when the setup work of a feature fails."""
    def __init__(self, feature: Feature, cause: BaseException):
        self.feature = feature
        self.cause = cause
        super().__init__(f"Failed to activate {feature.value}: {cause}")


class ActivationGate:
    """
    Per-feature activation flags for one service instance.

    Example:
        gate = ActivationGate()
        gate.activate(Feature.HEALTH, register_health_routes)  # True, runs setup
        gate.activate(Feature.HEALTH, register_health_routes)  # False, no-op
    """

    def __init__(self):
        self._activated: Dict[Feature, bool] = {feature: False for feature in Feature}
        self._lock = threading.Lock()

    def _try_flip(self, feature: Feature) -> bool:
        with self._lock:
            if self._activated[feature]:
                return False
            self._activated[feature] = True
            return True

    def activate(self, feature: Feature, setup: Callable[[], None]) -> bool:
        """
        Activate a feature once.

        Args:
            feature: Feature to activate
            setup: Setup work, run only by the caller that wins the flip

        Returns:
            True if this call performed the activation

        Raises:
            ActivationError: If setup raised
        """
        if not self._try_flip(feature):
            logger.debug(f"Feature {feature.value} already activated")
            return False

        with log_context(feature=feature.value, operation="activate"):
            try:
                setup()
            except Exception as e:
                logger.error(f"Activation of {feature.value} failed: {e}")
                raise ActivationError(feature, e) from e

            log_checkpoint("feature_activated", logger=logger)
        return True

    def is_activated(self, feature: Feature) -> bool:
        """Whether the feature has been activated."""
        with self._lock:
            return self._activated[feature]


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "Feature",
    "ActivationError",
    "ActivationGate",
]
