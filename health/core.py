# ============================================================================
# HEALTH CHECK CORE TYPES
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Base classes for health checks
# PURPOSE: Health check plugin interfaces and result types
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Core Types

Defines the plugin interface and result types for health checks.

States:
- UP: Check passed
- DOWN: Check failed (makes the overall status DOWN)
- UNKNOWN: Check could not decide (does not affect the overall status)

Categories (selected by the endpoint that received the request):
- all: /health
- liveness: /health/live
- readiness: /health/ready

Exposure levels (how much a response reveals):
- oneline: overall status only
- full: overall status plus every check
- default: overall status, plus the failing checks when DOWN
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass, field


class HealthState(str, Enum):
    """Health check state values."""
    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


class HealthCategory(str, Enum):
    """Which group of checks a health request invokes."""
    ALL = "all"
    LIVENESS = "liveness"
    READINESS = "readiness"


class ExposureLevel(str, Enum):
    """Verbosity of a rendered health response."""
    ONELINE = "oneline"
    FULL = "full"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ExposureLevel":
        """Map a configured value to a level; anything unrecognized is DEFAULT."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.DEFAULT


@dataclass
class HealthCheckResult:
    """Result from a single health check."""
    state: HealthState
    check_id: str = ""
    message: Optional[str] = None
    error: Optional[BaseException] = None
    details: Dict[str, Any] = field(default_factory=dict)
    duration_ms: float = 0.0

    @classmethod
    def up(cls, message: str = None, **details) -> "HealthCheckResult":
        """Create UP result."""
        return cls(state=HealthState.UP, message=message, details=details)

    @classmethod
    def down(
        cls,
        message: str = None,
        error: BaseException = None,
        **details,
    ) -> "HealthCheckResult":
        """Create DOWN result."""
        return cls(state=HealthState.DOWN, message=message, error=error, details=details)

    @classmethod
    def unknown(cls, message: str = None, **details) -> "HealthCheckResult":
        """Create UNKNOWN result."""
        return cls(state=HealthState.UNKNOWN, message=message, details=details)

    @classmethod
    def from_exception(cls, e: BaseException) -> "HealthCheckResult":
        """Create DOWN result from exception."""
        return cls(
            state=HealthState.DOWN,
            error=e,
            details={"exception_type": type(e).__name__},
        )

    @property
    def error_message(self) -> Optional[str]:
        """Message of the attached error, if any."""
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__


class HealthCheckPlugin(ABC):
    """
    Base class for health check plugins.

    Subclass and implement check() to create custom health checks.
    Use @register_check decorator or manual registration.

    Attributes:
        name: Unique identifier for the check (rendered as "name")
        timeout_seconds: Max execution time before the check is reported DOWN
        liveness: Included in /health/live
        readiness: Included in /health/ready

    Example:
        @register_check(liveness=False)
        class DatabaseCheck(HealthCheckPlugin):
            name = "database"
            timeout_seconds = 5.0

            async def check(self) -> HealthCheckResult:
                await db.execute("SELECT 1")
                return HealthCheckResult.up()
    """

    name: str = "unnamed"
    timeout_seconds: float = 10.0
    liveness: bool = True
    readiness: bool = True

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        """
        Execute health check.

        Returns:
            HealthCheckResult with state and optional details
        """
        pass
