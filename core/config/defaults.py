# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for the HTTP server, health and dev console
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for the introspection features.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ServerDefaults:
    """
    Defaults for the embedded HTTP server.

    The port is applied once, by the first server activation.
    """
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "ServerDefaults":
        """Create from environment variables."""
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", 8080)),
        )


@dataclass(frozen=True)
class HealthDefaults:
    """
    Defaults for the health endpoints.

    exposure_level is one of "oneline", "full" or "default".
    """
    enabled: bool = True
    exposure_level: str = "default"

    @classmethod
    def from_env(cls) -> "HealthDefaults":
        """Create from environment variables."""
        return cls(
            enabled=_env_flag("HEALTH_ENABLED", True),
            exposure_level=os.getenv("HEALTH_EXPOSURE_LEVEL", "default"),
        )


@dataclass(frozen=True)
class ConsoleDefaults:
    """Defaults for the developer console (/dev)."""
    enabled: bool = True

    @classmethod
    def from_env(cls) -> "ConsoleDefaults":
        """Create from environment variables."""
        return cls(enabled=_env_flag("DEV_CONSOLE_ENABLED", True))


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    server: ServerDefaults = field(default_factory=ServerDefaults)
    health: HealthDefaults = field(default_factory=HealthDefaults)
    console: ConsoleDefaults = field(default_factory=ConsoleDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            server=ServerDefaults.from_env(),
            health=HealthDefaults.from_env(),
            console=ConsoleDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ServerDefaults",
    "HealthDefaults",
    "ConsoleDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
