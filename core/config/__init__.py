# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the introspection service.
"""

from core.config.defaults import (
    ServerDefaults,
    HealthDefaults,
    ConsoleDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "ServerDefaults",
    "HealthDefaults",
    "ConsoleDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
