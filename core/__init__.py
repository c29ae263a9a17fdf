# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Core module initialization
# PURPOSE: Export configuration and logging utilities
# LAST_REVIEWED: 18 OCT 2026
# ============================================================================

from core.config import Defaults, get_defaults, reset_defaults
from core.logging import configure_logging, get_logger, log_context

__all__ = [
    # Config
    "Defaults",
    "get_defaults",
    "reset_defaults",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
