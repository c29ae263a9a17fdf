# ============================================================================
# HEALTH CHECK PLUGINS
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Health check implementations
# PURPOSE: Built-in health checks
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Plugins

Built-in checks:
- process: Process is running (liveness + readiness), registered on import
- context: Host has started (readiness only), needs the lifecycle bus and
  is registered by the application

Import this module to register the import-time checks:
    import health.checks
"""

from health.checks.startup import ProcessCheck, ContextCheck

__all__ = [
    "ProcessCheck",
    "ContextCheck",
]
