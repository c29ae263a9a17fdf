# ============================================================================
# VERSION - RUNTIME INTROSPECTION
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# ============================================================================
"""
Version information for the runtime introspection service.

This is the single source of truth for the application version.
Updated manually for each release.
"""
# Version format: major.minor.patch
__version__ = "0.3.1"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-18"

EPOCH = 1
CODENAME = "Runtime Introspection"
