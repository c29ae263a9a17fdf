# ============================================================================
# DEVELOPER CONSOLE MODULE
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Diagnostic provider system
# PURPOSE: Free-form diagnostic dump served at /dev
# CREATED: 18 OCT 2026
# ============================================================================
"""
Developer Console Module

Architecture:
- DiagnosticProvider: Base class for providers
- DiagnosticRegistry: Provider registration and the console on/off switch
- DiagnosticsRenderer: Concatenates provider text into the /dev body
"""

from console.core import MediaType, DiagnosticProvider
from console.registry import DiagnosticRegistry
from console.render import CONSOLE_DISABLED_MESSAGE, DiagnosticsRenderer

__all__ = [
    "MediaType",
    "DiagnosticProvider",
    "DiagnosticRegistry",
    "CONSOLE_DISABLED_MESSAGE",
    "DiagnosticsRenderer",
]
