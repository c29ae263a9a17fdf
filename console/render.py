# ============================================================================
# DEVELOPER CONSOLE RENDERING
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Console output
# PURPOSE: Concatenate the text output of every diagnostic provider
# CREATED: 18 OCT 2026
# ============================================================================
"""
Developer Console Rendering

Output, per provider that supports TEXT and returns something:

    <display name>:

    <text>

When the registry is missing or disabled, or no provider produced output,
the body is the fixed message CONSOLE_DISABLED_MESSAGE.
"""

import logging
from typing import List, Optional

from console.core import MediaType
from console.registry import DiagnosticRegistry

logger = logging.getLogger(__name__)

CONSOLE_DISABLED_MESSAGE = "Developer Console is not enabled"


class DiagnosticsRenderer:
    """Renders the /dev console body."""

    def __init__(self, registry: Optional[DiagnosticRegistry] = None):
        self.registry = registry

    def render_console(self) -> str:
        if self.registry is None or not self.registry.is_enabled():
            return CONSOLE_DISABLED_MESSAGE

        parts: List[str] = []
        for provider in self.registry:
            if not provider.supports_media_type(MediaType.TEXT):
                continue
            text = provider.render(MediaType.TEXT)
            if text is None:
                continue
            parts.append(f"{provider.display_name}:\n\n{text}\n\n")

        if not parts:
            return CONSOLE_DISABLED_MESSAGE
        return "".join(parts)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "CONSOLE_DISABLED_MESSAGE",
    "DiagnosticsRenderer",
]
