# ============================================================================
# DEVELOPER CONSOLE CORE TYPES
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Infrastructure - Base classes for diagnostic providers
# PURPOSE: Diagnostic provider interface and media types
# CREATED: 18 OCT 2026
# ============================================================================
"""
Developer Console Core Types

A diagnostic provider is a pluggable source of free-form internal state.
Providers declare which media types they can render; /dev asks every
provider for TEXT.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, FrozenSet, Optional


class MediaType(str, Enum):
    """Media types a provider can render."""
    TEXT = "text"
    JSON = "json"


class DiagnosticProvider(ABC):
    """
    Base class for diagnostic providers.

    Attributes:
        id: Unique identifier
        display_name: Heading used in the console output
        media_types: Media types render() supports

    Example:
        class CacheConsole(DiagnosticProvider):
            id = "cache"
            display_name = "Cache"

            def render(self, media_type):
                return f"entries: {len(cache)}"
    """

    id: str = "unnamed"
    display_name: str = "Unnamed"
    media_types: FrozenSet[MediaType] = frozenset({MediaType.TEXT})

    def supports_media_type(self, media_type: MediaType) -> bool:
        return media_type in self.media_types

    @abstractmethod
    def render(self, media_type: MediaType) -> Optional[Any]:
        """
        Render the provider's state.

        Returns:
            str for TEXT, dict for JSON, or None when there is nothing to show
        """
        pass
