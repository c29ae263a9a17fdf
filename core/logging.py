# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# EPOCH: 1 - RUNTIME INTROSPECTION
# STATUS: Core - Structured logging with context
# PURPOSE: Tag log lines with the feature and path being worked on
# CREATED: 18 OCT 2026
# ============================================================================
"""
Structured Logging

Two output formats, chosen once by configure_logging():

    human   2026-10-18 12:00:00 INFO     server.http [feature=health]: ...
    json    {"timestamp": ..., "level": ..., "logger": ..., "message": ...,
             "component": ..., "context": {...}, "data": {...}}

Context fields come from the innermost log_context() block on the current
thread. The component comes from the adapter returned by get_logger().

Usage:
    from core.logging import ComponentType, get_logger, log_context

    logger = get_logger(__name__, ComponentType.HEALTH)

    with log_context(feature="health", path="/health"):
        logger.info("Registering health endpoints")
"""

import json
import logging
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, asdict, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union


class ComponentType(str, Enum):
    """Component a logger belongs to."""
    SERVER = "server"
    HEALTH = "health"


@dataclass(frozen=True)
class LogContext:
    """Fields attached to every log line emitted inside a log_context() block."""
    feature: Optional[str] = None
    path: Optional[str] = None
    operation: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


_local = threading.local()


def get_current_context() -> LogContext:
    """Innermost context on this thread (empty outside any block)."""
    stack = getattr(_local, "stack", None)
    return stack[-1] if stack else LogContext()


@contextmanager
def log_context(**fields):
    """
    Push context fields for the duration of the block.

    Unspecified fields are inherited from the enclosing block.

    Example:
        with log_context(feature="console", path="/dev"):
            logger.info("Registering route")
    """
    context = replace(get_current_context(), **fields)
    if not hasattr(_local, "stack"):
        _local.stack = []
    _local.stack.append(context)
    try:
        yield context
    finally:
        _local.stack.pop()


def _timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": _timestamp(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        component = getattr(record, "component", None)
        if component:
            entry["component"] = component

        context = get_current_context().to_dict()
        if context:
            entry["context"] = context

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry["source"] = f"{record.filename}:{record.lineno}"
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Single-line format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        tags = [
            f"{key}={value}"
            for key, value in get_current_context().to_dict().items()
            if key in ("feature", "path")
        ]
        component = getattr(record, "component", None)
        if component:
            tags.insert(0, f"component={component}")
        tag_str = f" [{', '.join(tags)}]" if tags else ""

        line = (
            f"{datetime.utcnow():%Y-%m-%d %H:%M:%S} {record.levelname:<8} "
            f"{record.name}{tag_str}: {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ContextLogger(logging.LoggerAdapter):
    """Adapter that stamps the logger's component onto each record."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        component = self.extra.get("component")
        if component is not None:
            extra.setdefault("component", getattr(component, "value", component))
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(
    name: str,
    component: Optional[ComponentType] = None,
) -> ContextLogger:
    """Logger for a module, tagged with its component."""
    return ContextLogger(logging.getLogger(name), {"component": component})


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Log level name or number (unknown names fall back to INFO)
        json_output: Emit StructuredFormatter JSON instead of human lines
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if json_output else HumanFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)


def log_checkpoint(
    name: str,
    data: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a named startup milestone (e.g. "feature_activated").

    The current context's feature is recorded alongside the checkpoint data.
    """
    payload: Dict[str, Any] = {"checkpoint": name}
    feature = get_current_context().feature
    if feature:
        payload["feature"] = feature
    if data:
        payload.update(data)

    (logger or logging.getLogger("checkpoint")).info(
        f"CHECKPOINT: {name}", extra={"data": payload}
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
    "log_checkpoint",
]
