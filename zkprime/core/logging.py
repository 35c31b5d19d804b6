# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# STATUS: Core - Structured logging with context
# PURPOSE: Consistent, queryable logging across SDK components
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

Provides contextual logging for the zkprime SDK. The library itself only
emits through standard loggers; applications (and the tools/ scripts)
opt in to formatting with configure_logging().

Features:
- Contextual fields (job_id, state_id, schema_id, owner, operation)
- Context is task-local, so concurrent coroutines do not bleed fields
- JSON output for log aggregation, human output for development

Usage:
    from zkprime.core.logging import get_logger, log_context

    logger = get_logger("zkprime.services.compute")

    with log_context(job_id="3f9a...", operation="submit_job"):
        logger.info("Submitting job")
"""

import json
import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union


@dataclass
class LogContext:
    """Contextual fields attached to every record logged inside log_context()."""
    job_id: Optional[str] = None
    state_id: Optional[str] = None
    schema_id: Optional[str] = None
    owner: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, excluding None values."""
        result = {}
        for key, value in asdict(self).items():
            if value is not None and key != "extra":
                result[key] = value
        if self.extra:
            result.update(self.extra)
        return result


_current_context: ContextVar[LogContext] = ContextVar("zkprime_log_context", default=LogContext())


def get_current_context() -> LogContext:
    """Get current logging context."""
    return _current_context.get()


@contextmanager
def log_context(**kwargs):
    """
    Context manager for adding logging context.

    Args:
        **kwargs: Context fields to add

    Example:
        with log_context(state_id="ab12...", operation="create_state"):
            logger.info("Encrypting state")
    """
    # Merge with parent context
    parent = get_current_context()
    new_context = LogContext(
        job_id=kwargs.get("job_id", parent.job_id),
        state_id=kwargs.get("state_id", parent.state_id),
        schema_id=kwargs.get("schema_id", parent.schema_id),
        owner=kwargs.get("owner", parent.owner),
        operation=kwargs.get("operation", parent.operation),
        extra={**parent.extra, **kwargs.get("extra", {})},
    )

    token = _current_context.set(new_context)
    try:
        yield new_context
    finally:
        _current_context.reset(token)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON for easy parsing by log aggregators.
    """

    def __init__(self, include_context: bool = True):
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": _utc_now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            context_dict = get_current_context().to_dict()
            if context_dict:
                log_data["context"] = context_dict

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """
    Human-readable formatter for development.

    Includes context fields inline for easy reading.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human reading."""
        timestamp = _utc_now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname.ljust(8)

        context = get_current_context()
        context_parts = []
        if context.job_id:
            context_parts.append(f"job={context.job_id}")
        if context.state_id:
            context_parts.append(f"state={context.state_id}")
        if context.operation:
            context_parts.append(f"op={context.operation}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        result = f"{timestamp} {level} {record.name}{context_str}: {record.getMessage()}"

        if record.exc_info:
            result += f"\n{self.formatException(record.exc_info)}"

        return result


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the given name (thin wrapper for symmetry with tools)."""
    return logging.getLogger(name)


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
) -> None:
    """
    Configure logging for an application embedding the SDK.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Use JSON format (LOG_FORMAT=json also enables it)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or os.getenv("LOG_FORMAT", "").lower() == "json":
        formatter: logging.Formatter = StructuredFormatter(include_context=True)
    else:
        formatter = HumanFormatter()

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)


__all__ = [
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
]
