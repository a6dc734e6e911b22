# src/logging/context.py - v1
"""Contextual logging support: attach cache name and operation to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set around cache operations.
_cache: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "cache", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    cache: str | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(cache=_cache.get(), operation=_operation.get())


def set_cache_context(cache: str | None, operation: str | None = None) -> None:
    """Set cache-level context for the current execution context."""
    _cache.set(cache)
    _operation.set(operation)


@contextmanager
def cache_context(cache: str | None, operation: str | None = None) -> Iterator[LogContext]:
    """Scope cache/operation context to a block, restoring the previous values."""
    cache_token = _cache.set(cache)
    operation_token = _operation.set(operation)
    try:
        yield get_context()
    finally:
        _operation.reset(operation_token)
        _cache.reset(cache_token)


def clear_context() -> None:
    """Reset all context variables."""
    _cache.set(None)
    _operation.set(None)
