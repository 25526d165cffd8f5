"""Query executor interface."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs one SQL statement and returns the engine's tabular text output.

    Implementations raise ToolUnavailableError when their transport is
    missing, ConnectionFailureError when no session can be established and
    QueryExecutionError (with the engine's error text untouched) when the
    statement fails.
    """

    def execute(self, sql: str, options: Sequence[str] | None = None) -> str: ...


__all__ = ["QueryExecutor"]
