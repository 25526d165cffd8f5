"""Exception hierarchy for hivecheck."""

from __future__ import annotations


class HiveCheckError(Exception):
    """Base class for all hivecheck errors."""


class InvalidArgumentsError(HiveCheckError, ValueError):
    """A required argument is missing or malformed."""


class InvalidIdentifierError(InvalidArgumentsError):
    """An identifier contains characters outside the allowed whitelist."""

    def __init__(self, identifier: str, kind: str = "identifier") -> None:
        super().__init__(
            f"Invalid {kind} {identifier!r}: "
            "only letters, digits and underscores are allowed"
        )
        self.identifier = identifier
        self.kind = kind


class ToolUnavailableError(HiveCheckError):
    """The query-execution transport is not present in the environment."""


class SchemaUnavailableError(HiveCheckError):
    """The table does not exist or its schema could not be introspected."""

    def __init__(self, table: str, message: str | None = None) -> None:
        super().__init__(message or f"Schema unavailable for table {table}")
        self.table = table


class QueryExecutionError(HiveCheckError):
    """The engine rejected or failed to run a statement.

    The engine's error output is kept verbatim in ``stderr``.
    """

    def __init__(
        self,
        message: str,
        sql: str | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        super().__init__(message)
        self.sql = sql
        self.returncode = returncode
        self.stderr = stderr or ""


class ConnectionFailureError(QueryExecutionError):
    """No usable connection to the engine could be established."""


__all__ = [
    "ConnectionFailureError",
    "HiveCheckError",
    "InvalidArgumentsError",
    "InvalidIdentifierError",
    "QueryExecutionError",
    "SchemaUnavailableError",
    "ToolUnavailableError",
]
