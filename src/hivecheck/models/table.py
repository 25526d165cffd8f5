"""Table reference type."""

from __future__ import annotations

from dataclasses import dataclass

from hivecheck.exceptions import InvalidArgumentsError, InvalidIdentifierError
from hivecheck.sql.identifiers import validate_identifier


@dataclass(frozen=True)
class TableRef:
    """A (optionally schema-qualified) table name, lower-cased for lookups."""

    name: str
    database: str | None = None

    def __post_init__(self) -> None:
        validate_identifier(self.name, "table")
        if self.database is not None:
            validate_identifier(self.database, "database")

    @classmethod
    def parse(cls, value: str | TableRef | None) -> TableRef:
        """Build a TableRef from ``db.table`` or ``table`` text.

        Args:
            value: Table name, or an existing TableRef

        Returns:
            Normalized TableRef

        Raises:
            InvalidArgumentsError: If no table name is given
            InvalidIdentifierError: If a name part fails the whitelist

        """
        if isinstance(value, TableRef):
            return value
        if value is None or not str(value).strip():
            msg = "A table name is required"
            raise InvalidArgumentsError(msg)

        text = str(value).strip().lower()
        parts = text.split(".")
        if len(parts) == 1:
            return cls(name=parts[0])
        if len(parts) == 2:
            return cls(name=parts[1], database=parts[0])
        raise InvalidIdentifierError(text, "table")

    @property
    def qualified_name(self) -> str:
        if self.database:
            return f"{self.database}.{self.name}"
        return self.name

    def __str__(self) -> str:
        return self.qualified_name
