"""Column introspection for Hive tables."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from hivecheck.exceptions import (
    ConnectionFailureError,
    QueryExecutionError,
    SchemaUnavailableError,
)
from hivecheck.execution.results import CSV2_FLAG, parse_tabular
from hivecheck.models.table import TableRef

if TYPE_CHECKING:
    from hivecheck.execution.base import QueryExecutor

# Header printed above SHOW COLUMNS output (beeline: "field", Spark: "col_name")
HEADER_TOKENS = frozenset({"field", "col_name"})

_WHITESPACE = re.compile(r"\s+")


def columns_csv(columns: Iterable[str]) -> str:
    """Join a column list with commas, as accepted by SELECT and PARTITION BY."""
    return ",".join(columns)


class SchemaProvider:
    """Lists a table's columns in schema order."""

    def __init__(self, executor: QueryExecutor) -> None:
        self.executor = executor
        self.logger = logging.getLogger(self.__class__.__name__)

    def list_columns(
        self,
        table: str | TableRef | None,
        exclude: str | None = None,
    ) -> list[str]:
        """Return the columns of ``table``, minus any containing ``exclude``.

        Args:
            table: Table name (``db.table`` or ``table``)
            exclude: Drop every column whose name contains this substring

        Returns:
            Column names in schema order; may be empty after exclusion

        Raises:
            InvalidArgumentsError: If no table is given
            SchemaUnavailableError: If the table has no columns or the
                engine call fails
            ConnectionFailureError: If the engine cannot be reached

        """
        table_ref = TableRef.parse(table)
        sql = f"SHOW COLUMNS IN {table_ref.qualified_name}"

        try:
            output = self.executor.execute(sql, [CSV2_FLAG])
        except ConnectionFailureError:
            raise
        except QueryExecutionError as e:
            raise SchemaUnavailableError(
                table_ref.qualified_name,
                f"Could not list columns of {table_ref}: {e}",
            ) from e

        columns = self._parse_columns(output)
        if not columns:
            raise SchemaUnavailableError(
                table_ref.qualified_name, f"No columns found for table {table_ref}"
            )

        if exclude:
            kept = [column for column in columns if exclude not in column]
            self.logger.debug(
                f"Excluded {len(columns) - len(kept)} columns of {table_ref} "
                f"matching {exclude!r}"
            )
            columns = kept

        return columns

    def _parse_columns(self, output: str) -> list[str]:
        """Extract column names from SHOW COLUMNS output.

        Args:
            output: Tabular text, one column name per row

        Returns:
            Whitespace-free column names without the header row

        """
        columns = []
        for row in parse_tabular(output):
            name = _WHITESPACE.sub("", row[0]) if row else ""
            if name:
                columns.append(name)

        if columns and columns[0].lower() in HEADER_TOKENS:
            columns = columns[1:]
        return columns


__all__ = ["HEADER_TOKENS", "SchemaProvider", "columns_csv"]
