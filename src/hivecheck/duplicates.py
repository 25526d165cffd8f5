"""Duplicate-row detection with ROW_NUMBER().

Rows are partitioned by the chosen columns and numbered within each
partition; every row numbered above 1 is a duplicate. The ordering inside
the window is a constant, so which row of a group gets number 1 is
arbitrary. Only the count is meaningful: for each group of size k > 1 it
contributes k - 1.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sqlglot import exp

from hivecheck.exceptions import InvalidArgumentsError
from hivecheck.execution.results import CSV2_FLAG, extract_int
from hivecheck.models.report import DuplicateReport
from hivecheck.models.table import TableRef
from hivecheck.schema import SchemaProvider
from hivecheck.sql.expressions import (
    alias,
    column,
    count_star,
    render,
    row_number_over,
    table,
)
from hivecheck.sql.identifiers import split_columns, validate_columns

if TYPE_CHECKING:
    from hivecheck.execution.base import QueryExecutor

RANK_ALIAS = "rn"
COUNT_ALIAS = "n"


def build_duplicate_select(
    table_name: str | TableRef, columns: str | Sequence[str]
) -> exp.Select:
    """Build the duplicate-count statement as a sqlglot expression.

    Args:
        table_name: Table to check
        columns: Columns whose combined values define a duplicate; a single
            string is split on commas

    Returns:
        ``SELECT COUNT(*) AS n FROM (...) AS t WHERE rn > 1``

    Raises:
        InvalidArgumentsError: If columns is empty
        InvalidIdentifierError: If a name fails the identifier whitelist

    """
    table_ref = TableRef.parse(table_name)
    validated = validate_columns(split_columns(columns))
    if not validated:
        msg = f"No columns to check for duplicates in table {table_ref}"
        raise InvalidArgumentsError(msg)

    partition = [column(name) for name in validated]
    ranked = exp.select(
        *partition, alias(row_number_over(partition), RANK_ALIAS)
    ).from_(table(table_ref.name, table_ref.database))
    return (
        exp.select(alias(count_star(), COUNT_ALIAS))
        .from_(ranked.subquery("t"))
        .where(exp.GT(this=column(RANK_ALIAS), expression=exp.Literal.number(1)))
    )


def build_duplicate_query(
    table_name: str | TableRef, columns: str | Sequence[str]
) -> str:
    """Render the duplicate-count statement for ``table_name`` as HiveQL text."""
    return render(build_duplicate_select(table_name, columns))


class DuplicateCounter:
    """Counts duplicate rows of a table over a set of columns."""

    def __init__(self, executor: QueryExecutor) -> None:
        self.executor = executor
        self.schema_provider = SchemaProvider(executor)
        self.logger = logging.getLogger(self.__class__.__name__)

    def report(
        self,
        table: str | TableRef | None,
        columns: str | Sequence[str] | None = None,
    ) -> DuplicateReport:
        """Count duplicates and return the full report.

        Args:
            table: Table to check
            columns: Columns defining a duplicate, as a sequence or one
                comma-separated string; all columns when omitted or empty

        Returns:
            DuplicateReport with the count and the statement that produced it

        Raises:
            InvalidArgumentsError: If the table is missing
            SchemaUnavailableError: If columns are omitted and the table's
                columns cannot be listed
            QueryExecutionError: If the engine fails the duplicate query

        """
        table_ref = TableRef.parse(table)
        selected = split_columns(columns)
        if not selected:
            selected = self.schema_provider.list_columns(table_ref)

        sql = build_duplicate_query(table_ref, selected)
        self.logger.info(
            f"counting duplicates in {table_ref} over {len(selected)} columns..."
        )
        self.logger.debug(sql)
        count = extract_int(self.executor.execute(sql, [CSV2_FLAG]), sql)

        return DuplicateReport(
            table=table_ref.qualified_name,
            columns=selected,
            sql=sql,
            duplicate_count=count,
        )

    def count_duplicates(
        self,
        table: str | TableRef | None,
        columns: str | Sequence[str] | None = None,
    ) -> int:
        """Return the number of rows beyond the first in each duplicate group."""
        return self.report(table, columns).duplicate_count


__all__ = [
    "DuplicateCounter",
    "build_duplicate_query",
    "build_duplicate_select",
]
