"""Resolution of sampling directives into a row limit."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from sqlglot import exp

from hivecheck.execution.results import CSV2_FLAG, extract_int
from hivecheck.models.sampling import AbsoluteLimit, FractionLimit, SampleSpec
from hivecheck.models.table import TableRef
from hivecheck.sql.expressions import alias, count_star, render, table

if TYPE_CHECKING:
    from hivecheck.execution.base import QueryExecutor


def build_row_count_query(table_name: str | TableRef) -> str:
    """Build ``SELECT COUNT(*) AS n FROM <table>``."""
    table_ref = TableRef.parse(table_name)
    select = exp.select(alias(count_star(), "n")).from_(
        table(table_ref.name, table_ref.database)
    )
    return render(select)


class SampleSizeResolver:
    """Turns a SampleSpec into the LIMIT of the profiling scan."""

    def __init__(self, executor: QueryExecutor) -> None:
        self.executor = executor
        self.logger = logging.getLogger(self.__class__.__name__)

    def resolve(self, spec: SampleSpec, table: str | TableRef) -> int | None:
        """Return the effective row limit, or None for a full scan.

        A fraction strictly between 0 and 1 is applied to the table's row
        count, which costs one extra query. Any other fraction is treated as
        an absolute number of rows. A limit of 1 or less means no limit.

        Args:
            spec: Sampling directive
            table: Table the directive applies to

        Returns:
            Row limit greater than 1, or None

        """
        if spec is None:
            return None

        if isinstance(spec, FractionLimit) and 0 < spec.fraction < 1:
            table_ref = TableRef.parse(table)
            total_rows = self.count_rows(table_ref)
            limit = math.floor(spec.fraction * total_rows)
            self.logger.debug(
                f"{spec.fraction} of {total_rows} rows in {table_ref} -> {limit}"
            )
        elif isinstance(spec, FractionLimit):
            limit = math.floor(spec.fraction)
        elif isinstance(spec, AbsoluteLimit):
            limit = spec.rows
        else:
            msg = f"Unsupported sampling directive: {spec!r}"
            raise TypeError(msg)

        if limit > 1:
            return limit

        self.logger.debug(
            f"Row limit {limit} from {spec!r} is not > 1, scanning all rows"
        )
        return None

    def count_rows(self, table: str | TableRef) -> int:
        """Return the number of rows in ``table``."""
        table_ref = TableRef.parse(table)
        self.logger.info(f"computing the number of rows for {table_ref}...")
        sql = build_row_count_query(table_ref)
        return extract_int(self.executor.execute(sql, [CSV2_FLAG]), sql)


__all__ = ["SampleSizeResolver", "build_row_count_query"]
