"""Top-level operations.

Each function accepts an optional executor; without one, a BeelineExecutor
configured from the environment (HIVE_SERVER, HIVE_PORT, ...) is used.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from hivecheck.duplicates import DuplicateCounter
from hivecheck.execution.beeline import BeelineExecutor
from hivecheck.profiling.profiler import TableProfiler
from hivecheck.schema import SchemaProvider

if TYPE_CHECKING:
    from hivecheck.execution.base import QueryExecutor
    from hivecheck.models.report import MetricRecord
    from hivecheck.models.sampling import SampleSpec
    from hivecheck.models.table import TableRef


def _default_executor(executor: QueryExecutor | None) -> QueryExecutor:
    return executor if executor is not None else BeelineExecutor()


def list_columns(
    table: str | TableRef | None,
    exclude: str | None = None,
    executor: QueryExecutor | None = None,
) -> list[str]:
    """Columns of ``table`` in schema order, minus those containing ``exclude``."""
    return SchemaProvider(_default_executor(executor)).list_columns(table, exclude)


def count_duplicates(
    table: str | TableRef | None,
    columns: str | Sequence[str] | None = None,
    executor: QueryExecutor | None = None,
) -> int:
    """Number of duplicate rows of ``table`` over ``columns`` (default: all).

    ``columns`` may be a sequence of names or one comma-separated string such
    as ``"col1, col2"``.
    """
    counter = DuplicateCounter(_default_executor(executor))
    return counter.count_duplicates(table, columns)


def analyse_table(
    table: str | TableRef | None,
    sample: SampleSpec | str | int | float = None,
    exclude: str | None = None,
    executor: QueryExecutor | None = None,
) -> list[MetricRecord]:
    """Per-column metrics of ``table`` as (metric_name, metric_value) records."""
    profiler = TableProfiler(_default_executor(executor))
    return profiler.analyse_table(table, sample, exclude)


__all__ = ["analyse_table", "count_duplicates", "list_columns"]
