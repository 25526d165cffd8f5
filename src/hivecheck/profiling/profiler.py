"""Profile a table's columns in a single query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hivecheck.execution.results import CSV2_FLAG, parse_tabular
from hivecheck.models.report import MetricRecord, ProfileReport
from hivecheck.models.sampling import SampleSpec, parse_sample_spec
from hivecheck.models.table import TableRef
from hivecheck.profiling.query_builder import OUTPUT_COLUMNS, build_profile_query
from hivecheck.sampling import SampleSizeResolver
from hivecheck.schema import SchemaProvider

if TYPE_CHECKING:
    from hivecheck.execution.base import QueryExecutor


class TableProfiler:
    """Computes min, max, max length, distinct % and null % for every column."""

    def __init__(self, executor: QueryExecutor) -> None:
        """Initialize the profiler.

        Args:
            executor: Executor used for schema, row-count and metric queries

        """
        self.executor = executor
        self.schema_provider = SchemaProvider(executor)
        self.resolver = SampleSizeResolver(executor)
        self.logger = logging.getLogger(self.__class__.__name__)

    def profile(
        self,
        table: str | TableRef | None,
        sample: SampleSpec | str | int | float = None,
        exclude: str | None = None,
    ) -> ProfileReport:
        """Profile ``table`` and return the full report.

        Args:
            table: Table to profile
            sample: Row limit or fraction of rows to scan (None for all rows)
            exclude: Skip columns whose name contains this substring

        Returns:
            ProfileReport with one MetricRecord per column and metric

        Raises:
            InvalidArgumentsError: If the table is missing, the sample is not
                a number, or no columns remain after exclusion
            SchemaUnavailableError: If the table's columns cannot be listed
            QueryExecutionError: If the engine fails the metric query

        """
        table_ref = TableRef.parse(table)
        spec = parse_sample_spec(sample)

        columns = self.schema_provider.list_columns(table_ref, exclude)
        limit = self.resolver.resolve(spec, table_ref)
        sql = build_profile_query(table_ref, columns, limit)

        self.logger.info(f"computing the metrics for {table_ref}...")
        self.logger.debug(sql)
        output = self.executor.execute(sql, [CSV2_FLAG])

        metrics = self.parse_metrics(output)
        self.logger.info(
            f"Profiled {len(columns)} columns of {table_ref}: {len(metrics)} metrics"
        )
        return ProfileReport(
            table=table_ref.qualified_name,
            row_limit=limit,
            columns=columns,
            excluded=exclude or None,
            sql=sql,
            metrics=metrics,
        )

    def analyse_table(
        self,
        table: str | TableRef | None,
        sample: SampleSpec | str | int | float = None,
        exclude: str | None = None,
    ) -> list[MetricRecord]:
        """Profile ``table`` and return only the metric records."""
        return self.profile(table, sample, exclude).metrics

    @staticmethod
    def parse_metrics(output: str) -> list[MetricRecord]:
        """Turn the unpivoted query output into MetricRecords.

        Args:
            output: Tabular text with a metric_name/metric_value header

        Returns:
            Records in the order the engine returned them

        """
        rows = parse_tabular(output)
        if rows and tuple(cell.lower() for cell in rows[0][:2]) == OUTPUT_COLUMNS:
            rows = rows[1:]

        records = []
        for row in rows:
            if not row or not row[0]:
                continue
            value = "|".join(row[1:]) if len(row) > 1 else ""
            records.append(MetricRecord(metric_name=row[0], metric_value=value))
        return records


__all__ = ["TableProfiler"]
