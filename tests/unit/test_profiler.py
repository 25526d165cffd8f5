"""Tests for TableProfiler with canned executor output."""

from __future__ import annotations

import pytest

from hivecheck.exceptions import (
    InvalidArgumentsError,
    QueryExecutionError,
    SchemaUnavailableError,
)
from hivecheck.models.report import MetricRecord
from hivecheck.models.sampling import AbsoluteLimit, FractionLimit
from hivecheck.profiling.profiler import TableProfiler

METRICS_OUTPUT = (
    "metric_name,metric_value\n"
    "min_id,1\n"
    "max_id,3\n"
    "max_length_id,1\n"
    "distinct_id_pct,100.0\n"
    "null_id_pct,0.0\n"
)


@pytest.fixture
def profile_executor(fake_executor):
    """Executor answering the schema, count and metric queries of table t."""
    return fake_executor(
        {
            "SHOW COLUMNS": "field\nid\ntmp_flag\n",
            "LATERAL VIEW": METRICS_OUTPUT,
            "COUNT(*) AS n": "n\n10\n",
        }
    )


class TestTableProfiler:
    """Test TableProfiler.profile and analyse_table."""

    def test_profile_without_sampling(self, profile_executor):
        report = TableProfiler(profile_executor).profile("T")

        assert report.table == "t"
        assert report.row_limit is None
        assert report.columns == ["id", "tmp_flag"]
        assert len(profile_executor.calls) == 2
        assert profile_executor.statements[0] == "SHOW COLUMNS IN t"
        assert report.sql == profile_executor.statements[1]
        assert "LIMIT" not in report.sql

    def test_metrics_are_parsed_in_engine_order(self, profile_executor):
        records = TableProfiler(profile_executor).analyse_table("t")

        assert records[0] == MetricRecord(metric_name="min_id", metric_value="1")
        assert [r.metric_name for r in records] == [
            "min_id",
            "max_id",
            "max_length_id",
            "distinct_id_pct",
            "null_id_pct",
        ]

    def test_fraction_issues_count_before_main_query(self, profile_executor):
        report = TableProfiler(profile_executor).profile("t", FractionLimit(0.5))

        assert report.row_limit == 5
        assert [sql.split(" ")[0:2] for sql in profile_executor.statements] == [
            ["SHOW", "COLUMNS"],
            ["SELECT", "COUNT(*)"],
            ["SELECT", "metric_name,"],
        ]
        assert "(SELECT * FROM t LIMIT 5) AS t" in report.sql

    def test_sample_given_as_text(self, profile_executor):
        report = TableProfiler(profile_executor).profile("t", "10000")
        assert report.row_limit == 10000
        assert "LIMIT 10000" in report.sql

    def test_limit_of_one_is_ignored(self, profile_executor):
        report = TableProfiler(profile_executor).profile("t", AbsoluteLimit(1))
        assert report.row_limit is None
        assert "LIMIT" not in report.sql

    def test_exclude_is_applied(self, profile_executor):
        report = TableProfiler(profile_executor).profile("t", None, "tmp")

        assert report.columns == ["id"]
        assert report.excluded == "tmp"
        assert "tmp_flag" not in report.sql

    def test_everything_excluded_is_reported(self, profile_executor):
        with pytest.raises(InvalidArgumentsError, match="No columns to profile"):
            TableProfiler(profile_executor).profile("t", None, "i")
        assert "LATERAL VIEW" not in " ".join(profile_executor.statements)

    def test_invalid_sample_fails_before_any_query(self, profile_executor):
        with pytest.raises(InvalidArgumentsError):
            TableProfiler(profile_executor).profile("t", "lots")
        assert profile_executor.calls == []

    def test_missing_table(self, profile_executor):
        with pytest.raises(InvalidArgumentsError):
            TableProfiler(profile_executor).profile(None)
        assert profile_executor.calls == []

    def test_schema_unavailable(self, fake_executor):
        executor = fake_executor({"SHOW COLUMNS": QueryExecutionError("no table")})
        with pytest.raises(SchemaUnavailableError):
            TableProfiler(executor).profile("t")

    def test_engine_failure_surfaces_unchanged(self, fake_executor):
        error = QueryExecutionError(
            "java.lang.ArrayIndexOutOfBoundsException: -128", returncode=2
        )
        executor = fake_executor({"SHOW COLUMNS": "field\nid\n", "LATERAL VIEW": error})
        with pytest.raises(QueryExecutionError) as exc_info:
            TableProfiler(executor).profile("t")
        assert exc_info.value is error

    def test_idempotent(self, profile_executor):
        profiler = TableProfiler(profile_executor)
        first = profiler.profile("t", 100)
        second = profiler.profile("t", 100)

        assert first.sql == second.sql
        assert first.metrics == second.metrics


class TestParseMetrics:
    """Test TableProfiler.parse_metrics."""

    def test_header_is_skipped(self):
        records = TableProfiler.parse_metrics(METRICS_OUTPUT)
        assert len(records) == 5
        assert records[-1].as_tuple() == ("null_id_pct", "0.0")

    def test_boxed_output(self):
        text = (
            "+----------------+---------------+\n"
            "|  metric_name   | metric_value  |\n"
            "+----------------+---------------+\n"
            "| min_name       | Alice         |\n"
            "| null_name_pct  | 12.5          |\n"
            "+----------------+---------------+\n"
        )
        records = TableProfiler.parse_metrics(text)
        assert [r.as_tuple() for r in records] == [
            ("min_name", "Alice"),
            ("null_name_pct", "12.5"),
        ]

    def test_values_with_delimiters_survive(self):
        text = 'metric_name,metric_value\nmax_city,"Paris, France"\n'
        records = TableProfiler.parse_metrics(text)
        assert records[0].metric_value == "Paris, France"

    def test_missing_value_becomes_empty_string(self):
        records = TableProfiler.parse_metrics("metric_name,metric_value\nmin_x\n")
        assert records[0].metric_value == ""

    def test_empty_output(self):
        assert TableProfiler.parse_metrics("") == []
