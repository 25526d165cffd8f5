"""End-to-end workflows against the in-memory engine."""

from __future__ import annotations

import re

import pytest

from hivecheck import analyse_table, count_duplicates, list_columns
from hivecheck.duplicates import DuplicateCounter
from hivecheck.exceptions import InvalidArgumentsError, SchemaUnavailableError
from hivecheck.models.sampling import AbsoluteLimit, FractionLimit
from hivecheck.profiling.profiler import TableProfiler


class TestDuplicateWorkflow:
    """Duplicate counting over whole rows and column subsets."""

    def test_whole_row_duplicates(self, engine):
        assert count_duplicates("sales", executor=engine) == 1

    def test_subset_of_columns(self, engine):
        assert count_duplicates("sales", ["id"], executor=engine) == 1
        assert count_duplicates("sales", ["code"], executor=engine) == 1

    def test_unique_table(self, engine):
        assert count_duplicates("dev.small", executor=engine) == 0

    def test_default_uses_schema_columns(self, engine):
        report = DuplicateCounter(engine).report("SALES")

        assert report.columns == ["id", "code"]
        assert engine.calls[0] == "SHOW COLUMNS IN sales"
        assert "PARTITION BY id, code" in report.sql


class TestProfilingWorkflow:
    """Profiling with and without sampling."""

    def test_fraction_of_rows(self, engine):
        report = TableProfiler(engine).profile("t", FractionLimit(0.5))

        assert report.row_limit == 5
        assert engine.calls[1] == "SELECT COUNT(*) AS n FROM t"
        assert "LIMIT 5" in report.sql
        assert report.get_metric("max_id") == "4"

    def test_limit_larger_than_table(self, engine):
        report = TableProfiler(engine).profile("dev.small", AbsoluteLimit(10000))

        assert "LIMIT 10000" in report.sql
        assert report.get_metric("max_id") == "3"
        assert report.get_metric("null_label_pct") == "33.33"
        assert report.get_metric("max_length_label") == "3"

    def test_exclusion(self, engine):
        assert list_columns("T", "tmp", executor=engine) == ["id", "name"]

        records = analyse_table("t", None, "tmp", executor=engine)
        names = [record.metric_name for record in records]
        assert len(names) == 10
        assert not any("tmp" in name for name in names)

    def test_percentages_are_bounded(self, engine):
        records = analyse_table("dev.small", executor=engine)
        percentages = [r for r in records if r.metric_name.endswith("_pct")]

        assert len(percentages) == 4
        for record in percentages:
            assert re.fullmatch(r"\d+\.\d{2}", record.metric_value)
            assert 0 <= float(record.metric_value) <= 100

    def test_repeat_runs_agree(self, engine):
        first = analyse_table("t", 0.5, executor=engine)
        second = analyse_table("t", 0.5, executor=engine)
        assert first == second

    def test_unknown_table(self, engine):
        with pytest.raises(SchemaUnavailableError) as exc_info:
            analyse_table("missing", executor=engine)
        assert exc_info.value.table == "missing"

    def test_all_columns_excluded(self, engine):
        with pytest.raises(InvalidArgumentsError):
            analyse_table("sales", None, "d", executor=engine)
