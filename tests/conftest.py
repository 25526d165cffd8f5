"""Pytest configuration and shared fixtures for hivecheck tests."""

from __future__ import annotations

import csv
import io
import re
from collections import Counter
from collections.abc import Sequence

import pytest

from hivecheck.exceptions import QueryExecutionError


class FakeExecutor:
    """Returns canned tabular text and records every statement it receives.

    ``responses`` maps a substring of the SQL to either the text to return or
    an exception to raise; the first matching entry wins.
    """

    def __init__(self, responses: dict[str, str | Exception] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, list[str]]] = []

    def execute(self, sql: str, options: Sequence[str] | None = None) -> str:
        self.calls.append((sql, list(options or [])))
        for fragment, response in self.responses.items():
            if fragment in sql:
                if isinstance(response, Exception):
                    raise response
                return response
        msg = f"No canned response for: {sql}"
        raise AssertionError(msg)

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self.calls]


class InMemoryHiveEngine:
    """Answers the statements hivecheck generates from in-memory tables.

    Only the statement shapes produced by hivecheck are understood: SHOW
    COLUMNS, the row count, the ROW_NUMBER() duplicate count and the
    exploded metrics map.
    """

    def __init__(self, tables: dict[str, tuple[list[str], list[tuple]]]) -> None:
        self.tables = tables
        self.calls: list[str] = []

    def execute(self, sql: str, options: Sequence[str] | None = None) -> str:
        self.calls.append(sql)

        match = re.fullmatch(r"SHOW COLUMNS IN (\S+)", sql)
        if match:
            columns, _ = self._table(match.group(1), sql)
            return "field\n" + "\n".join(columns) + "\n"

        if "ROW_NUMBER()" in sql:
            return self._duplicates(sql)

        match = re.fullmatch(r"SELECT COUNT\(\*\) AS n FROM (\S+)", sql)
        if match:
            _, rows = self._table(match.group(1), sql)
            return f"n\n{len(rows)}\n"

        if re.search(r"LATERAL VIEW explode\(metrics_map\)", sql, re.IGNORECASE):
            return self._metrics(sql)

        msg = f"Unsupported statement: {sql}"
        raise QueryExecutionError(msg, sql=sql, returncode=1, stderr=msg)

    def _table(self, name: str, sql: str) -> tuple[list[str], list[tuple]]:
        if name not in self.tables:
            stderr = f"Error: Table not found '{name}'"
            raise QueryExecutionError(stderr, sql=sql, returncode=2, stderr=stderr)
        return self.tables[name]

    def _duplicates(self, sql: str) -> str:
        partition = re.search(r"PARTITION BY (.+?) ORDER BY", sql).group(1)
        table = re.search(r"FROM (\S+)\) (?:AS )?t WHERE rn > 1", sql).group(1)
        columns, rows = self._table(table, sql)
        indexes = [columns.index(name.strip()) for name in partition.split(",")]
        groups = Counter(tuple(row[i] for i in indexes) for row in rows)
        count = sum(size - 1 for size in groups.values() if size > 1)
        return f"n\n{count}\n"

    def _metrics(self, sql: str) -> str:
        scan = re.search(
            r"FROM \(SELECT \* FROM (\S+?)(?: LIMIT (\d+))?\) (?:AS )?t\)", sql
        )
        columns, rows = self._table(scan.group(1), sql)
        if scan.group(2):
            rows = rows[: int(scan.group(2))]

        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["metric_name", "metric_value"])
        for column in re.findall(r"'min_(\w+)'", sql):
            values = [row[columns.index(column)] for row in rows]
            present = [v for v in values if v is not None]
            writer.writerow([f"min_{column}", str(min(present)) if present else "NULL"])
            writer.writerow([f"max_{column}", str(max(present)) if present else "NULL"])
            writer.writerow(
                [
                    f"max_length_{column}",
                    str(max(len(str(v)) for v in present)) if present else "NULL",
                ]
            )
            distinct = 100.0 * len(set(present)) / len(values)
            nulls = 100.0 * (len(values) - len(present)) / len(values)
            writer.writerow([f"distinct_{column}_pct", f"{distinct:.2f}"])
            writer.writerow([f"null_{column}_pct", f"{nulls:.2f}"])
        return buffer.getvalue()


@pytest.fixture
def fake_executor():
    """Factory for FakeExecutor instances with canned responses."""
    return FakeExecutor


@pytest.fixture
def sample_tables():
    """Small tables covering duplicates, nulls and excluded columns."""
    return {
        "sales": (["id", "code"], [(1, "a"), (1, "a"), (2, "b")]),
        "t": (["id", "tmp_flag", "name"], [(i, i % 2, f"name{i}") for i in range(10)]),
        "dev.small": (["id", "label"], [(1, "x"), (2, None), (3, "zzz")]),
    }


@pytest.fixture
def engine(sample_tables):
    """In-memory engine over the sample tables."""
    return InMemoryHiveEngine(sample_tables)
