"""Per-column profiling metrics and their HiveQL expressions."""

from __future__ import annotations

from enum import Enum

from sqlglot import exp

from hivecheck.sql.expressions import cast_to_string, column, count_star


class MetricKind(str, Enum):
    """The five statistics computed for every profiled column."""

    MIN = "min"
    MAX = "max"
    MAX_LENGTH = "max_length"
    DISTINCT_PCT = "distinct_pct"
    NULL_PCT = "null_pct"

    def metric_name(self, column_name: str) -> str:
        """Key of this metric for ``column_name`` in the unpivoted output."""
        if self is MetricKind.DISTINCT_PCT:
            return f"distinct_{column_name}_pct"
        if self is MetricKind.NULL_PCT:
            return f"null_{column_name}_pct"
        return f"{self.value}_{column_name}"

    def expression(self, column_ref: exp.Column) -> exp.Expression:
        """Aggregate expression computing this metric over ``column_ref``."""
        if self is MetricKind.MIN:
            return cast_to_string(exp.Min(this=column_ref.copy()))
        if self is MetricKind.MAX:
            return cast_to_string(exp.Max(this=column_ref.copy()))
        if self is MetricKind.MAX_LENGTH:
            return exp.Max(this=exp.Length(this=cast_to_string(column_ref.copy())))
        if self is MetricKind.DISTINCT_PCT:
            distinct = exp.Distinct(expressions=[column_ref.copy()])
            return _percentage(exp.Count(this=distinct))
        is_null = column_ref.copy().is_(exp.null())
        null_flag = (
            exp.Case()
            .when(is_null, exp.Literal.number(1))
            .else_(exp.Literal.number(0))
        )
        return _percentage(exp.Sum(this=null_flag))


# Fixed order of the map entries emitted for each column
METRIC_ORDER: tuple[MetricKind, ...] = (
    MetricKind.MIN,
    MetricKind.MAX,
    MetricKind.MAX_LENGTH,
    MetricKind.DISTINCT_PCT,
    MetricKind.NULL_PCT,
)


def _percentage(numerator: exp.Expression) -> exp.Round:
    """``ROUND(100.0 * <numerator> / COUNT(*), 2)``; COUNT(*) = 0 is not guarded."""
    scaled = exp.Mul(this=exp.Literal.number("100.0"), expression=numerator)
    ratio = exp.Div(this=scaled, expression=count_star())
    return exp.Round(this=ratio, decimals=exp.Literal.number(2))


def column_metric_entries(
    column_name: str, qualifier: str = "t"
) -> list[tuple[str, exp.Expression]]:
    """Map entries (metric name, aggregate) for one column, in METRIC_ORDER."""
    column_ref = column(column_name, qualifier)
    return [
        (kind.metric_name(column_name), kind.expression(column_ref))
        for kind in METRIC_ORDER
    ]


def metric_names(columns: list[str]) -> list[str]:
    """All metric names produced for ``columns``, in query order."""
    return [kind.metric_name(name) for name in columns for kind in METRIC_ORDER]


__all__ = ["METRIC_ORDER", "MetricKind", "column_metric_entries", "metric_names"]
