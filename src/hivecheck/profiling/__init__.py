"""Column profiling: metric definitions, query synthesis and execution."""

from hivecheck.profiling.metrics import (
    METRIC_ORDER,
    MetricKind,
    column_metric_entries,
    metric_names,
)
from hivecheck.profiling.profiler import TableProfiler
from hivecheck.profiling.query_builder import (
    WIDE_TABLE_COLUMNS,
    build_profile_query,
    build_profile_select,
)

__all__ = [
    "METRIC_ORDER",
    "WIDE_TABLE_COLUMNS",
    "MetricKind",
    "TableProfiler",
    "build_profile_query",
    "build_profile_select",
    "column_metric_entries",
    "metric_names",
]
