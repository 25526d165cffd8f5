"""Synthesis of the per-column profiling statement.

For a table with columns ``a`` and ``b`` the generated statement is::

    SELECT metric_name, metric_value
    FROM (
        SELECT MAP('min_a', CAST(MIN(t.a) AS STRING), ..., 'null_b_pct', ...)
            AS metrics_map
        FROM (SELECT * FROM <table> [LIMIT n]) AS t
    ) AS exp
    LATERAL VIEW EXPLODE(metrics_map) mm AS metric_name, metric_value

(rendered on a single line). Every column contributes five map entries, so
very wide tables can exceed the engine's limits for map expressions; use an
exclusion filter to profile them in parts.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlglot import exp

from hivecheck.exceptions import InvalidArgumentsError
from hivecheck.models.table import TableRef
from hivecheck.profiling.metrics import column_metric_entries
from hivecheck.sql.expressions import (
    alias,
    column,
    lateral_view_explode,
    render,
    string_map,
    table,
)
from hivecheck.sql.identifiers import split_columns, validate_columns

logger = logging.getLogger(__name__)

# Beyond this many columns the MAP expression tends to hit engine limits
WIDE_TABLE_COLUMNS = 100

SCAN_ALIAS = "t"
MAP_ALIAS = "metrics_map"
EXPLODED_ALIAS = "exp"
VIEW_ALIAS = "mm"
OUTPUT_COLUMNS = ("metric_name", "metric_value")


def build_scan(table_ref: TableRef, limit: int | None = None) -> exp.Select:
    """``SELECT * FROM <table> [LIMIT <limit>]``."""
    scan = exp.select(exp.Star()).from_(table(table_ref.name, table_ref.database))
    if limit is not None:
        scan = scan.limit(limit)
    return scan


def build_metrics_map(columns: Sequence[str]) -> exp.VarMap:
    """One MAP literal holding the five metric entries of every column."""
    entries = []
    for name in columns:
        entries.extend(column_metric_entries(name, SCAN_ALIAS))
    return string_map(entries)


def build_profile_select(
    table_name: str | TableRef,
    columns: Sequence[str],
    limit: int | None = None,
) -> exp.Select:
    """Build the profiling statement as a sqlglot expression.

    Args:
        table_name: Table to profile
        columns: Columns to profile, in output order
        limit: Optional LIMIT for the inner scan

    Returns:
        Outer SELECT that unpivots the metrics map

    Raises:
        InvalidArgumentsError: If columns is empty
        InvalidIdentifierError: If a name fails the identifier whitelist

    """
    table_ref = TableRef.parse(table_name)
    validated = validate_columns(split_columns(columns))
    if not validated:
        msg = f"No columns to profile for table {table_ref}"
        raise InvalidArgumentsError(msg)

    if len(validated) > WIDE_TABLE_COLUMNS:
        logger.warning(
            f"Profiling {len(validated)} columns of {table_ref} in one query; "
            f"the engine may reject a map this wide, consider an exclusion filter"
        )

    aggregate = exp.select(alias(build_metrics_map(validated), MAP_ALIAS)).from_(
        build_scan(table_ref, limit).subquery(SCAN_ALIAS)
    )
    return (
        exp.select(*(column(name) for name in OUTPUT_COLUMNS))
        .from_(aggregate.subquery(EXPLODED_ALIAS))
        .lateral(lateral_view_explode(MAP_ALIAS, VIEW_ALIAS, OUTPUT_COLUMNS))
    )


def build_profile_query(
    table_name: str | TableRef,
    columns: Sequence[str],
    limit: int | None = None,
) -> str:
    """Render the profiling statement for ``table_name`` as HiveQL text."""
    return render(build_profile_select(table_name, columns, limit))


__all__ = [
    "WIDE_TABLE_COLUMNS",
    "build_metrics_map",
    "build_profile_query",
    "build_profile_select",
    "build_scan",
]
