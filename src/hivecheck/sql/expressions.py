"""HiveQL expression helpers built on sqlglot.

Every name passes the identifier whitelist before it becomes a sqlglot node,
and statements are rendered with the Hive dialect on a single line.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlglot import exp

from hivecheck.sql.identifiers import validate_identifier

DIALECT = "hive"


def column(name: str, qualifier: str | None = None) -> exp.Column:
    """Column reference ``[qualifier.]name``."""
    validate_identifier(name, "column")
    if qualifier is not None:
        validate_identifier(qualifier, "alias")
    return exp.column(name, table=qualifier)


def table(name: str, database: str | None = None) -> exp.Table:
    """Table reference ``[database.]name``."""
    validate_identifier(name, "table")
    if database is not None:
        validate_identifier(database, "database")
    return exp.table_(name, db=database)


def alias(expression: exp.Expression, name: str) -> exp.Alias:
    """``<expression> AS name``."""
    validate_identifier(name, "alias")
    return exp.alias_(expression, name)


def count_star() -> exp.Count:
    return exp.Count(this=exp.Star())


def cast_to_string(expression: exp.Expression) -> exp.Cast:
    return exp.cast(expression, exp.DataType.Type.TEXT)


def string_map(entries: Sequence[tuple[str, exp.Expression]]) -> exp.VarMap:
    """``MAP('k1', v1, 'k2', v2, ...)`` keeping the order of ``entries``."""
    keys = [exp.Literal.string(key) for key, _ in entries]
    values = [value for _, value in entries]
    return exp.VarMap(
        keys=exp.Array(expressions=keys),
        values=exp.Array(expressions=values),
    )


def row_number_over(partition_by: Sequence[exp.Expression]) -> exp.Window:
    """``ROW_NUMBER() OVER (PARTITION BY ... ORDER BY NULL)``.

    The constant ordering makes the numbering within a partition arbitrary.
    """
    return exp.Window(
        this=exp.RowNumber(),
        partition_by=[expression.copy() for expression in partition_by],
        order=exp.Order(expressions=[exp.Ordered(this=exp.Null(), nulls_first=True)]),
    )


def lateral_view_explode(
    source: str, view_alias: str, output_columns: Sequence[str]
) -> exp.Lateral:
    """``LATERAL VIEW explode(source) view_alias AS col1, col2``."""
    for name in (source, view_alias, *output_columns):
        validate_identifier(name, "alias")
    return exp.Lateral(
        this=exp.Explode(this=exp.column(source)),
        view=True,
        alias=exp.TableAlias(
            this=exp.to_identifier(view_alias),
            columns=[exp.to_identifier(name) for name in output_columns],
        ),
    )


def render(expression: exp.Expression) -> str:
    """Render ``expression`` as single-line HiveQL."""
    return expression.sql(dialect=DIALECT)


__all__ = [
    "DIALECT",
    "alias",
    "cast_to_string",
    "column",
    "count_star",
    "lateral_view_explode",
    "render",
    "row_number_over",
    "string_map",
    "table",
]
