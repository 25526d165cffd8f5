"""HiveQL construction with sqlglot, guarded by an identifier whitelist."""

from hivecheck.sql.expressions import (
    DIALECT,
    alias,
    cast_to_string,
    column,
    count_star,
    lateral_view_explode,
    render,
    row_number_over,
    string_map,
    table,
)
from hivecheck.sql.identifiers import (
    split_columns,
    validate_columns,
    validate_identifier,
)

__all__ = [
    "DIALECT",
    "alias",
    "cast_to_string",
    "column",
    "count_star",
    "lateral_view_explode",
    "render",
    "row_number_over",
    "split_columns",
    "string_map",
    "table",
    "validate_columns",
    "validate_identifier",
]
