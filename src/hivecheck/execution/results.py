"""Parsing of beeline tabular output.

beeline prints results either as delimited text (``csv2``, ``tsv2``, ``dsv``)
or, by default, as a boxed table::

    +------+
    | _c0  |
    +------+
    | 5    |
    +------+

Both shapes are reduced to a list of rows of cell strings, header included.
"""

from __future__ import annotations

import csv
import io
from decimal import Decimal, InvalidOperation

from hivecheck.exceptions import QueryExecutionError

CSV2_FLAG = "--outputformat=csv2"


def _is_border(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and set(stripped) <= {"+", "-"}


def _detect_delimiter(lines: list[str]) -> str:
    sample = lines[0]
    if "\t" in sample:
        return "\t"
    if "|" in sample:
        return "|"
    return ","


def parse_tabular(text: str) -> list[list[str]]:
    """Split beeline output into rows of cells.

    Args:
        text: Raw stdout of a query

    Returns:
        Rows (header first when the engine printed one), cells stripped

    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return []

    if any(_is_border(line) for line in lines):
        rows = []
        for line in lines:
            if _is_border(line):
                continue
            cells = line.strip().strip("|").split("|")
            rows.append([cell.strip() for cell in cells])
        return rows

    # Quoted cells may span lines, so the raw text goes to the reader as-is
    reader = csv.reader(io.StringIO(text), delimiter=_detect_delimiter(lines))
    return [
        [cell.strip() for cell in row]
        for row in reader
        if any(cell.strip() for cell in row)
    ]


def extract_scalar(text: str, sql: str | None = None) -> str:
    """Return the single value of a one-row, one-column result.

    The first row is treated as the header when more than one row is present.

    Raises:
        QueryExecutionError: If the output holds no value

    """
    rows = parse_tabular(text)
    data_rows = rows[1:] if len(rows) > 1 else rows
    if not data_rows or not data_rows[-1] or data_rows[-1][0] == "":
        msg = f"Expected a single value from the engine, got: {text!r}"
        raise QueryExecutionError(msg, sql=sql)
    return data_rows[-1][0]


def extract_int(text: str, sql: str | None = None) -> int:
    """Return the single value of a result as an integer."""
    value = extract_scalar(text, sql)
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return int(Decimal(value))
    except (InvalidOperation, OverflowError, ValueError) as e:
        msg = f"Expected an integer from the engine, got: {value!r}"
        raise QueryExecutionError(msg, sql=sql) from e


__all__ = ["CSV2_FLAG", "extract_int", "extract_scalar", "parse_tabular"]
