"""Identifier validation applied before any name is interpolated into SQL."""

from __future__ import annotations

import re
from collections.abc import Iterable

from hivecheck.exceptions import InvalidArgumentsError, InvalidIdentifierError

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def validate_identifier(name: str, kind: str = "identifier") -> str:
    """Return ``name`` unchanged if it passes the identifier whitelist.

    Args:
        name: Column, table or database name
        kind: Label used in the error message

    Returns:
        The validated name

    Raises:
        InvalidIdentifierError: If the name is empty or contains anything
            other than letters, digits and underscores

    """
    if not isinstance(name, str) or not IDENTIFIER_PATTERN.fullmatch(name):
        raise InvalidIdentifierError(str(name), kind)
    return name


def split_columns(columns: str | Iterable[str] | None) -> list[str]:
    """Flatten a column list that may hold comma-separated strings.

    A single string such as ``"col1, col2"`` is split on commas rather than
    iterated character by character.
    """
    if columns is None:
        return []
    if isinstance(columns, str):
        columns = [columns]
    names = []
    for value in columns:
        if not isinstance(value, str):
            names.append(value)
            continue
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


def validate_columns(columns: Iterable[str]) -> list[str]:
    """Validate an ordered column list, preserving its order."""
    if isinstance(columns, str):
        msg = f"Expected a sequence of column names, got the string {columns!r}"
        raise InvalidArgumentsError(msg)
    validated = [validate_identifier(column, "column") for column in columns]
    if len(validated) != len(set(validated)):
        msg = f"Duplicate column names in {validated}"
        raise InvalidArgumentsError(msg)
    return validated


__all__ = [
    "IDENTIFIER_PATTERN",
    "split_columns",
    "validate_columns",
    "validate_identifier",
]
