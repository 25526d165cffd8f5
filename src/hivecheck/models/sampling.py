"""Sampling directives for profiling queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from hivecheck.exceptions import InvalidArgumentsError


@dataclass(frozen=True)
class AbsoluteLimit:
    """Profile at most ``rows`` rows."""

    rows: int


@dataclass(frozen=True)
class FractionLimit:
    """Profile the first ``fraction`` share of a table's rows."""

    fraction: float


SampleSpec = Union[AbsoluteLimit, FractionLimit, None]


def parse_sample_spec(value: str | int | float | SampleSpec) -> SampleSpec:
    """Interpret a row-limit argument as given on the command line.

    Integral values (``10000``, ``"10000"``, ``"3.0"``) become an
    AbsoluteLimit, values with a fractional part (``0.5``, ``"2.7"``) a
    FractionLimit. Whether the resulting directive actually limits anything
    is decided later by the resolver.

    Args:
        value: Raw value, an existing directive, or None/"" for no sampling

    Returns:
        The sampling directive, or None

    Raises:
        InvalidArgumentsError: If the value is not a finite number

    """
    if value is None or isinstance(value, (AbsoluteLimit, FractionLimit)):
        return value
    if isinstance(value, bool):
        msg = f"Invalid row limit: {value!r}"
        raise InvalidArgumentsError(msg)
    if isinstance(value, int):
        return AbsoluteLimit(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return AbsoluteLimit(int(text))
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError as e:
            msg = f"Invalid row limit: {value!r}"
            raise InvalidArgumentsError(msg) from e
    else:
        number = float(value)

    if not math.isfinite(number):
        msg = f"Invalid row limit: {value!r}"
        raise InvalidArgumentsError(msg)
    if number.is_integer():
        return AbsoluteLimit(int(number))
    return FractionLimit(number)


__all__ = ["AbsoluteLimit", "FractionLimit", "SampleSpec", "parse_sample_spec"]
