"""Descriptive statistics over the values of a column.

All the functions in this module receive the sequence
of values of a column as an explicit argument and return
a freshly computed result, no state is shared between calls.

Columns can contain values of mixed kinds, so every
numeric aggregation operates on the **numeric subsequence**
of the column: the values of kind ``number`` in their original
order. Text, booleans, dates, structures and absent values
are silently skipped.

>>> values = [4, None, "four", 1, 3, 2]
>>> numeric_subsequence(values)
[4, 1, 3, 2]
>>> mean(values)
2.5
>>> quartiles(values)
{'25%': 1.75, '50%': 2.5, '75%': 3.25}

The computations are performed by :mod:`pyarrow.compute`
kernels on a ``float64`` array, with the exception of
the percentile, which is implemented by :func:`get_percentile`
so that its interpolation rule is explicit.

Policies for the corner cases:

* ``mean`` and ``std`` of an empty numeric subsequence are ``nan``.
* ``variance`` is ``nan`` when there are less than two numbers.
* ``minimum``, ``maximum`` and ``quartiles`` raise
  :class:`berkelium.errors.EmptyNumericColumn` when there are no numbers.

Beware that :func:`std` computes the **population** standard
deviation (divided by ``n``) while :func:`variance` computes
the **sample** variance (divided by ``n - 1``)::

    variance(values) == std(values) ** 2 * n / (n - 1)
"""

import logging
import math
from typing import Any, Sequence

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import EmptyNumericColumn, InvalidArgument
from ..values import Kind, kind_of

__all__ = (
    "QUARTILES",
    "DESCRIBE_PRECISION",
    "numeric_subsequence",
    "count",
    "minimum",
    "maximum",
    "mean",
    "std",
    "variance",
    "get_percentile",
    "quartiles",
    "median",
    "mode",
    "describe",
)

logger = logging.getLogger(__name__)

QUARTILES = {"25%": 0.25, "50%": 0.5, "75%": 0.75}
"""Labels and percentiles computed by :func:`quartiles`."""

DESCRIBE_PRECISION = 6
"""Number of decimal digits statistics are rounded to by :func:`describe`."""


def numeric_subsequence(values: Sequence[Any]) -> list[Any]:
    """Pick the values of kind ``number``, preserving their order."""
    numbers = [v for v in values if kind_of(v) is Kind.NUMBER]
    skipped = len(values) - len(numbers)
    if skipped:
        logger.debug("Skipped %d non numeric values out of %d", skipped, len(values))
    return numbers


def _to_arrow(values: Sequence[Any]) -> pa.Array:
    # Integers beyond double precision are rounded, Arrow would refuse them.
    return pa.array(
        [_as_float(v) for v in numeric_subsequence(values)], type=pa.float64()
    )


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def count(values: Sequence[Any]) -> int:
    """Count the values that are not absent, of any kind."""
    return sum(1 for v in values if kind_of(v) is not Kind.NULL)


def minimum(values: Sequence[Any]) -> float:
    """Smallest number in the values."""
    return _min_max(values)["min"]


def maximum(values: Sequence[Any]) -> float:
    """Biggest number in the values."""
    return _min_max(values)["max"]


def _min_max(values: Sequence[Any]) -> dict[str, float]:
    numbers = _to_arrow(values)
    if len(numbers) == 0:
        raise EmptyNumericColumn()
    return pc.min_max(numbers).as_py()


def mean(values: Sequence[Any]) -> float:
    """Arithmetic mean of the numbers, ``nan`` when there are none."""
    numbers = _to_arrow(values)
    if len(numbers) == 0:
        return math.nan
    return pc.mean(numbers).as_py()


def std(values: Sequence[Any]) -> float:
    """Population standard deviation of the numbers.

    The squared distances from the :func:`mean` are
    divided by ``n``, not ``n - 1``.
    """
    numbers = _to_arrow(values)
    if len(numbers) == 0:
        return math.nan
    return pc.stddev(numbers, ddof=0).as_py()


def variance(values: Sequence[Any]) -> float:
    """Sample variance of the numbers.

    The squared distances from the :func:`mean` are
    divided by ``n - 1``. With less than two numbers
    the variance is undefined and ``nan`` is returned.
    """
    numbers = _to_arrow(values)
    if len(numbers) < 2:
        return math.nan
    return pc.variance(numbers, ddof=1).as_py()


def get_percentile(p: float, sorted_values: Sequence[float]) -> float:
    """Compute a percentile of sorted values with linear interpolation.

    Given the position ``index = p * (k - 1)`` in a sequence
    of ``k`` sorted values, the result interpolates between
    the values right before and after that position::

        v[floor(index)] + (v[ceil(index)] - v[floor(index)]) * (index - floor(index))

    A single value is the result for any percentile.

    >>> get_percentile(0.25, [10, 20, 30, 40])
    17.5
    >>> get_percentile(0.9, [7])
    7

    :param p: The percentile in the ``[0, 1]`` range.
    :param sorted_values: The values, already sorted in ascending order.
    """
    if not 0 <= p <= 1:
        raise InvalidArgument(f"Percentile must be between 0 and 1, got {p}")
    if len(sorted_values) == 0:
        raise InvalidArgument("Cannot compute a percentile of no values")

    index = p * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return sorted_values[lower]
    fraction = index - lower
    return sorted_values[lower] + (sorted_values[upper] - sorted_values[lower]) * fraction


def quartiles(values: Sequence[Any]) -> dict[str, float]:
    """Compute the 25th, 50th and 75th percentiles of the numbers.

    The values are sorted by the function itself,
    so their order is irrelevant.
    """
    numbers = _to_arrow(values)
    if len(numbers) == 0:
        raise EmptyNumericColumn()
    sorted_numbers = pc.take(numbers, pc.sort_indices(numbers)).to_pylist()
    return {
        label: get_percentile(p, sorted_numbers) for label, p in QUARTILES.items()
    }


def median(values: Sequence[Any]) -> float:
    """The 50th percentile of the numbers."""
    return quartiles(values)["50%"]


def mode(values: Sequence[Any]) -> float | None:
    """The most frequent number.

    When all distinct numbers occur the same amount of times
    there is no meaningful mode and ``None`` is returned.
    When more numbers tie for the highest frequency,
    the biggest of them is returned.

    The result is the value as found in the column, so
    integers stay integers.

    >>> mode([1, 2, 2, 3])
    2
    >>> mode([1, 1, 3, 3, 2]) , mode([1, 2, 3]) is None
    (3, True)
    """
    numbers = _to_arrow(values)
    if len(numbers) == 0:
        return None

    frequencies = pc.value_counts(numbers).to_pylist()
    counts = [f["counts"] for f in frequencies]
    highest = max(counts)
    if highest == min(counts):
        return None
    winner = max(f["values"] for f in frequencies if f["counts"] == highest)
    return next(v for v in numeric_subsequence(values) if _as_float(v) == winner)


def describe(values: Sequence[Any]) -> dict[str, float]:
    """Summarize the values with the most common statistics.

    Provides ``count``, ``mean``, ``std``, ``min``,
    the quartiles and ``max``, rounded to
    :data:`DESCRIBE_PRECISION` decimal digits.
    """
    bounds = _min_max(values)
    stats = {
        "count": count(values),
        "mean": mean(values),
        "std": std(values),
        "min": bounds["min"],
        **quartiles(values),
        "max": bounds["max"],
    }
    return {name: round(value, DESCRIBE_PRECISION) for name, value in stats.items()}
