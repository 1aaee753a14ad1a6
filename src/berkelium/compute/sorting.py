"""Sorting of column values.

Sorting a dataframe means computing the permutation
of its rows that would leave a column ordered,
and then taking the rows in that order.
This module computes such permutation.

The sort is stable: rows with equal values keep their
relative order. Absent values always come after every
defined value, regardless of the sort direction,
so that the result is deterministic even for columns
with missing data.

>>> sort_indices([3, None, 1, 2])
[2, 3, 0, 1]
>>> sort_indices([3, None, 1, 2], ascending=False)
[0, 3, 2, 1]
"""

from typing import Any, Sequence

from ..values import is_absent, sort_key

__all__ = ("sort_indices",)


def sort_indices(values: Sequence[Any], ascending: bool = True) -> list[int]:
    """Positions of the values in the order they would have when sorted.

    Values of different kinds are ordered as described by
    :func:`berkelium.values.sort_key`.

    :param values: The values to sort.
    :param ascending: Whether to sort in ascending or descending order.
    """
    defined = [pos for pos, value in enumerate(values) if not is_absent(value)]
    absent = [pos for pos, value in enumerate(values) if is_absent(value)]

    # sorted() preserves the order of equal elements also when reverse=True
    defined = sorted(
        defined, key=lambda pos: sort_key(values[pos]), reverse=not ascending
    )
    return defined + absent
