"""Identify equal values and rows.

Finding unique values, counting occurrences,
grouping rows and removing duplicates all rely
on being able to tell when two values are the same.

Values are compared by their content, as returned by
:func:`berkelium.values.hashable`, so that nested
structures like ``{"a": [1, 2]}`` are equal when they
contain the same data even when they are different objects.

Every function works on the sequence of values it receives
and returns a new structure, keeping the order
in which values were first seen.
"""

from typing import Any, Hashable, Sequence

from ..values import hashable, is_absent

__all__ = (
    "unique",
    "value_counts",
    "group_positions",
    "first_occurrences",
)


def unique(values: Sequence[Any]) -> list[Any]:
    """Distinct values that are not absent, in order of first occurrence.

    >>> unique([3, 1, None, 3, "a", 1])
    [3, 1, 'a']
    """
    seen: set[Hashable] = set()
    result = []
    for value in values:
        if is_absent(value):
            continue
        key = hashable(value)
        if key not in seen:
            seen.add(key)
            result.append(value)
    return result


def value_counts(values: Sequence[Any]) -> list[tuple[Any, int]]:
    """Count occurrences of each distinct value that is not absent.

    The result is a list of ``(value, count)`` pairs as values
    might not be usable as dictionary keys (e.g. nested structures).

    >>> value_counts(["a", "b", "a", None])
    [('a', 2), ('b', 1)]
    """
    counts: dict[Hashable, list] = {}
    for value in values:
        if is_absent(value):
            continue
        key = hashable(value)
        if key in counts:
            counts[key][1] += 1
        else:
            counts[key] = [value, 1]
    return [(value, total) for value, total in counts.values()]


def group_positions(values: Sequence[Any]) -> list[tuple[Any, list[int]]]:
    """Positions of the values grouped by distinct value.

    Absent values form a group too, keyed by ``None``.

    >>> group_positions(["x", "y", "x", None])
    [('x', [0, 2]), ('y', [1]), (None, [3])]
    """
    groups: dict[Hashable, tuple[Any, list[int]]] = {}
    for pos, value in enumerate(values):
        key = hashable(value)
        if key not in groups:
            groups[key] = (None if is_absent(value) else value, [])
        groups[key][1].append(pos)
    return list(groups.values())


def first_occurrences(rows: Sequence[Sequence[Any]]) -> list[int]:
    """Positions of the rows that are not a repetition of a previous row.

    Rows are equal when all their values are structurally equal.

    >>> first_occurrences([(1, "a"), (2, "b"), (1, "a")])
    [0, 1]
    """
    seen: set[Hashable] = set()
    positions = []
    for pos, row in enumerate(rows):
        key = tuple(hashable(value) for value in row)
        if key not in seen:
            seen.add(key)
            positions.append(pos)
    return positions
