"""The computations behind the DataFrame.

The :class:`berkelium.DataFrame` is in charge of storing
the data and exposing the operations that can be performed
on it, while the actual algorithms live in this package
as plain functions that receive the values of a column
and return a result.

This keeps the algorithms easy to test in isolation
and guarantees they can't depend on any state
other than the values they were given:

* :mod:`berkelium.compute.statistics` provides the numeric aggregations.
* :mod:`berkelium.compute.sorting` sorts values with a policy for missing ones.
* :mod:`berkelium.compute.grouping` identifies equal values and rows.

>>> from berkelium.compute import statistics
>>> statistics.median([5, 1, "x", 3])
3.0
"""

from . import grouping, sorting, statistics

__all__ = ("grouping", "sorting", "statistics")
