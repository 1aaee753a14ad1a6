"""The berkelium DataFrame.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data from various sources (like CSV files),
explore it, apply transformations, and analyze it.

The berkelium :class:`DataFrame` is eager and fully in memory:
every operation is executed immediately, either returning
a value derived from the data or a new DataFrame.

Data is stored by column, which is convenient for statistics
that need all the values of a column at once, while rows are
computed on demand as mappings of column names to values.

>>> from berkelium import DataFrame
>>> df = DataFrame.from_records([
...     {"Name": "Amara", "City": "Colombo", "Monthly Income": 45000},
...     {"Name": "Nimal", "City": "Kandy", "Monthly Income": None},
...     {"Name": "Pathum", "City": "Negombo", "Monthly Income": 85000},
... ])
>>> df.count("Monthly Income"), df.mean("Monthly Income")
(2, 65000.0)
>>> df.dropna().index
[0, 2]
"""

from .dataframe import DataFrame, read_csv

__all__ = ("DataFrame", "read_csv")
