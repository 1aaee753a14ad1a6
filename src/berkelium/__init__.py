"""Berkelium

An in-memory tabular data manipulation library.

Berkelium loads tabular data, typically from delimited text files,
into a :class:`DataFrame` and exposes query, transformation and
descriptive statistics operations over it.

The library is constituted by multiple components, each isolated
within its own module and each self documented:

* The value model (:mod:`berkelium.values`), which defines the kinds
  of values a cell can hold and how missing values are represented.
* The DataFrame (:mod:`berkelium.dataframe`), which stores the data
  and exposes the operations that can be performed on it.
* The compute functions (:mod:`berkelium.compute`), the algorithms
  behind statistics, sorting and grouping.
* The datasources (:mod:`berkelium.datasources`), which read delimited
  text and infer the type of each value.

>>> import berkelium
>>> df = berkelium.DataFrame({"n": [3, 1, 2]})
>>> df.median("n")
2.0
"""

from .dataframe import DataFrame, read_csv
from .errors import (
    ColumnNotFound,
    DataFrameError,
    DuplicateColumn,
    EmptyNumericColumn,
    InvalidArgument,
    LengthMismatch,
    NonNumericColumn,
    RowNotFound,
)
from .values import Kind

__all__ = (
    "DataFrame",
    "read_csv",
    "Kind",
    "DataFrameError",
    "ColumnNotFound",
    "DuplicateColumn",
    "EmptyNumericColumn",
    "InvalidArgument",
    "LengthMismatch",
    "NonNumericColumn",
    "RowNotFound",
)
