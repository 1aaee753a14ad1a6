"""Errors raised by DataFrame operations.

All the errors share :class:`DataFrameError` as their base,
so callers that don't care about the specific failure can
catch that one only.

Numeric aggregates are a notable exception to the rule:
cells that are not numbers are silently skipped instead
of raising, as mixed type columns are a legal state
of a dataframe and not a fault.
"""

__all__ = (
    "DataFrameError",
    "ColumnNotFound",
    "DuplicateColumn",
    "LengthMismatch",
    "InvalidArgument",
    "NonNumericColumn",
    "RowNotFound",
    "EmptyNumericColumn",
)


class DataFrameError(Exception):
    """Base class for all errors raised by berkelium."""


class ColumnNotFound(DataFrameError):
    """The requested column does not exist in the DataFrame."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Column not found: {name!r}")
        self.name = name


class DuplicateColumn(DataFrameError):
    """A column with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Column already exists: {name!r}")
        self.name = name


class LengthMismatch(DataFrameError):
    """Provided values don't match the number of rows."""


class InvalidArgument(DataFrameError, ValueError):
    """An argument violates the contract of the operation."""


class NonNumericColumn(DataFrameError):
    """A numeric-only operation was requested on a non numeric column."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Column is not numeric: {name!r}")
        self.name = name


class RowNotFound(DataFrameError):
    """No row has the requested label."""

    def __init__(self, label: int) -> None:
        super().__init__(f"Row not found: {label!r}")
        self.label = label


class EmptyNumericColumn(DataFrameError):
    """The column contains no numeric value to aggregate."""

    def __init__(self, name: str | None = None) -> None:
        if name is None:
            super().__init__("No numeric values to aggregate")
        else:
            super().__init__(f"Column has no numeric values: {name!r}")
        self.name = name
