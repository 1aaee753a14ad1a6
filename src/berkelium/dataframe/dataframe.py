"""The DataFrame object itself."""

import logging
from copy import deepcopy
from typing import Any, Callable, Hashable, Iterable, Iterator, Mapping, Self, Sequence

import pyarrow as pa

from ..compute import grouping, sorting, statistics
from ..datasources import CSVDataSource
from ..errors import (
    ColumnNotFound,
    DuplicateColumn,
    EmptyNumericColumn,
    InvalidArgument,
    LengthMismatch,
    NonNumericColumn,
    RowNotFound,
)
from ..values import Kind, hashable, is_absent, kind_of, majority_kind, normalize

__all__ = ("DataFrame", "read_csv")

logger = logging.getLogger(__name__)

_AXES = {"rows": "rows", "index": "rows", 0: "rows", "columns": "columns", 1: "columns"}


class DataFrame:
    """Data structure that handles data in rows and columns.

    The DataFrame stores its data by column: each column is
    an ordered list of cell values, all columns have the
    same length, which is the number of rows.
    Rows are identified by integer labels, the index, which
    default to ``0..n-1`` and are preserved by the operations
    that drop or reorder rows.

    A DataFrame can be created from a mapping of
    column names to values or from a list of records:

    >>> df = DataFrame({"city": ["Rome", "Paris", "Rome"], "shops": [3, 4, None]})
    >>> df.shape
    (3, 2)
    >>> DataFrame([{"city": "Rome", "shops": 3}, {"city": "Paris"}]).to_dict()
    {'city': ['Rome', 'Paris'], 'shops': [3, None]}

    Most operations leave the DataFrame untouched and return
    a new one, but some modify it in place. The ones modifying
    the DataFrame always return ``None``, so that the two can't
    be confused:

    ==================================  ===========
    Operation                           Style
    ==================================  ===========
    :meth:`set_column`, ``df[name] =``  in place
    :meth:`append_row`                  in place
    :meth:`drop_row`                    in place
    :meth:`rename_column`               in place
    :meth:`update_element`              in place
    :meth:`apply`                       in place
    everything else                     new object
    ==================================  ===========

    New DataFrames never share data with the one they were
    derived from, cells are copied, so modifying one of them
    won't affect the other.

    >>> rome = df.filter(lambda row, label: row["city"] == "Rome")
    >>> rome.index
    [0, 2]
    >>> rome.update_element(0, "shops", 10)
    >>> df.get_column("shops")
    [3, 4, None]
    """

    def __init__(
        self,
        data: Mapping[str, Sequence[Any]] | Iterable[Mapping[str, Any]] | Self | None = None,
        index: Sequence[int] | None = None,
    ) -> None:
        """
        :param data: A mapping of column names to their values,
                     a sequence of records (mappings of column names to values)
                     or another DataFrame to copy.
        :param index: The labels of the rows, defaults to ``0..n-1``.
        """
        if data is None:
            columns: dict[str, list[Any]] = {}
        elif isinstance(data, DataFrame):
            columns = deepcopy(data._columns)
            if index is None:
                index = data._index
        elif isinstance(data, Mapping):
            columns = _columns_from_mapping(data)
        elif isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise InvalidArgument(
                f"Invalid input, expected a mapping or a sequence of records, got {type(data).__name__}"
            )
        else:
            columns = _columns_from_records(data)

        self._columns = columns
        self._index = _validate_index(index, self._count_rows(columns))

    @classmethod
    def from_columns(
        cls, data: Mapping[str, Sequence[Any]], index: Sequence[int] | None = None
    ) -> Self:
        """Create a DataFrame from a mapping of column names to values.

        :param data: The values of each column, all of the same length.
        :param index: The labels of the rows, defaults to ``0..n-1``.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument("Invalid input, expected a mapping of columns")
        return cls(data, index=index)

    @classmethod
    def from_records(
        cls, records: Iterable[Mapping[str, Any]], index: Sequence[int] | None = None
    ) -> Self:
        """Create a DataFrame from a sequence of records.

        The columns are all the keys found in the records,
        in the order they were first seen. Records missing
        a column get an absent value for it.

        :param records: The rows, each one a mapping of column names to values.
        :param index: The labels of the rows, defaults to ``0..n-1``.
        """
        return cls(_columns_from_records(records), index=index)

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a DataFrame from the content of a pyarrow Table or RecordBatch."""
        return cls.from_columns(table.to_pydict())

    @classmethod
    def open_csv(cls, filename: str, delimiter: str = ",") -> Self:
        """Open a CSV file and create a Dataframe out of its data.

        The values are converted to their type by
        :func:`berkelium.values.infer_type`.

        :param filename: The path to a local CSV file.
        :param delimiter: The character separating the fields of a row.
        """
        return cls.from_columns(CSVDataSource(filename, delimiter=delimiter).columns())

    @classmethod
    def _build(cls, columns: dict[str, list[Any]], index: list[int]) -> Self:
        # Trusted constructor, the caller guarantees the storage invariants.
        df = cls.__new__(cls)
        df._columns = columns
        df._index = index if columns else []
        return df

    @staticmethod
    def _count_rows(columns: Mapping[str, list[Any]]) -> int:
        for values in columns.values():
            return len(values)
        return 0

    # Structure and accessors

    @property
    def columns(self) -> list[str]:
        """Names of the columns, in order."""
        return list(self._columns)

    @property
    def index(self) -> list[int]:
        """Labels of the rows, in order."""
        return list(self._index)

    @property
    def shape(self) -> tuple[int, int]:
        """The ``(rows, columns)`` size of the DataFrame."""
        return (self.num_rows, self.num_columns)

    @property
    def num_rows(self) -> int:
        return len(self._index)

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    @property
    def dtypes(self) -> dict[str, Kind]:
        """The kind of each column.

        The kind of a column is the most frequent kind among
        its values that are not absent, see :func:`berkelium.values.majority_kind`.
        """
        return {name: majority_kind(values) for name, values in self._columns.items()}

    def __len__(self) -> int:
        return self.num_rows

    def __contains__(self, name: str) -> bool:
        return name in self._columns

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFrame):
            return NotImplemented
        return (
            self.columns == other.columns
            and self._index == other._index
            and self._columns == other._columns
        )

    def __repr__(self) -> str:
        return f"DataFrame(columns={self.columns}, rows={self.num_rows})"

    def get_column(self, name: str) -> list[Any]:
        """The values of a column, in row order.

        The returned list is a copy, modifying it won't
        affect the DataFrame.
        """
        return deepcopy(self._values(name))

    array = get_column

    def __getitem__(self, key: str | list[str]) -> Any:
        if isinstance(key, list):
            return self.select(key)
        return self.get_column(key)

    def set_column(self, name: str, values: Sequence[Any]) -> None:
        """Replace the values of a column or append a new one, in place.

        When the DataFrame has no columns, the values
        decide the number of rows.

        :param name: The name of the column to set.
        :param values: The values, one for each row.
        """
        values = self._conform(values)
        if not self._columns:
            self._index = list(range(len(values)))
        self._columns[name] = values

    __setitem__ = set_column

    def row(self, label: int) -> dict[str, Any]:
        """The row with the given label, as a mapping of column names to values.

        In case multiple rows share the same label, the first one is returned.
        """
        return self._row_at(self._position(label))

    def iterrows(self) -> Iterator[tuple[int, dict[str, Any]]]:
        """Iterate over the rows, yielding ``(label, row)`` pairs."""
        for position, label in enumerate(self._index):
            yield label, self._row_at(position)

    def to_records(self) -> list[dict[str, Any]]:
        """All the rows, as mappings of column names to values."""
        return [self._row_at(position) for position in range(self.num_rows)]

    def to_dict(self) -> dict[str, list[Any]]:
        """All the columns, as a mapping of column names to values."""
        return deepcopy(self._columns)

    def to_arrow(self) -> pa.Table:
        """Convert the data to a :class:`pyarrow.Table`.

        Each column must contain values that Arrow can
        represent as a single type, mixed columns will fail
        with the errors raised by pyarrow.
        """
        return pa.table({name: pa.array(values) for name, values in self._columns.items()})

    def copy(self) -> Self:
        """Create a deep copy of the DataFrame.

        No data is shared between the DataFrame and its copy.
        """
        return self._build(deepcopy(self._columns), list(self._index))

    clone = copy

    # Row and column transformations

    def head(self, n: int = 5) -> Self:
        """A new DataFrame with the first ``n`` rows."""
        if n < 0:
            raise InvalidArgument(f"Number of rows must not be negative, got {n}")
        return self._take(range(min(n, self.num_rows)))

    def tail(self, n: int = 5) -> Self:
        """A new DataFrame with the last ``n`` rows."""
        if n < 0:
            raise InvalidArgument(f"Number of rows must not be negative, got {n}")
        return self._take(range(max(self.num_rows - n, 0), self.num_rows))

    def select(self, names: str | Sequence[str]) -> Self:
        """A new DataFrame with only the given columns, in the given order."""
        if isinstance(names, str):
            names = [names]
        for position, name in enumerate(names):
            self._check_column(name)
            if name in names[:position]:
                raise DuplicateColumn(name)
        return self._build(
            {name: deepcopy(self._columns[name]) for name in names}, list(self._index)
        )

    def select_dtypes(self, kinds: str | Iterable[str]) -> Self:
        """A new DataFrame with only the columns of the given kinds.

        >>> df = DataFrame({"a": [1, 2], "b": ["x", "y"], "c": [True, 3]})
        >>> df.select_dtypes("number").columns
        ['a']
        >>> df.select_dtypes(["text", "boolean"]).columns
        ['b', 'c']
        """
        if isinstance(kinds, str):
            kinds = [kinds]
        try:
            wanted = {Kind(kind) for kind in kinds}
        except ValueError as e:
            raise InvalidArgument(f"Unknown kind: {e}") from e
        dtypes = self.dtypes
        return self.select([name for name in self._columns if dtypes[name] in wanted])

    def filter(self, predicate: Callable[[dict[str, Any], int], bool]) -> Self:
        """A new DataFrame with only the rows matching a predicate.

        The rows keep their order and their labels.

        :param predicate: A function receiving the row, as a mapping
                          of column names to values, and its label. Returns
                          ``True`` for the rows to keep.
        """
        return self._take(
            [
                position
                for position, label in enumerate(self._index)
                if predicate(self._row_at(position), label)
            ]
        )

    def insert(self, name: str, values: Sequence[Any]) -> Self:
        """A new DataFrame with an additional column.

        Fails with :class:`berkelium.errors.DuplicateColumn`
        if the column already exists, see :meth:`update`
        for replacing an existing column.
        """
        if name in self._columns:
            raise DuplicateColumn(name)
        df = self.copy()
        df.set_column(name, values)
        return df

    def update(self, name: str, values: Sequence[Any]) -> Self:
        """A new DataFrame with the values of a column replaced."""
        self._check_column(name)
        df = self.copy()
        df.set_column(name, values)
        return df

    def delete(self, name: str) -> Self:
        """A new DataFrame without the given column."""
        self._check_column(name)
        return self._build(
            {n: deepcopy(v) for n, v in self._columns.items() if n != name},
            list(self._index),
        )

    drop_column = delete

    def drop_row(self, labels: int | Iterable[int]) -> None:
        """Remove rows by label, in place.

        Labels that don't exist are ignored.
        All the rows sharing a dropped label are removed.

        :param labels: A single label or multiple labels.
        """
        if isinstance(labels, int):
            labels = [labels]
        dropped = set(labels)
        keep = [pos for pos, label in enumerate(self._index) if label not in dropped]
        logger.debug("Dropping %d rows", self.num_rows - len(keep))
        self._columns = {
            name: [values[pos] for pos in keep] for name, values in self._columns.items()
        }
        self._index = [self._index[pos] for pos in keep]

    def append_row(self, record: Mapping[str, Any]) -> None:
        """Add a row at the end, in place.

        The new row is labeled with the highest label plus one.
        Columns missing from the record get an absent value.
        On a DataFrame without columns, the record keys become the columns.
        """
        if not isinstance(record, Mapping):
            raise InvalidArgument(f"Expected a mapping, got {type(record).__name__}")
        if not self._columns:
            if not record:
                raise InvalidArgument("Cannot append an empty record to a DataFrame without columns")
            self._columns = {name: [] for name in record}
        for name in record:
            self._check_column(name)

        for name, values in self._columns.items():
            values.append(normalize(deepcopy(record.get(name))))
        label = max(self._index) + 1 if self._index else 0
        self._index.append(label)
        logger.debug("Appended row %d", label)

    def rename_column(self, old: str, new: str) -> None:
        """Rename a column in place, keeping its position."""
        self._check_column(old)
        if new in self._columns:
            raise DuplicateColumn(new)
        self._columns = {
            (new if name == old else name): values
            for name, values in self._columns.items()
        }

    def sort_values(self, column: str, ascending: bool = True) -> Self:
        """A new DataFrame with the rows sorted by the values of a column.

        The sort is stable and absent values are always placed last,
        independently from the sort direction. The rows keep their labels.

        >>> df = DataFrame({"n": [2, None, 1, 3]})
        >>> df.sort_values("n", ascending=False).to_dict()
        {'n': [3, 2, 1, None]}
        """
        positions = sorting.sort_indices(self._values(column), ascending=ascending)
        return self._take(positions)

    def group_by(self, column: str) -> dict[Any, Self]:
        """Split the rows by the distinct values of a column.

        Each group is a new DataFrame with the rows having
        that value, in their original order and with their labels.
        Nested structures, that can't be dictionary keys, and booleans
        sharing the column with an equal number (``True`` and ``1``)
        are keyed by :func:`berkelium.values.hashable`.

        >>> df = DataFrame({"city": ["Rome", "Paris", "Rome"], "shops": [1, 2, 3]})
        >>> groups = df.group_by("city")
        >>> list(groups)
        ['Rome', 'Paris']
        >>> groups["Rome"].index
        [0, 2]
        """
        groups = grouping.group_positions(self._values(column))
        keys = _as_keys([value for value, _ in groups])
        return {key: self._take(positions) for key, (_, positions) in zip(keys, groups)}

    def dedup(self) -> Self:
        """A new DataFrame without repeated rows.

        The first occurrence of each row is kept. Rows are
        repeated when all their values are equal, nested
        structures are compared by their content.
        """
        return self._take(grouping.first_occurrences(self._row_tuples()))

    def concat(self, other: "DataFrame", axis: str | int = "rows") -> Self:
        """Combine two DataFrames in a new one.

        With ``axis="rows"`` the rows of ``other`` are appended,
        both DataFrames must have the same columns (in any order) and
        the labels of both are preserved.

        With ``axis="columns"`` the columns of ``other`` are added,
        both DataFrames must have the same number of rows and
        in case of columns with the same name, ``other`` wins.

        :param other: The DataFrame to combine with.
        :param axis: ``"rows"`` (or ``0``) or ``"columns"`` (or ``1``).
        """
        if not isinstance(other, DataFrame):
            raise InvalidArgument(f"Can only concat a DataFrame, got {type(other).__name__}")
        if axis not in _AXES:
            raise InvalidArgument(f"Invalid axis: {axis!r}")

        if _AXES[axis] == "rows":
            if set(self._columns) != set(other._columns):
                raise InvalidArgument(
                    f"Columns don't match: {self.columns} and {other.columns}"
                )
            return self._build(
                {
                    name: deepcopy(values + other._columns[name])
                    for name, values in self._columns.items()
                },
                self._index + other._index,
            )

        if not self._columns:
            return other.copy()
        if other._columns and other.num_rows != self.num_rows:
            raise LengthMismatch(
                f"Number of rows doesn't match: {self.num_rows} and {other.num_rows}"
            )
        columns = deepcopy(self._columns)
        columns.update(deepcopy(other._columns))
        return self._build(columns, list(self._index))

    def apply(self, column: str, fn: Callable[[Any], Any]) -> None:
        """Transform the values of a column in place.

        Absent values are not passed to ``fn``, they are kept as they are.
        """
        self._columns[column] = self._transformed(column, fn)

    def transform(self, column: str, fn: Callable[[Any], Any]) -> Self:
        """A new DataFrame with the values of a column transformed.

        Absent values are not passed to ``fn``, they are kept as they are.

        >>> df = DataFrame({"n": [1, None, 3]})
        >>> df.transform("n", lambda v: v * 10).to_dict()
        {'n': [10, None, 30]}
        """
        values = self._transformed(column, fn)
        df = self.copy()
        df._columns[column] = values
        return df

    def map(self, fn: Callable[[dict[str, Any]], Any]) -> list[Any]:
        """Call ``fn`` on each row and collect the results in row order."""
        return [fn(self._row_at(position)) for position in range(self.num_rows)]

    def update_element(self, label: int, column: str, value: Any) -> None:
        """Replace the value of a single cell in place.

        In case multiple rows share the same label,
        the first one is updated.
        """
        self._check_column(column)
        self._columns[column][self._position(label)] = normalize(value)

    def fillna(self, value: Any, column: str | None = None) -> Self:
        """A new DataFrame with absent values replaced.

        :param value: The value replacing the absent ones.
        :param column: The column where values should be replaced,
                       all columns when omitted.
        """
        if is_absent(value):
            raise InvalidArgument(f"Cannot fill absent values with {value!r}")
        if column is not None:
            self._check_column(column)
        targets = [column] if column is not None else self.columns

        df = self.copy()
        for name in targets:
            df._columns[name] = [
                deepcopy(value) if v is None else v for v in df._columns[name]
            ]
        return df

    def dropna(self) -> Self:
        """A new DataFrame with only the rows that have no absent value."""
        return self._take(
            [
                position
                for position, row in enumerate(self._row_tuples())
                if not any(v is None for v in row)
            ]
        )

    # Inspection

    def value_counts(self, column: str) -> dict[Any, int]:
        """How many times each value, that is not absent, appears in a column.

        The values are in order of first occurrence and are keyed
        like the groups of :meth:`group_by`.

        >>> DataFrame({"a": [1, True, 1]}).value_counts("a")
        {1: 2, (<Kind.BOOLEAN: 'boolean'>, True): 1}
        """
        counts = grouping.value_counts(self._values(column))
        keys = _as_keys([value for value, _ in counts])
        return {key: total for key, (_, total) in zip(keys, counts)}

    def unique(self, column: str) -> list[Any]:
        """The distinct values, that are not absent, of a column.

        The values are in order of first occurrence.
        """
        return deepcopy(grouping.unique(self._values(column)))

    def is_null(self, column: str | None = None) -> bool | Self:
        """Detect absent values.

        When a column is provided, tells if the column contains
        any absent value. Otherwise returns a DataFrame with the same
        shape and labels, where each cell is ``True`` if the
        value was absent.
        """
        if column is not None:
            return any(v is None for v in self._values(column))
        return self._build(
            {
                name: [v is None for v in values]
                for name, values in self._columns.items()
            },
            list(self._index),
        )

    def has_undefined(self) -> bool:
        """Tell if any cell of the DataFrame is absent."""
        return any(self.is_null(name) for name in self._columns)

    def has_duplicates(self) -> bool:
        """Tell if any row is repeated."""
        return len(grouping.first_occurrences(self._row_tuples())) < self.num_rows

    def get_wrong_type_rows(self, column: str) -> list[int]:
        """Labels of the rows whose value is not of the column kind.

        Absent values are never considered of the wrong kind.

        >>> df = DataFrame({"age": [29, "thirty", 45, None]})
        >>> df.get_wrong_type_rows("age")
        [1]
        """
        values = self._values(column)
        dtype = majority_kind(values)
        return [
            label
            for label, value in zip(self._index, values)
            if kind_of(value) not in (Kind.NULL, dtype)
        ]

    def is_same_type(self, column: str) -> bool:
        """Tell if all values, that are not absent, of a column have the same kind."""
        return not self.get_wrong_type_rows(column)

    def has_wrong_data_types(self) -> bool:
        """Tell if any column contains values of different kinds."""
        return not all(self.is_same_type(name) for name in self._columns)

    # Statistics

    def count(self, column: str) -> int:
        """Number of values of a column that are not absent."""
        return statistics.count(self._values(column))

    def min(self, column: str) -> float:
        """The smallest number of a column.

        Fails with :class:`berkelium.errors.EmptyNumericColumn`
        if the column contains no numbers.
        """
        try:
            return statistics.minimum(self._values(column))
        except EmptyNumericColumn:
            raise EmptyNumericColumn(column) from None

    def max(self, column: str) -> float:
        """The biggest number of a column.

        Fails with :class:`berkelium.errors.EmptyNumericColumn`
        if the column contains no numbers.
        """
        try:
            return statistics.maximum(self._values(column))
        except EmptyNumericColumn:
            raise EmptyNumericColumn(column) from None

    def mean(self, column: str) -> float:
        """Arithmetic mean of the numbers of a column, ``nan`` if there are none."""
        return statistics.mean(self._values(column))

    def std(self, column: str) -> float:
        """Population standard deviation of the numbers of a column."""
        return statistics.std(self._values(column))

    def var(self, column: str | None = None) -> float | dict[str, float]:
        """Sample variance of the numbers.

        Unlike :meth:`std`, the variance is computed dividing by ``n - 1``.

        :param column: The column to compute the variance of. When omitted
                       the variance of every numeric column is returned
                       as a mapping of column names to variance.
        """
        if column is not None:
            return statistics.variance(self._values(column))
        return {
            name: statistics.variance(self._columns[name])
            for name in self._numeric_columns()
        }

    def quartiles(self, column: str) -> dict[str, float]:
        """The 25th, 50th and 75th percentiles of the numbers of a column."""
        try:
            return statistics.quartiles(self._values(column))
        except EmptyNumericColumn:
            raise EmptyNumericColumn(column) from None

    def median(self, column: str) -> float:
        """The 50th percentile of the numbers of a column."""
        return self.quartiles(column)["50%"]

    def mode(self, column: str) -> float | None:
        """The most frequent number of a numeric column.

        See :func:`berkelium.compute.statistics.mode` for
        how ties and flat distributions are handled.
        Fails with :class:`berkelium.errors.NonNumericColumn`
        if the column kind is not ``number``.
        """
        values = self._values(column)
        if majority_kind(values) is not Kind.NUMBER:
            raise NonNumericColumn(column)
        return statistics.mode(values)

    def describe(self) -> dict[str, dict[str, float]]:
        """Summary statistics of every numeric column.

        >>> DataFrame({"n": [1, 2, 3, 4], "s": ["a", "b", "c", "d"]}).describe()
        {'n': {'count': 4, 'mean': 2.5, 'std': 1.118034, 'min': 1.0, '25%': 1.75, '50%': 2.5, '75%': 3.25, 'max': 4.0}}
        """
        return {
            name: statistics.describe(self._columns[name])
            for name in self._numeric_columns()
        }

    get_percentile = staticmethod(statistics.get_percentile)

    # Internals

    def _check_column(self, name: str) -> None:
        if name not in self._columns:
            raise ColumnNotFound(name)

    def _values(self, name: str) -> list[Any]:
        self._check_column(name)
        return self._columns[name]

    def _conform(self, values: Sequence[Any]) -> list[Any]:
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidArgument(f"Expected a sequence of values, got {type(values).__name__}")
        values = [normalize(v) for v in deepcopy(list(values))]
        if self._columns and len(values) != self.num_rows:
            raise LengthMismatch(
                f"Expected {self.num_rows} values, got {len(values)}"
            )
        return values

    def _position(self, label: int) -> int:
        try:
            return self._index.index(label)
        except ValueError:
            raise RowNotFound(label) from None

    def _row_at(self, position: int) -> dict[str, Any]:
        return {
            name: deepcopy(values[position]) for name, values in self._columns.items()
        }

    def _row_tuples(self) -> list[tuple[Any, ...]]:
        return list(zip(*self._columns.values()))

    def _take(self, positions: Iterable[int]) -> Self:
        positions = list(positions)
        return self._build(
            {
                name: deepcopy([values[pos] for pos in positions])
                for name, values in self._columns.items()
            },
            [self._index[pos] for pos in positions],
        )

    def _transformed(self, column: str, fn: Callable[[Any], Any]) -> list[Any]:
        return [
            v if v is None else normalize(fn(deepcopy(v))) for v in self._values(column)
        ]

    def _numeric_columns(self) -> list[str]:
        return [name for name, kind in self.dtypes.items() if kind is Kind.NUMBER]


def read_csv(filename: str, delimiter: str = ",") -> DataFrame:
    """Read a delimited text file into a :class:`DataFrame`.

    See :meth:`DataFrame.open_csv`.
    """
    return DataFrame.open_csv(filename, delimiter=delimiter)


def _columns_from_mapping(data: Mapping[str, Sequence[Any]]) -> dict[str, list[Any]]:
    columns = {}
    for name, values in data.items():
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidArgument(
                f"Column {name!r} must be a sequence of values, got {type(values).__name__}"
            )
        columns[name] = [normalize(v) for v in deepcopy(list(values))]

    lengths = {len(values) for values in columns.values()}
    if len(lengths) > 1:
        raise LengthMismatch(f"All columns must have the same length, got {sorted(lengths)}")
    return columns


def _columns_from_records(records: Iterable[Mapping[str, Any]]) -> dict[str, list[Any]]:
    records = list(records)
    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidArgument(
                f"Record {position} must be a mapping, got {type(record).__name__}"
            )

    names: dict[str, None] = {}
    for record in records:
        names.update(dict.fromkeys(record))
    return {name: [normalize(deepcopy(r.get(name))) for r in records] for name in names}


def _validate_index(index: Sequence[int] | None, num_rows: int) -> list[int]:
    if index is None:
        return list(range(num_rows))
    index = list(index)
    if len(index) != num_rows:
        raise LengthMismatch(f"Index has {len(index)} labels for {num_rows} rows")
    for label in index:
        if isinstance(label, bool) or not isinstance(label, int):
            raise InvalidArgument(f"Row labels must be integers, got {label!r}")
    return index


def _as_keys(values: list[Any]) -> list[Hashable]:
    # bool is a subclass of int, True would replace the key 1 in a dict.
    numbers = {v for v in values if kind_of(v) is Kind.NUMBER}
    return [_as_key(value, numbers) for value in values]


def _as_key(value: Any, numbers: set[Any]) -> Hashable:
    if isinstance(value, bool) and value in numbers:
        return hashable(value)
    try:
        hash(value)
    except TypeError:
        return hashable(value)
    return value
