"""Load data from delimited text.

The datasources are in charge of fetching the data
from some source and converting it into the column oriented
form accepted by :meth:`berkelium.DataFrame.from_columns`.

The parsing of the delimited text itself is delegated to
:mod:`pyarrow.csv`, but every column is read as plain text:
the typing rules of Arrow don't match the ones of berkelium,
where a single column can contain values of different kinds.
Each cell is then converted by :func:`berkelium.values.infer_type`.

>>> source = CSVDataSource.from_string("name,age\\nAmara, 29\\nNimal,NA\\n")
>>> source.poll_schema()
['name', 'age']
>>> source.columns()
{'name': ['Amara', 'Nimal'], 'age': [29.0, None]}
"""

import logging
from typing import Any, Self

import pyarrow as pa
import pyarrow.csv

from .errors import DuplicateColumn
from .values import infer_type

__all__ = ("CSVDataSource",)

logger = logging.getLogger(__name__)


class CSVDataSource:
    """Load data from a delimited text file.

    Given a local file path (or in memory text through
    :meth:`from_string`), parse the content and provide
    typed values for each column.

    The first line is expected to contain the
    column names, which are stripped of surrounding whitespace.

    Every row must have as many fields as the header.
    Rows with fewer or more fields are not padded with absent
    values nor truncated: reading fails with the
    :class:`pyarrow.ArrowInvalid` raised by the parser.
    """

    def __init__(
        self, filename: str, delimiter: str = ",", block_size: int | None = None
    ) -> None:
        """
        :param filename: The path of the local delimited text file.
        :param delimiter: The character separating the fields of a row.
        :param block_size: How many bytes to process at a time while parsing.
        """
        self.filename = filename
        self.delimiter = delimiter
        self.block_size = block_size
        self._text: bytes | None = None

    @classmethod
    def from_string(cls, text: str, delimiter: str = ",") -> Self:
        """Create a datasource reading from in-memory text instead of a file."""
        source = cls("<string>", delimiter=delimiter)
        source._text = text.encode("utf-8")
        return source

    def __str__(self) -> str:
        return f"CSVDataSource({self.filename}, delimiter={self.delimiter!r})"

    def poll_schema(self) -> list[str]:
        """Read the column names without loading the content."""
        with pa.csv.open_csv(
            self._input(),
            read_options=self._read_options(),
            parse_options=self._parse_options(),
        ) as reader:
            return [name.strip() for name in reader.schema.names]

    def columns(self) -> dict[str, list[Any]]:
        """Parse the content and return the typed values of each column."""
        with pa.csv.open_csv(
            self._input(),
            read_options=self._read_options(),
            parse_options=self._parse_options(),
        ) as reader:
            raw_names = reader.schema.names

        names = [name.strip() for name in raw_names]
        for position, name in enumerate(names):
            if name in names[:position]:
                raise DuplicateColumn(name)

        # Force all columns to text, keeping empty strings as they are,
        # null detection is up to infer_type.
        table = pa.csv.read_csv(
            self._input(),
            read_options=self._read_options(),
            parse_options=self._parse_options(),
            convert_options=pa.csv.ConvertOptions(
                column_types={name: pa.string() for name in raw_names},
                strings_can_be_null=False,
                quoted_strings_can_be_null=False,
            ),
        )
        logger.debug(
            "Read %d rows and %d columns from %s", table.num_rows, len(names), self
        )
        return {
            name: [infer_type(value) for value in table.column(position).to_pylist()]
            for position, name in enumerate(names)
        }

    def _input(self) -> Any:
        if self._text is not None:
            return pa.BufferReader(self._text)
        return self.filename

    def _read_options(self) -> pa.csv.ReadOptions:
        return pa.csv.ReadOptions(block_size=self.block_size)

    def _parse_options(self) -> pa.csv.ParseOptions:
        return pa.csv.ParseOptions(delimiter=self.delimiter)
