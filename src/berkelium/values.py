"""Cell values and their kinds.

A dataframe column is not required to be homogeneous,
each cell holds a plain Python value and the kind of that
value is detected when needed. The set of kinds is closed
and described by :class:`Kind`:

* ``number`` -> :class:`int` and :class:`float` values
* ``text`` -> :class:`str` values
* ``boolean`` -> :class:`bool` values
* ``date`` -> :class:`datetime.date` and :class:`datetime.datetime` values
* ``struct`` -> nested structures like :class:`dict` and :class:`list`
* ``null`` -> the absent marker

There is a single absent marker, ``None``. Values that are
considered null-equivalent (``NaN``, empty strings and the
``"null"``, ``"undefined"``, ``"na"``, ``"nan"`` tokens) are
normalized to it when they enter a dataframe, so that
``0``, ``False`` and ``""`` written by the user are never
confused with missing values.

>>> kind_of(3.5), kind_of("hello"), kind_of(False), kind_of(None)
(<Kind.NUMBER: 'number'>, <Kind.TEXT: 'text'>, <Kind.BOOLEAN: 'boolean'>, <Kind.NULL: 'null'>)
>>> normalize("NaN") is None
True

The module also provides :func:`infer_type`, which converts
raw text as found in delimited files into typed values.
"""

import datetime
import enum
import json
import math
import numbers
import re
from typing import Any, Hashable, Iterable

__all__ = (
    "NULL_TOKENS",
    "Kind",
    "kind_of",
    "is_absent",
    "normalize",
    "majority_kind",
    "infer_type",
    "hashable",
    "sort_key",
)

NULL_TOKENS = frozenset({"", "null", "undefined", "na", "nan"})
"""Text tokens (compared case-insensitively) that mean a missing value."""

_BIGINT_LITERAL = re.compile(r"^\d+n$")


class Kind(enum.StrEnum):
    """The kind of a cell value.

    The declaration order is also the order used
    to sort values of different kinds within the same column.
    """

    NUMBER = "number"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    STRUCT = "struct"
    NULL = "null"


_KIND_RANK = {kind: rank for rank, kind in enumerate(Kind)}


def is_absent(value: Any) -> bool:
    """Tell if a value is null-equivalent."""
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, str):
        return value.strip().lower() in NULL_TOKENS
    return False


def normalize(value: Any) -> Any:
    """Replace null-equivalent values with the absent marker."""
    if is_absent(value):
        return None
    return value


def kind_of(value: Any) -> Kind:
    """Detect the :class:`Kind` of a cell value.

    Booleans are checked before numbers, as in Python
    ``bool`` is a subclass of ``int``.
    """
    if is_absent(value):
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, numbers.Real):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.TEXT
    if isinstance(value, datetime.date):
        return Kind.DATE
    return Kind.STRUCT


def majority_kind(values: Iterable[Any]) -> Kind:
    """The most frequent kind among the values that are not absent.

    Ties are won by the kind that was seen first,
    when all values are absent the kind is ``null``.

    >>> majority_kind([1, "a", "b", 2, None, None])
    <Kind.NUMBER: 'number'>
    """
    tally: dict[Kind, int] = {}
    for value in values:
        kind = kind_of(value)
        if kind is not Kind.NULL:
            tally[kind] = tally.get(kind, 0) + 1
    if not tally:
        return Kind.NULL
    return max(tally, key=tally.__getitem__)


def infer_type(text: str | None) -> Any:
    """Convert raw text into the value it represents.

    The rules are applied in order, the first one that
    matches decides the result:

    1. null tokens become ``None``
    2. ``true``/``false`` (any case) become booleans
    3. anything :class:`float` can parse becomes a number
    4. digits followed by a lowercase ``n`` become an exact :class:`int`
    5. ISO-8601 dates and datetimes become :mod:`datetime` objects
    6. JSON objects and arrays become :class:`dict` and :class:`list`
    7. everything else is kept as text

    >>> infer_type(" 42 "), infer_type("TRUE"), infer_type("NA")
    (42.0, True, None)
    >>> infer_type("12345678901234567890n")
    12345678901234567890
    >>> infer_type("1995-06-12")
    datetime.date(1995, 6, 12)
    >>> infer_type('{"a": [1, 2]}')
    {'a': [1, 2]}
    >>> infer_type("Colombo")
    'Colombo'
    """
    if text is None:
        return None

    value = text.strip()
    lowered = value.lower()
    if lowered in NULL_TOKENS:
        return None
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    number = _parse_number(value)
    if number is not None:
        return number

    if _BIGINT_LITERAL.match(value):
        return int(value[:-1])

    date = _parse_date(value)
    if date is not None:
        return date

    if value[0] in "[{":
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, (dict, list)):
            return parsed

    return value


def _parse_number(value: str) -> float | None:
    # float() accepts digit separators, delimited text doesn't.
    if "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _parse_date(value: str) -> datetime.date | None:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.datetime.fromisoformat(value)
    except ValueError:
        return None


def hashable(value: Any) -> Hashable:
    """Build a hashable key that identifies a value by its content.

    Nested structures are compared by deep structural equality,
    and the kind is part of the key so that ``True`` and ``1``
    are not considered the same value.

    >>> hashable({"a": [1, 2]}) == hashable({"a": [1, 2]})
    True
    >>> hashable(True) == hashable(1)
    False
    """
    kind = kind_of(value)
    if kind is Kind.NULL:
        return (kind, None)
    if isinstance(value, dict):
        return (kind, frozenset((k, hashable(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return (kind, tuple(hashable(v) for v in value))
    if isinstance(value, (set, frozenset)):
        return (kind, frozenset(hashable(v) for v in value))
    return (kind, value)


def sort_key(value: Any) -> tuple[int, Any]:
    """Key that orders defined values of any kind.

    Values of the same kind are compared by their
    natural ordering, values of different kinds are
    ordered by the declaration order of :class:`Kind`.
    Absent values must be handled by the caller.
    """
    kind = kind_of(value)
    if kind is Kind.BOOLEAN:
        comparable = int(value)
    elif kind is Kind.DATE and not isinstance(value, datetime.datetime):
        comparable = datetime.datetime.combine(value, datetime.time())
    elif kind is Kind.STRUCT:
        comparable = json.dumps(value, sort_keys=True, default=str)
    else:
        comparable = value
    return (_KIND_RANK[kind], comparable)
