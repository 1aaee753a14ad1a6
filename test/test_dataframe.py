import pytest

from berkelium import DataFrame, Kind
from berkelium.errors import (
    ColumnNotFound,
    InvalidArgument,
    LengthMismatch,
    RowNotFound,
)

TEST_COLUMNS = {
    "city": ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
    "shop": ["Shop A", "Shop B", "Shop A", "Shop A2", "Shop B"],
    "n_employees": [10, 15, 8, 12, 20],
}

TEST_RECORDS = [
    {"city": city, "shop": shop, "n_employees": n}
    for city, shop, n in zip(*TEST_COLUMNS.values())
]


@pytest.mark.parametrize(
    "build",
    [
        lambda: DataFrame(TEST_COLUMNS),
        lambda: DataFrame(TEST_RECORDS),
        lambda: DataFrame.from_columns(TEST_COLUMNS),
        lambda: DataFrame.from_records(TEST_RECORDS),
        lambda: DataFrame(DataFrame(TEST_COLUMNS)),
    ],
)
def test_layout_independent_construction(build):
    df = build()
    assert df.columns == ["city", "shop", "n_employees"]
    assert df.shape == (5, 3)
    assert df.index == [0, 1, 2, 3, 4]
    assert df.to_dict() == TEST_COLUMNS
    assert df.to_records() == TEST_RECORDS
    assert df == DataFrame(TEST_COLUMNS)


def test_empty_dataframe():
    for df in (DataFrame(), DataFrame({}), DataFrame([])):
        assert df.shape == (0, 0)
        assert df.columns == []
        assert df.index == []
        assert df.dtypes == {}
        assert len(df) == 0


def test_records_with_missing_keys():
    df = DataFrame.from_records([{"a": 1}, {"b": "x"}, {"a": 3, "b": "z"}])
    assert df.columns == ["a", "b"]
    assert df.to_dict() == {"a": [1, None, 3], "b": [None, "x", "z"]}


def test_records_must_be_mappings():
    with pytest.raises(InvalidArgument):
        DataFrame.from_records([{"a": 1}, ["not", "a", "record"]])
    with pytest.raises(InvalidArgument):
        DataFrame([{"a": 1}, 5])


@pytest.mark.parametrize("data", ["text", 42, {"a": 5}, {"a": "text"}])
def test_invalid_data(data):
    with pytest.raises(InvalidArgument):
        DataFrame(data)


def test_columns_of_different_length():
    with pytest.raises(LengthMismatch):
        DataFrame({"a": [1, 2], "b": [1]})


def test_explicit_index():
    df = DataFrame({"a": [1, 2, 3]}, index=[10, 20, 30])
    assert df.index == [10, 20, 30]
    assert df.row(20) == {"a": 2}
    with pytest.raises(LengthMismatch):
        DataFrame({"a": [1, 2, 3]}, index=[1, 2])
    with pytest.raises(InvalidArgument):
        DataFrame({"a": [1, 2]}, index=["x", "y"])


def test_null_equivalents_are_normalized():
    df = DataFrame(
        {"v": ["", "null", "Undefined", "NA", "nan", float("nan"), None, 0, False, "x"]}
    )
    assert df.get_column("v") == [None] * 7 + [0, False, "x"]
    assert df.count("v") == 3


def test_dtypes_majority_vote():
    df = DataFrame(
        {
            "numbers": [1, 2, "three", None],
            "texts": ["a", 1, "b", None],
            "tie": [True, 1, None, None],
            "empty": [None, None, None, None],
            "structs": [{"a": 1}, [1], None, "x"],
        }
    )
    assert df.dtypes == {
        "numbers": Kind.NUMBER,
        "texts": Kind.TEXT,
        "tie": Kind.BOOLEAN,
        "empty": Kind.NULL,
        "structs": Kind.STRUCT,
    }


def test_get_column():
    df = DataFrame(TEST_COLUMNS)
    assert df.get_column("n_employees") == [10, 15, 8, 12, 20]
    assert df.array("shop") == TEST_COLUMNS["shop"]
    assert df["city"] == TEST_COLUMNS["city"]
    with pytest.raises(ColumnNotFound):
        df.get_column("missing")


def test_set_column_in_place():
    df = DataFrame(TEST_COLUMNS)
    assert df.set_column("n_employees", [1, 2, 3, 4, 5]) is None
    assert df.get_column("n_employees") == [1, 2, 3, 4, 5]
    df["open"] = [True, False, True, True, ""]
    assert df.columns == ["city", "shop", "n_employees", "open"]
    assert df.get_column("open") == [True, False, True, True, None]


def test_set_column_length_mismatch():
    df = DataFrame(TEST_COLUMNS)
    with pytest.raises(LengthMismatch):
        df.set_column("n_employees", [1, 2])
    with pytest.raises(LengthMismatch):
        df.set_column("new", [1, 2, 3, 4, 5, 6])
    assert df.to_dict() == TEST_COLUMNS


def test_set_column_on_empty_dataframe():
    df = DataFrame()
    df.set_column("a", [1, 2, 3])
    assert df.shape == (3, 1)
    assert df.index == [0, 1, 2]


def test_contains_and_len():
    df = DataFrame(TEST_COLUMNS)
    assert "city" in df
    assert "country" not in df
    assert len(df) == 5
    assert repr(df) == "DataFrame(columns=['city', 'shop', 'n_employees'], rows=5)"


def test_row_access():
    df = DataFrame(TEST_COLUMNS)
    assert df.row(2) == {"city": "Los Angeles", "shop": "Shop A", "n_employees": 8}
    with pytest.raises(RowNotFound):
        df.row(42)
    labels = [label for label, _ in df.iterrows()]
    assert labels == [0, 1, 2, 3, 4]


def test_shape_invariant_after_operations():
    df = DataFrame(TEST_COLUMNS)
    derived = [
        df.head(2),
        df.tail(10),
        df.filter(lambda row, label: row["n_employees"] > 10),
        df.sort_values("shop"),
        df.dedup(),
        df.dropna(),
        df.delete("shop"),
        df.delete("shop").delete("city").delete("n_employees"),
        df.concat(df),
    ]
    for result in derived:
        assert result.shape[0] == len(result.index)
        for name in result.columns:
            assert len(result.get_column(name)) == result.shape[0]
