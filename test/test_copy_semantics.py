"""Derived DataFrames must never share data with their source."""

import pytest

from berkelium import DataFrame


@pytest.fixture
def source():
    return DataFrame(
        {
            "name": ["Amara", "Nimal", "Pathum"],
            "tags": [["a"], ["b"], {"k": [1]}],
            "score": [1, None, 3],
        }
    )


@pytest.mark.parametrize("method", ["copy", "clone"])
def test_copy_is_deep(source, method):
    duplicate = getattr(source, method)()
    assert duplicate == source

    duplicate.set_column("score", [9, 9, 9])
    duplicate.update_element(0, "name", "Kasun")
    duplicate.apply("tags", lambda v: "changed")
    duplicate.rename_column("name", "person")
    duplicate.drop_row(2)
    duplicate.append_row({"person": "Ruwan"})

    assert source.to_dict() == {
        "name": ["Amara", "Nimal", "Pathum"],
        "tags": [["a"], ["b"], {"k": [1]}],
        "score": [1, None, 3],
    }
    assert source.index == [0, 1, 2]


def test_nested_values_are_not_shared(source):
    duplicate = source.copy()
    duplicate.get_column("tags")[0].append("x")
    duplicate.row(2)["tags"]["k"].append(2)
    assert source.get_column("tags") == [["a"], ["b"], {"k": [1]}]


@pytest.mark.parametrize(
    "derive",
    [
        lambda df: df.head(3),
        lambda df: df.tail(3),
        lambda df: df.select(["name", "tags", "score"]),
        lambda df: df.filter(lambda row, label: True),
        lambda df: df.sort_values("name"),
        lambda df: df.dedup(),
        lambda df: df.fillna(0),
        lambda df: df.transform("name", str.upper),
        lambda df: df.insert("extra", [1, 2, 3]).delete("extra"),
        lambda df: df.update("score", [1, 2, 3]),
        lambda df: df.concat(DataFrame({"extra": [1, 2, 3]}), axis="columns"),
        lambda df: df.group_by("name")["Amara"],
        lambda df: DataFrame(df),
    ],
)
def test_mutating_derived_dataframe_leaves_source(source, derive):
    expected = source.copy()
    derived = derive(source)

    for name in derived.columns:
        derived.apply(name, lambda v: "mutated")
    for label in derived.index:
        derived.update_element(label, derived.columns[0], "mutated")
    derived.drop_row(derived.index[:1])

    assert source == expected


def test_accessors_return_copies(source):
    source.columns.append("other")
    source.index.append(99)
    source.get_column("name").append("Extra")
    source.to_dict()["score"].append(4)
    source.to_records()[0]["name"] = "Changed"
    assert source.columns == ["name", "tags", "score"]
    assert source.index == [0, 1, 2]
    assert source.shape == (3, 3)
    assert source.get_column("name") == ["Amara", "Nimal", "Pathum"]


def test_constructor_does_not_alias_input():
    data = {"values": [1, 2, 3]}
    df = DataFrame(data)
    data["values"].append(4)
    assert df.get_column("values") == [1, 2, 3]


def test_constructor_copies_nested_values():
    tags = {"k": [1]}
    by_column = DataFrame({"tags": [tags]})
    by_record = DataFrame([{"tags": tags}])
    tags["k"].append(2)
    assert by_column.get_column("tags") == [{"k": [1]}]
    assert by_record.get_column("tags") == [{"k": [1]}]
