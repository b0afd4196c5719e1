import math

import pytest

from cellframe import Table
from cellframe.cells import MISSING, as_cell, floating, integer, string
from cellframe.compute.aggregate import (
    CountAggregation,
    Description,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    SumAggregation,
    float_values,
    numeric_values,
)
from cellframe.errors import ColumnNotFoundError

TEST_DATA = Table.from_pydict(
    {
        "city": ["New York", "New York", "Los Angeles", "Los Angeles", "New York"],
        "shop": ["Shop A", "Shop B", "Shop A", "Shop A2", "Shop B"],
        "n_employees": [10, 15, 8, 12, 20],
        "revenue": [1.5, 2.5, math.nan, 4.0, 3.0],
    }
)


def _cells(*values):
    return [as_cell(v) for v in values]


def test_float_and_numeric_values():
    cells = _cells(1, 2.5, math.nan, "3", None, True)
    assert float_values(cells) == [2.5]
    assert numeric_values(cells) == [1.0, 2.5]


def test_mean():
    table = Table(["a", "b", "c"], {"a": [1, 2, 3], "b": [4, 5, 6], "c": [7, 8, 9]})
    assert table.mean() == {"a": 2.0, "b": 5.0, "c": 8.0}


def test_mean_mixes_integers_and_floats_skipping_nan():
    assert MeanAggregation().compute(_cells(1, 2.0, math.nan, "x", 6)) == 3.0


def test_mean_without_numeric_cells():
    result = Table.from_pydict({"a": ["x", None]}).mean()
    assert math.isnan(result["a"])


def test_median():
    assert MedianAggregation().compute(_cells(3.0, 1.0, 2.0)) == 2.0
    assert MedianAggregation().compute(_cells(4.0, 1.0, 3.0, 2.0)) == 2.5
    assert MedianAggregation().compute(_cells(7.5)) == 7.5


def test_median_of_table():
    result = TEST_DATA.median()
    assert result["revenue"] == 2.75
    assert math.isnan(result["city"])
    assert math.isnan(Table.from_pydict({"a": []}).median()["a"])


def test_median_ignores_integers():
    assert MedianAggregation().compute(_cells(100, 1.0, 2.0, math.nan)) == 1.5
    assert math.isnan(MedianAggregation().compute(_cells(1, 2, 3)))


def test_min_and_max():
    result_min = TEST_DATA.min()
    result_max = TEST_DATA.max()
    assert result_min["revenue"] == 1.5
    assert result_max["revenue"] == 4.0
    # Only FLOAT cells are considered
    assert math.isnan(result_min["n_employees"])
    assert math.isnan(result_max["city"])


def test_min_max_ignore_nan():
    cells = _cells(math.nan, 2.0, -1.0)
    assert MinAggregation().compute(cells) == -1.0
    assert MaxAggregation().compute(cells) == 2.0


def test_sum():
    result = TEST_DATA.sum()
    assert result["revenue"] == 11.0
    assert result["n_employees"] == 0.0


def test_sum_of_strings_is_zero():
    result = Table.from_pydict({"a": ["x", "y"]}).sum()
    assert result == {"a": 0.0}
    assert not math.isnan(result["a"])


def test_count():
    assert CountAggregation().compute(_cells(1, None, "", "x", math.nan)) == 2
    assert TEST_DATA.count()["revenue"] == 4


def test_aggregation_str():
    assert str(SumAggregation()) == "SumAggregation()"


def test_describe():
    result = Table.from_pydict(
        {"a": [1, 2.0, math.nan, 6], "b": ["x", "y", "z", None]}
    ).describe()
    assert result == {"a": Description(count=3, sum=9.0, min=1.0, max=6.0), "b": None}
    assert result["a"].mean == 3.0
    assert str(result["a"]) == "count = 3, mean = 3.000000, min = 1.000000, max = 6.000000"


def test_value_counts():
    result = Table.from_pydict({"a": ["x", "x", "y"]}).value_counts()
    assert {cell.as_py(): count for cell, count in result["a"].items()} == {
        "x": 2,
        "y": 1,
    }


def test_value_counts_counts_missing_and_nan():
    result = Table.from_pydict(
        {"a": [math.nan, math.nan, None, 1, 1.0]}
    ).value_counts()
    assert result["a"] == {
        floating(math.nan): 2,
        MISSING: 1,
        integer(1): 1,
        floating(1.0): 1,
    }


def test_group_by():
    groups = TEST_DATA.group_by("city")
    assert list(groups) == [string("New York"), string("Los Angeles")]

    new_york = groups[string("New York")]
    assert new_york.columns == TEST_DATA.columns
    assert new_york.get_column("n_employees") == _cells(10, 15, 20)
    assert groups[string("Los Angeles")].get_column("shop") == _cells(
        "Shop A", "Shop A2"
    )


def test_group_by_then_aggregate():
    totals = {
        key.as_py(): group.mean()["n_employees"]
        for key, group in TEST_DATA.group_by("city").items()
    }
    assert totals == {"New York": 15.0, "Los Angeles": 10.0}


def test_group_by_unknown_column():
    with pytest.raises(ColumnNotFoundError):
        TEST_DATA.group_by("country")


def test_group_by_returns_independent_tables():
    groups = TEST_DATA.group_by("shop")
    groups[string("Shop A")].fill_na()
    assert TEST_DATA.get_column("revenue")[2].is_nan()
