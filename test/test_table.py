import math

import pyarrow as pa
import pytest

from cellframe import Table
from cellframe.cells import MISSING, CellType, floating, integer, string
from cellframe.errors import ColumnNotFoundError, RangeError


@pytest.fixture
def mock_table():
    """Create a mock Table for testing."""
    return Table(["a", "b", "c"], {"a": [1, 2, 3], "b": [4, 5, 6], "c": [7, 8, 9]})


@pytest.fixture
def missing_table():
    return Table(
        ["a", "b", "c"],
        {
            "a": ["hello", math.nan, "pandas"],
            "b": [1, 2, math.nan],
            "c": [47, 3, 4],
        },
    )


def test_init_wraps_values(mock_table):
    assert mock_table.columns == ["a", "b", "c"]
    assert mock_table.get_column("a") == [integer(1), integer(2), integer(3)]


def test_init_follows_columns_order():
    table = Table(["b", "a"], {"a": [1], "b": [2]})
    assert table.columns == ["b", "a"]


def test_init_unknown_column():
    with pytest.raises(ColumnNotFoundError):
        Table(["a", "z"], {"a": [1]})


def test_from_pydict():
    table = Table.from_pydict({"x": ["a", None], "y": [1.5, True]})
    assert table.columns == ["x", "y"]
    assert table.get_column("x") == [string("a"), MISSING]
    assert table.dtypes() == {"x": CellType.STRING, "y": CellType.FLOAT}


def test_shape(mock_table):
    assert mock_table.shape() == (3, 3)
    assert len(mock_table) == 3


def test_shape_without_columns():
    assert Table([], {}).shape() == (0, 0)


def test_index(mock_table):
    assert list(mock_table.index()) == [0, 1, 2]


def test_dtypes_uses_first_cell():
    table = Table.from_pydict({"a": [1, "x"], "b": ["x", 1.0], "c": []})
    assert table.dtypes() == {
        "a": CellType.INTEGER,
        "b": CellType.STRING,
        "c": CellType.MISSING,
    }


def test_get_column_unknown(mock_table):
    with pytest.raises(ColumnNotFoundError) as excinfo:
        mock_table.get_column("z")
    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "Column not found: 'z'"


def test_get_column_returns_copy(mock_table):
    cells = mock_table.get_column("a")
    cells.append(integer(4))
    assert len(mock_table.get_column("a")) == 3


def test_get_row_slice(mock_table):
    sliced = mock_table.get_row_slice(1, 3)
    assert sliced.to_pydict() == {"a": [2, 3], "b": [5, 6], "c": [8, 9]}
    assert sliced.columns == mock_table.columns


def test_get_row_slice_empty(mock_table):
    assert mock_table.get_row_slice(2, 2).shape() == (3, 0)


@pytest.mark.parametrize("start, end", [(-1, 2), (0, 4), (2, 1)])
def test_get_row_slice_out_of_range(mock_table, start, end):
    with pytest.raises(RangeError):
        mock_table.get_row_slice(start, end)


def test_getitem(mock_table):
    assert mock_table["b"] == [integer(4), integer(5), integer(6)]
    assert mock_table[1:].to_pydict() == {"a": [2, 3], "b": [5, 6], "c": [8, 9]}
    assert mock_table[:1].to_pydict() == {"a": [1], "b": [4], "c": [7]}
    with pytest.raises(ValueError):
        mock_table[::2]


def test_head_and_tail(mock_table):
    assert mock_table.head(2).to_pydict() == {"a": [1, 2], "b": [4, 5], "c": [7, 8]}
    assert mock_table.tail(2).to_pydict() == {"a": [2, 3], "b": [5, 6], "c": [8, 9]}


def test_head_and_tail_with_fewer_rows(mock_table):
    assert mock_table.head(5) == mock_table
    assert mock_table.tail(5) == mock_table
    assert len(mock_table.head(0)) == 0


def test_head_negative(mock_table):
    with pytest.raises(ValueError):
        mock_table.head(-1)


def test_copy_is_independent(missing_table):
    copied = missing_table.copy()
    assert copied.columns == missing_table.columns
    assert copied == missing_table

    copied.fill_na()
    copied.sort_index()
    assert missing_table.get_column("a")[1].is_nan()
    assert copied != missing_table


def test_copy_not_affected_by_later_changes(missing_table):
    copied = missing_table.copy()
    missing_table.sort_values("c")
    assert copied.get_column("c") == [integer(47), integer(3), integer(4)]


def test_iter_rows(mock_table):
    assert list(mock_table.iter_rows())[0] == (integer(1), integer(4), integer(7))


def test_str(missing_table):
    assert str(missing_table) == (
        "a      | b   | c \n"
        "------ | --- | --\n"
        "hello  | 1   | 47\n"
        "nan    | 2   | 3 \n"
        "pandas | nan | 4 "
    )


def test_repr(mock_table):
    assert repr(mock_table) == "Table(columns=['a', 'b', 'c'], rows=3)"


def test_to_arrow():
    table = Table.from_pydict({"a": [1, None], "b": ["x", 2.5], "c": [True, False]})
    arrow = table.to_arrow()
    assert arrow.column_names == ["a", "b", "c"]
    assert arrow.column("a").to_pylist() == [1, None]
    assert arrow.column("b").to_pylist() == ["x", "2.5"]
    assert arrow.schema.field("c").type == pa.bool_()


def test_from_arrow():
    table = Table.from_arrow(pa.table({"n": [1, None, 3], "s": ["x", "y", "z"]}))
    assert table.get_column("n") == [integer(1), MISSING, integer(3)]
    assert table.dtypes() == {"n": CellType.INTEGER, "s": CellType.STRING}


def test_from_arrow_recordbatch():
    table = Table.from_arrow(pa.record_batch({"f": [1.5, 2.5]}))
    assert table.get_column("f") == [floating(1.5), floating(2.5)]
