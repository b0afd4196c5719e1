"""The Table object itself."""

from typing import Any, Iterator, Mapping, Self, Sequence

import pyarrow as pa

from .. import compute
from ..cells import Cell, CellType, as_cell
from ..compute import ColumnsData
from ..compute.aggregate import (
    CountAggregation,
    Description,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    SumAggregation,
)
from ..errors import ColumnNotFoundError
from ..io import columns_from_arrow, columns_to_arrow, read_delimited_columns
from ..utils.tabulate import tabulate


class Table:
    """Data structure that handles data in rows and columns.

    The Table object allows to represent in-memory data
    and perform transformations over it.

    Data is stored by column, each column is a list of
    :class:`cellframe.cells.Cell` and all columns have the same
    number of rows. The order of the columns is the order
    in which they are displayed and iterated.

    >>> table = Table(["a", "b"], {"a": [1, 2, 3], "b": ["x", None, "z"]})
    >>> table.shape()
    (2, 3)
    >>> table.drop_na().to_pydict()
    {'a': [1, 3], 'b': ['x', 'z']}

    Operations that modify the table in place, like :meth:`fill_na`
    and the sorting methods, return ``None``. All other operations
    return a new Table that shares no column with the original one.
    """

    def __init__(self, columns: Sequence[str], data: Mapping[str, Sequence[Any]]) -> None:
        """
        :param columns: The names of the columns, in display order.
        :param data: The values of each column, either :class:`cellframe.cells.Cell`
                     objects or plain Python values (int, float, str, bool, None).

        All columns are expected to have the same number of values,
        this is not verified.
        """
        self._data: ColumnsData = {}
        for name in columns:
            try:
                values = data[name]
            except KeyError:
                raise ColumnNotFoundError(name) from None
            self._data[name] = [as_cell(value) for value in values]

    @classmethod
    def _wrap(cls, data: ColumnsData) -> Self:
        """Create a Table around already built columns, without copying them."""
        table = cls.__new__(cls)
        table._data = data
        return table

    @classmethod
    def from_pydict(cls, data: Mapping[str, Sequence[Any]]) -> Self:
        """Create a Table from a ``{column: values}`` dictionary.

        Columns follow the order of the dictionary.
        """
        return cls(list(data), data)

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a Table from a pyarrow Table or RecordBatch."""
        return cls._wrap(columns_from_arrow(table))

    @classmethod
    def open_csv(cls, filename: str, delimiter: str = ",") -> Self:
        """Open a delimited text file and create a Table out of its data.

        The first row of the file provides the column names,
        the type of every other cell is inferred independently.

        :param filename: The path to a local file.
        :param delimiter: The character separating fields, a comma by default.
        """
        return cls._wrap(read_delimited_columns(filename, delimiter))

    def to_arrow(self) -> pa.Table:
        """Convert the data to a :class:`pyarrow.Table`."""
        return columns_to_arrow(self._data)

    def to_pydict(self) -> dict[str, list[Any]]:
        """Return the data as ``{column: [value, ...]}`` with plain Python values."""
        return {name: [cell.as_py() for cell in cells] for name, cells in self._data.items()}

    # Introspection

    @property
    def columns(self) -> list[str]:
        """The names of the columns, in order."""
        return list(self._data)

    def index(self) -> range:
        """The labels of the rows, which are their positions."""
        return range(len(self))

    def shape(self) -> tuple[int, int]:
        """The number of columns and rows."""
        return len(self._data), len(self)

    def dtypes(self) -> dict[str, CellType]:
        """The type of each column, as the type of its first cell.

        Columns without rows are reported as MISSING.
        """
        return {
            name: cells[0].tag if cells else CellType.MISSING
            for name, cells in self._data.items()
        }

    def __len__(self) -> int:
        return compute.row_count(self._data)

    def get_column(self, name: str) -> list[Cell]:
        """Get the cells of a single column."""
        return list(compute.require_column(self._data, name))

    def get_row_slice(self, start: int, end: int) -> Self:
        """Get a new Table with the rows from ``start`` to ``end`` excluded."""
        return self._wrap(compute.row_slice(self._data, start, end))

    def __getitem__(self, key: str | slice) -> Any:
        """Select a column by name or a range of rows with a slice.

        Slices follow the semantics of :meth:`get_row_slice`,
        steps are not supported.
        """
        if isinstance(key, slice):
            if key.step is not None:
                raise ValueError("Row slices don't support steps")
            start = 0 if key.start is None else key.start
            end = len(self) if key.stop is None else key.stop
            return self.get_row_slice(start, end)
        return self.get_column(key)

    def iter_rows(self) -> Iterator[tuple[Cell, ...]]:
        """Iterate over the rows, each row is a tuple of cells in column order."""
        return zip(*self._data.values())

    def head(self, n: int = 5) -> Self:
        """A new Table with the first ``n`` rows."""
        return self._wrap(compute.head(self._data, n))

    def tail(self, n: int = 5) -> Self:
        """A new Table with the last ``n`` rows."""
        return self._wrap(compute.tail(self._data, n))

    def copy(self) -> Self:
        """A new Table with the same data, that shares no column with this one."""
        return self._wrap(compute.copy_data(self._data))

    # Missing values

    def drop_na(self) -> Self:
        """A new Table without the rows where any column is missing."""
        return self._wrap(compute.drop_na(self._data))

    def fill_na(self) -> None:
        """Replace missing values in place with a default for their type.

        Missing floats become ``0.0``, missing strings become ``""``.
        """
        compute.fill_na(self._data)

    def is_na(self) -> Self:
        """A new Table of booleans telling which cells are missing."""
        return self._wrap(compute.is_na(self._data))

    # Sorting

    def sort_index(self) -> None:
        """Sort the columns by name, in place."""
        self._data = compute.sort_labels(self._data)

    def sort_values(self, column: str) -> None:
        """Sort the rows by the values of a column, in place.

        Only INTEGER cells can be compared to other INTEGER
        cells and FLOAT cells to other FLOAT cells. Rows with NaN,
        missing or non numeric values end up last,
        see :mod:`cellframe.compute.sorting`.
        """
        self._data = compute.sort_values(self._data, column)

    # Aggregations

    def describe(self) -> dict[str, Description | None]:
        """Summary statistics of the numeric cells of each column.

        Columns without numeric data are reported as ``None``.
        """
        return compute.describe(self._data)

    def count(self) -> dict[str, int]:
        """The number of cells that are not missing, per column."""
        return compute.aggregate(self._data, CountAggregation())

    def mean(self) -> dict[str, float]:
        """The mean of the INTEGER and FLOAT cells of each column."""
        return compute.aggregate(self._data, MeanAggregation())

    def median(self) -> dict[str, float]:
        """The median of the FLOAT cells of each column."""
        return compute.aggregate(self._data, MedianAggregation())

    def min(self) -> dict[str, float]:
        """The minimum of the FLOAT cells of each column."""
        return compute.aggregate(self._data, MinAggregation())

    def max(self) -> dict[str, float]:
        """The maximum of the FLOAT cells of each column."""
        return compute.aggregate(self._data, MaxAggregation())

    def sum(self) -> dict[str, float]:
        """The sum of the FLOAT cells of each column, ``0.0`` when there are none."""
        return compute.aggregate(self._data, SumAggregation())

    def value_counts(self) -> dict[str, dict[Cell, int]]:
        """How many times each distinct cell appears, per column."""
        return compute.value_counts(self._data)

    def group_by(self, column: str) -> dict[Cell, Self]:
        """Split the table in groups of rows sharing the same value of ``column``."""
        return {
            key: self._wrap(data)
            for key, data in compute.group_by(self._data, column).items()
        }

    # Combining

    def merge(self, other: "Table", on: str) -> Self:
        """Overlay the columns of ``other`` over the columns of this table.

        Rows are paired by position, ``on`` is not used to align them.
        See :mod:`cellframe.compute.combine`.
        """
        return self._wrap(compute.merge(self._data, other._data, on))

    def concat(self, other: "Table") -> Self:
        """Append the rows of ``other`` after the rows of this table.

        Only the columns of this table are kept.
        See :mod:`cellframe.compute.combine`.
        """
        return self._wrap(compute.concat(self._data, other._data))

    # Representation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.columns == other.columns and self._data == other._data

    def __str__(self) -> str:
        return tabulate(self.columns, list(self.iter_rows()))

    def __repr__(self) -> str:
        return f"Table(columns={self.columns}, rows={len(self)})"


def read_delimited(filename: str, delimiter: str = ",") -> Table:
    """Load a delimited text file into a :class:`Table`."""
    return Table.open_csv(filename, delimiter=delimiter)


def read_csv(filename: str) -> Table:
    """Load a comma separated file into a :class:`Table`."""
    return Table.open_csv(filename)
