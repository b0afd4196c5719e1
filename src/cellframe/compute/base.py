"""Base types and helpers for the compute kernels.

The kernels do not operate on :class:`cellframe.table.Table` objects,
they operate on the ordered mapping that the table uses to store
its data::

    {"city": [Cell, Cell, ...], "n_employees": [Cell, Cell, ...]}

This keeps the kernels independent from the table itself and
allows the table to decide if the result of a kernel replaces
its own data or has to be wrapped in a new table.

As the engine is column major, every row level operation
is expressed as a list of row indices that is then
applied to every column with :func:`take`.
"""

from typing import Iterable

from ..cells import Cell
from ..errors import ColumnNotFoundError

ColumnsData = dict[str, list[Cell]]
"""Ordered mapping of column names to their cells."""


def row_count(data: ColumnsData) -> int:
    """Number of rows, as the length of the first column.

    A mapping without columns has no rows.
    """
    for cells in data.values():
        return len(cells)
    return 0


def require_column(data: ColumnsData, name: str) -> list[Cell]:
    """Get the cells of a column or fail if it doesn't exist."""
    try:
        return data[name]
    except KeyError:
        raise ColumnNotFoundError(name) from None


def take(data: ColumnsData, indices: Iterable[int]) -> ColumnsData:
    """Build new columns picking the rows at the given indices.

    The indices are applied in the order they are provided,
    so this can be used both to filter and to reorder rows.

    >>> from cellframe.cells import as_cell
    >>> take({"a": [as_cell(1), as_cell(2), as_cell(3)]}, [2, 0])
    {'a': [Cell(INTEGER, 3), Cell(INTEGER, 1)]}
    """
    indices = list(indices)
    return {name: [cells[idx] for idx in indices] for name, cells in data.items()}


def copy_data(data: ColumnsData) -> ColumnsData:
    """Copy the columns so that they share no list with the original.

    Cells are immutable, so copying the lists is all that is needed.
    """
    return {name: list(cells) for name, cells in data.items()}
