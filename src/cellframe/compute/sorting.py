"""Sorting of columns and rows.

Two kinds of sorting are supported:

* Sorting by label, which reorders the columns of a table
  by their name and leaves the rows untouched.
* Sorting by values, which reorders the rows of the table
  based on the values of one of its columns.

Sorting by values is implemented by computing a permutation
of the row indices and then applying it to every column::

    values:      [5, 3, 4]
    permutation: [1, 2, 0]
    sorted:      [3, 4, 5]

Cells of a column are not required to share the same type,
so the ordering is only defined between two INTEGER cells
or two FLOAT cells, see :func:`less`. Any other pair of cells
is considered "not less than" each other.

To get a consistent ordering the rows are split in groups,
INTEGER cells first, then FLOAT cells, then everything else
(NaN, missing values, strings and booleans)::

    values:      [3.0, nan, 1.0, <NA>, 2.0]
    sorted:      [1.0, 2.0, 3.0, nan, <NA>]

Numeric groups are sorted by value, the last group keeps
the order the rows had in the table. Python sorting is stable,
so equal values keep their relative order too.
"""

import logging

from ..cells import Cell, CellType
from .base import ColumnsData, require_column, take

logger = logging.getLogger(__name__)


def sort_labels(data: ColumnsData) -> ColumnsData:
    """Return the same columns ordered lexicographically by name.

    Only the order of the columns changes, the lists
    of cells are the same objects of the original mapping.

    >>> list(sort_labels({"b": [], "c": [], "a": []}))
    ['a', 'b', 'c']
    """
    return {name: data[name] for name in sorted(data)}


def less(left: Cell, right: Cell) -> bool:
    """Compare two cells for sorting.

    Only cells that are both INTEGER or both FLOAT
    can be less than each other.

    >>> from cellframe.cells import integer, floating
    >>> less(integer(1), integer(2)), less(integer(1), floating(2.0))
    (True, False)
    """
    if left.tag is not right.tag:
        return False
    if left.tag is CellType.INTEGER or left.tag is CellType.FLOAT:
        return left.value < right.value
    return False


def _sort_key(cell: Cell) -> tuple[int, float]:
    # Consistent with less(), INTEGER and FLOAT cells never compare.
    if cell.tag is CellType.INTEGER:
        return 0, cell.value
    if cell.tag is CellType.FLOAT and not cell.is_nan():
        return 1, cell.value
    return 2, 0


def sort_permutation(cells: list[Cell]) -> list[int]:
    """Compute the row indices that sort the cells in ascending order.

    >>> from cellframe.cells import MISSING, floating
    >>> sort_permutation([floating(3.0), floating(float("nan")), MISSING, floating(1.0)])
    [3, 0, 1, 2]
    """
    return sorted(range(len(cells)), key=lambda idx: _sort_key(cells[idx]))


def sort_values(data: ColumnsData, column: str) -> ColumnsData:
    """Return new columns with rows sorted by the values of ``column``.

    Raises :class:`cellframe.errors.ColumnNotFoundError` if the
    column doesn't exist.
    """
    cells = require_column(data, column)
    permutation = sort_permutation(cells)
    logger.debug("Sorting %d rows by %r", len(permutation), column)
    return take(data, permutation)
