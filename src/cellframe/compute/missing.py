"""Handling of missing data.

Data loaded from files is frequently incomplete, some rows
might lack a value for one or more columns. This module implements
the kernels that detect those values, discard the rows containing
them, or replace them with a default value.

What constitutes a missing value is decided by :func:`cellframe.cells.is_missing`.
"""

from ..cells import Cell, boolean, default_for, is_missing
from .base import ColumnsData, row_count, take


def missing_rows(data: ColumnsData) -> set[int]:
    """Indices of the rows where at least one column is missing."""
    rows = set()
    for cells in data.values():
        for row_idx, cell in enumerate(cells):
            if is_missing(cell):
                rows.add(row_idx)
    return rows


def drop_na(data: ColumnsData) -> ColumnsData:
    """Return new columns containing only the rows without missing values.

    Rows preserve their original order.
    """
    discard = missing_rows(data)
    keep = [idx for idx in range(row_count(data)) if idx not in discard]
    return take(data, keep)


def fill_na(data: ColumnsData) -> None:
    """Replace the missing cells in place with the default for their type.

    See :func:`cellframe.cells.default_for`
    """
    for cells in data.values():
        for row_idx, cell in enumerate(cells):
            if is_missing(cell):
                cells[row_idx] = default_for(cell.tag)


_TRUE = boolean(True)
_FALSE = boolean(False)


def is_na(data: ColumnsData) -> ColumnsData:
    """Return a boolean mask with the same shape of the data.

    Each cell is replaced by a BOOLEAN cell that is ``True``
    when the original cell was missing.
    """
    return {name: [_mask_cell(cell) for cell in cells] for name, cells in data.items()}


def _mask_cell(cell: Cell) -> Cell:
    return _TRUE if is_missing(cell) else _FALSE
