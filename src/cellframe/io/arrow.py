"""Exchange data with Apache Arrow.

Arrow arrays are strongly typed, every value of a column
has the same type, while cellframe columns are allowed to
mix different kinds of cells.

When converting to Arrow, columns whose cells are all of the
same kind keep their native type, MISSING cells become nulls.
Columns mixing different kinds of cells are converted to strings.

>>> from cellframe.cells import as_cell
>>> table = columns_to_arrow({"a": [as_cell(1), as_cell(None)], "b": [as_cell(1), as_cell("x")]})
>>> table.schema
a: int64
b: string
>>> table.column("b").to_pylist()
['1', 'x']
"""

import pyarrow as pa

from ..cells import Cell, CellType, as_cell
from ..compute.base import ColumnsData


def columns_from_arrow(table: pa.Table | pa.RecordBatch) -> ColumnsData:
    """Convert the columns of a pyarrow Table or RecordBatch to cells.

    Nulls become MISSING cells. Only values that map to a
    cell type (integers, floats, strings, booleans) are supported.
    """
    return {
        name: [as_cell(value) for value in table.column(name).to_pylist()]
        for name in table.column_names
    }


def columns_to_arrow(data: ColumnsData) -> pa.Table:
    """Convert columns of cells to a :class:`pyarrow.Table`."""
    return pa.table({name: _cells_to_array(cells) for name, cells in data.items()})


def _cells_to_array(cells: list[Cell]) -> pa.Array:
    tags = {cell.tag for cell in cells if cell.tag is not CellType.MISSING}
    if len(tags) <= 1:
        return pa.array([cell.as_py() for cell in cells])
    return pa.array(
        [None if cell.tag is CellType.MISSING else str(cell) for cell in cells],
        type=pa.string(),
    )
