"""cellframe

An in-memory tabular data engine.

cellframe loads delimited text into a column oriented table,
infers the type of each cell independently, and provides
a fixed vocabulary of transformations: sorting, handling of
missing values, descriptive statistics, grouping and merging.

The platform is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Cells, the typed values stored in tables, see :mod:`cellframe.cells`.
* The Table, which provides the high level API, see :mod:`cellframe.table`.
* The Compute kernels, that implement the operations, see :mod:`cellframe.compute`.
* The IO layer, that loads files and exchanges data with Arrow, see :mod:`cellframe.io`.

For the user guide and code documentation of each component, refer to the
component itself.
"""

from . import compute
from .cells import MISSING, Cell, CellType, as_cell
from .errors import (
    ColumnNotFoundError,
    ParseError,
    RangeError,
    TableError,
    TableIOError,
)
from .table import Table, read_csv, read_delimited

__all__ = (
    "compute",
    "Cell",
    "CellType",
    "MISSING",
    "as_cell",
    "Table",
    "read_csv",
    "read_delimited",
    "TableError",
    "TableIOError",
    "ParseError",
    "ColumnNotFoundError",
    "RangeError",
)
