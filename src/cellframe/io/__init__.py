"""Input and output of table data.

Tables can be loaded from delimited text files,
see :mod:`cellframe.io.delimited`, and converted
from and to Apache Arrow tables, see :mod:`cellframe.io.arrow`.

Those modules produce and consume the plain columns mapping
used by :mod:`cellframe.compute`, wrapping them in a
:class:`cellframe.table.Table` is up to the caller.
"""

from .arrow import columns_from_arrow, columns_to_arrow
from .delimited import poll_column_names, read_delimited_columns

__all__ = (
    "columns_from_arrow",
    "columns_to_arrow",
    "poll_column_names",
    "read_delimited_columns",
)
