"""Tables of heterogeneous, possibly missing, values.

A table is a tool designed to handle and manipulate structured data,
in the form of rows and columns. It allows users to load data
from delimited text files, explore it, apply transformations,
and analyze it.

Differently from most dataframe libraries, the columns of a
:class:`Table` are not typed. Each value is a
:class:`cellframe.cells.Cell` that carries its own type,
so a column can contain numbers in some rows and text in others,
which is frequently the case for data typed by hand in spreadsheets.

Tables are eager and entirely held in memory, every operation
is applied immediately when invoked::

    table = Table.open_csv("shops.csv")
    table.fill_na()
    table.sort_values("n_employees")
    print(table.head(5))
    print(table.mean())

The operations themselves are implemented by the kernels
in :mod:`cellframe.compute`, the table is in charge of
deciding if their result replaces its data or becomes a new table.
"""

from .table import Table, read_csv, read_delimited

__all__ = ("Table", "read_csv", "read_delimited")
