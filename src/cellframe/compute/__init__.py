"""The cellframe compute kernels.

The kernels implement the transformations that
:class:`cellframe.table.Table` exposes as methods.

The kernels know nothing about tables, they receive
the ordered mapping of columns to cells that the table
uses as its storage and return a new mapping (or modify
the received one in place, for the operations that mutate data)::

    (columns)-->kernel--(columns)-->Table

Keeping the behavior in standalone functions makes easy
to know how an operation is actually executed without having
to look around too much, and makes the kernels composable:

>>> from cellframe.cells import as_cell
>>> from cellframe.compute import drop_na, sort_values
>>> data = {
...    "animals": [as_cell(v) for v in ["Flamingo", "Horse", "nan", "Centipede"]],
...    "n_legs": [as_cell(v) for v in [2, 4, 5, 100]]
... }
>>> sort_values(drop_na(data), "n_legs")["animals"]
[Cell(STRING, 'Flamingo'), Cell(STRING, 'Horse'), Cell(STRING, 'Centipede')]
"""

from .aggregate import (
    Aggregation,
    CountAggregation,
    Description,
    MaxAggregation,
    MeanAggregation,
    MedianAggregation,
    MinAggregation,
    SumAggregation,
    aggregate,
    describe,
    group_by,
    value_counts,
)
from .base import ColumnsData, copy_data, require_column, row_count, take
from .combine import concat, merge
from .missing import drop_na, fill_na, is_na
from .pagination import head, row_slice, tail
from .sorting import sort_labels, sort_values

__all__ = (
    "ColumnsData",
    "copy_data",
    "require_column",
    "row_count",
    "take",
    "drop_na",
    "fill_na",
    "is_na",
    "sort_labels",
    "sort_values",
    "head",
    "tail",
    "row_slice",
    "merge",
    "concat",
    "aggregate",
    "describe",
    "group_by",
    "value_counts",
    "Aggregation",
    "CountAggregation",
    "Description",
    "MaxAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "MinAggregation",
    "SumAggregation",
)
