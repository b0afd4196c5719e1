"""Aggregations and statistics over columns.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data stored in a table.

Each statistic is implemented as an :class:`Aggregation`
that reduces the cells of a column to a single float.
Aggregations only consider the cells they know how to handle
and skip everything else, missing values included.

Which cells are considered differs between aggregations:

* :class:`MeanAggregation` considers both INTEGER and FLOAT cells.
* :class:`MedianAggregation`, :class:`MinAggregation`, :class:`MaxAggregation`
  and :class:`SumAggregation` only consider FLOAT cells.

When no cell can be considered the result is NaN, with the exception
of :class:`SumAggregation` for which the sum of nothing is ``0.0``.

>>> from cellframe.cells import as_cell
>>> cells = [as_cell(v) for v in [1, 2.5, "x", float("nan"), 4.5]]
>>> MeanAggregation().compute(cells), SumAggregation().compute(cells)
(2.6666666666666665, 7.0)

The actual reductions are computed by :mod:`pyarrow.compute`
on a float64 array built from the considered cells.

The module also provides grouping of rows, see :func:`group_by`,
and counting of distinct values, see :func:`value_counts`.
"""

import abc
import math
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from ..cells import Cell, CellType, is_missing, is_numeric, to_float
from .base import ColumnsData, require_column, take

__all__ = (
    "Aggregation",
    "CountAggregation",
    "MeanAggregation",
    "MedianAggregation",
    "MinAggregation",
    "MaxAggregation",
    "SumAggregation",
    "Description",
    "aggregate",
    "describe",
    "value_counts",
    "group_by",
)


def float_values(cells: list[Cell]) -> list[float]:
    """The values of the FLOAT cells that are not NaN."""
    return [
        cell.value
        for cell in cells
        if cell.tag is CellType.FLOAT and not math.isnan(cell.value)
    ]


def numeric_values(cells: list[Cell]) -> list[float]:
    """The INTEGER and FLOAT cells coerced to float, NaN excluded."""
    values = (to_float(cell) for cell in cells if is_numeric(cell))
    return [v for v in values if not math.isnan(v)]


def _nan_if_null(scalar: pa.Scalar) -> float:
    value = scalar.as_py()
    return math.nan if value is None else value


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation picks the values it is able to
    aggregate out of a column and reduces them to a single value.
    """

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, cells: list[Cell]) -> Any: ...


class SimpleAggregation(Aggregation):
    """Provide a base implementation for aggregations computed by pyarrow.

    Subclasses select the values through :meth:`_values`
    and reduce them in :meth:`_aggregate`.
    """

    def _values(self, cells: list[Cell]) -> list[float]:
        return float_values(cells)

    @abc.abstractmethod
    def _aggregate(self, data: pa.Array) -> float: ...

    def compute(self, cells: list[Cell]) -> float:
        return self._aggregate(pa.array(self._values(cells), type=pa.float64()))


class SumAggregation(SimpleAggregation):
    """Compute the sum of the FLOAT cells of a column."""

    def _aggregate(self, data: pa.Array) -> float:
        # min_count=0 makes the sum of an empty array 0 instead of null
        return pc.sum(data, min_count=0).as_py()


class MinAggregation(SimpleAggregation):
    """Compute the min of the FLOAT cells of a column."""

    def _aggregate(self, data: pa.Array) -> float:
        return _nan_if_null(pc.min(data))


class MaxAggregation(SimpleAggregation):
    """Compute the max of the FLOAT cells of a column."""

    def _aggregate(self, data: pa.Array) -> float:
        return _nan_if_null(pc.max(data))


class MeanAggregation(SimpleAggregation):
    """Compute the mean of the numeric cells of a column.

    Differently from the other aggregations, INTEGER cells
    are considered too, coerced to floats.
    """

    def _values(self, cells: list[Cell]) -> list[float]:
        return numeric_values(cells)

    def _aggregate(self, data: pa.Array) -> float:
        return _nan_if_null(pc.mean(data))


class MedianAggregation(SimpleAggregation):
    """Compute the median of the FLOAT cells of a column.

    When the number of values is even the two middle
    values are averaged.
    """

    def _aggregate(self, data: pa.Array) -> float:
        # quantile returns one value for each requested q
        median = pc.quantile(data, q=0.5, interpolation="midpoint")
        return _nan_if_null(median[0])


class CountAggregation(Aggregation):
    """Count the cells of a column that are not missing."""

    def compute(self, cells: list[Cell]) -> int:
        return sum(1 for cell in cells if not is_missing(cell))


def aggregate(data: ColumnsData, aggregation: Aggregation) -> dict[str, Any]:
    """Apply the aggregation to every column.

    Returns a ``{column: result}`` dictionary in column order.
    """
    return {name: aggregation.compute(cells) for name, cells in data.items()}


class Description:
    """Summary statistics of the numeric cells of a column."""

    def __init__(self, count: int, sum: float, min: float, max: float) -> None:
        self.count = count
        self.sum = sum
        self.min = min
        self.max = max

    @property
    def mean(self) -> float:
        return self.sum / self.count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Description):
            return NotImplemented
        return (self.count, self.sum, self.min, self.max) == (
            other.count,
            other.sum,
            other.min,
            other.max,
        )

    def __str__(self) -> str:
        return (
            f"count = {self.count}, mean = {self.mean:f}, "
            f"min = {self.min:f}, max = {self.max:f}"
        )

    def __repr__(self) -> str:
        return (
            f"Description(count={self.count}, sum={self.sum}, "
            f"min={self.min}, max={self.max})"
        )


def describe(data: ColumnsData) -> dict[str, Description | None]:
    """Describe the numeric cells of each column.

    INTEGER and FLOAT cells are both considered, NaN is skipped.
    Columns without any numeric cell are described as ``None``.

    >>> from cellframe.cells import as_cell
    >>> describe({"a": [as_cell(1), as_cell(2.0), as_cell(6)], "b": [as_cell("x")]})
    {'a': Description(count=3, sum=9.0, min=1.0, max=6.0), 'b': None}
    """
    result: dict[str, Description | None] = {}
    for name, cells in data.items():
        values = pa.array(numeric_values(cells), type=pa.float64())
        if len(values) == 0:
            result[name] = None
            continue
        min_max = pc.min_max(values)
        result[name] = Description(
            count=len(values),
            sum=pc.sum(values).as_py(),
            min=min_max["min"].as_py(),
            max=min_max["max"].as_py(),
        )
    return result


def value_counts(data: ColumnsData) -> dict[str, dict[Cell, int]]:
    """Count the occurrences of each distinct cell in every column.

    Missing cells are counted like any other value.
    Keys are in the order they are first found.
    """
    result = {}
    for name, cells in data.items():
        counts: dict[Cell, int] = {}
        for cell in cells:
            counts[cell] = counts.get(cell, 0) + 1
        result[name] = counts
    return result


def group_by(data: ColumnsData, column: str) -> dict[Cell, ColumnsData]:
    """Partition the rows by the distinct values of ``column``.

    Each group contains all the columns, but only the rows
    sharing the same value for the grouping column.
    Groups are in the order their value is first found.

    Suppose we have the following data::

        city, n_employees
        New York, 10
        Los Angeles, 8
        New York, 20

    Grouping by ``city`` would lead to::

        New York:    city, n_employees
                     New York, 10
                     New York, 20

        Los Angeles: city, n_employees
                     Los Angeles, 8
    """
    keys = require_column(data, column)
    rows_by_key: dict[Cell, list[int]] = {}
    for row_idx, key in enumerate(keys):
        rows_by_key.setdefault(key, []).append(row_idx)
    return {key: take(data, rows) for key, rows in rows_by_key.items()}
