"""Typed cells stored in table columns.

Every value kept by a :class:`cellframe.table.Table` is a :class:`Cell`,
a small immutable object that carries the value together with a tag
telling which kind of value it is.

The tags form a closed set, see :class:`CellType`::

    INTEGER, FLOAT, STRING, BOOLEAN, MISSING

Columns are not required to be homogeneous, a column loaded from
a file might contain integers in some rows and strings in others,
because each cell is inferred independently from its text:

>>> [infer_cell(text).tag.name for text in ["3", "3.5", "three"]]
['INTEGER', 'FLOAT', 'STRING']

Missing data is a bit more loose than the tags suggest. A MISSING cell
is obviously missing, but for historical reasons a FLOAT holding NaN
and the strings ``"nan"`` and ``""`` are considered missing too:

>>> is_missing(floating(float("nan"))), is_missing(string("nan")), is_missing(integer(0))
(True, True, False)
"""

import enum
import math
from typing import Any


class CellType(enum.Enum):
    """The kind of value held by a :class:`Cell`."""

    INTEGER = "int"
    FLOAT = "float"
    STRING = "str"
    BOOLEAN = "bool"
    MISSING = "missing"

    def __str__(self) -> str:
        return self.value


class Cell:
    """A single tagged value stored at a row of a column.

    Cells are immutable and hashable, so they can be used
    as keys when grouping or counting values.

    Equality requires both the tag and the value to match,
    thus ``integer(1) != floating(1.0)``. Differently from
    plain floats, two NaN cells are equal to each other, which allows
    all NaN values of a column to be counted or grouped together.
    """

    __slots__ = ("tag", "value")

    def __init__(self, tag: CellType, value: Any) -> None:
        """
        :param tag: The kind of value.
        :param value: The Python value, must be coherent with the tag.
        """
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Cell objects are immutable")

    def is_nan(self) -> bool:
        """If the cell is a FLOAT carrying NaN."""
        return self.tag is CellType.FLOAT and math.isnan(self.value)

    def as_py(self) -> Any:
        """Return the value as a plain Python object."""
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        if self.tag is not other.tag:
            return False
        if self.is_nan() and other.is_nan():
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        if self.is_nan():
            # hash(nan) depends on the object identity.
            return hash((self.tag, "nan"))
        return hash((self.tag, self.value))

    def __str__(self) -> str:
        if self.tag is CellType.MISSING:
            return "<NA>"
        return str(self.value)

    def __repr__(self) -> str:
        return f"Cell({self.tag.name}, {self.value!r})"


MISSING = Cell(CellType.MISSING, None)
"""The only MISSING cell, there is no need for more than one."""


def integer(value: int) -> Cell:
    return Cell(CellType.INTEGER, int(value))


def floating(value: float) -> Cell:
    return Cell(CellType.FLOAT, float(value))


def string(value: str) -> Cell:
    return Cell(CellType.STRING, str(value))


def boolean(value: bool) -> Cell:
    return Cell(CellType.BOOLEAN, bool(value))


def as_cell(value: Any) -> Cell:
    """Wrap a Python value into the matching :class:`Cell`.

    Cells are returned unchanged, ``None`` becomes :data:`MISSING`.

    ``bool`` must be checked before ``int`` as in Python
    booleans are a subclass of integers.

    >>> as_cell(True), as_cell(7), as_cell(None)
    (Cell(BOOLEAN, True), Cell(INTEGER, 7), Cell(MISSING, None))
    """
    if isinstance(value, Cell):
        return value
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return boolean(value)
    if isinstance(value, int):
        return integer(value)
    if isinstance(value, float):
        return floating(value)
    if isinstance(value, str):
        return string(value)
    raise TypeError(f"Unsupported cell value of type {type(value).__name__}: {value!r}")


def infer_cell(text: str) -> Cell:
    """Infer the type of a cell from its textual representation.

    The text is parsed as an integer first, then as a float,
    and if neither works it is kept as a string.

    Python accepts more than plain digits when parsing numbers, like
    underscores as separators (``"1_000"``) or surrounding whitespace.
    Such text, and text with non ASCII characters, is kept as a string.

    >>> infer_cell("42"), infer_cell("-0.5"), infer_cell("1_000")
    (Cell(INTEGER, 42), Cell(FLOAT, -0.5), Cell(STRING, '1_000'))
    """
    if "_" not in text and text.isascii() and text == text.strip():
        try:
            return integer(int(text))
        except ValueError:
            pass
        try:
            return floating(float(text))
        except ValueError:
            pass
    return string(text)


def is_numeric(cell: Cell) -> bool:
    """If the cell is an INTEGER or a FLOAT."""
    return cell.tag is CellType.INTEGER or cell.tag is CellType.FLOAT


def to_float(cell: Cell) -> float:
    """Coerce a numeric cell to float.

    Only INTEGER and FLOAT cells are accepted,
    check with :func:`is_numeric` first.
    """
    if not is_numeric(cell):
        raise TypeError(f"Cannot coerce {cell!r} to float")
    return float(cell.value)


def is_missing(cell: Cell) -> bool:
    """Detect if a cell represents missing data.

    A cell is missing when it is a MISSING cell,
    a FLOAT holding NaN, or the strings ``"nan"`` and ``""``.
    """
    if cell.tag is CellType.MISSING:
        return True
    if cell.tag is CellType.FLOAT:
        return math.isnan(cell.value)
    if cell.tag is CellType.STRING:
        return cell.value == "nan" or cell.value == ""
    return False


_FILL_DEFAULTS = {
    CellType.FLOAT: floating(0.0),
    CellType.STRING: string(""),
}


def default_for(tag: CellType) -> Cell:
    """The value that replaces a missing cell of the given type.

    FLOAT cells become ``0.0``, STRING cells become ``""``,
    any other kind of cell has no sensible default and stays MISSING.
    """
    return _FILL_DEFAULTS.get(tag, MISSING)
