"""Exceptions raised by cellframe.

All of them inherit from :class:`TableError` and from the
builtin exception that better describes the failure, so that
callers can catch either ``TableError`` or, for example, ``KeyError``.
"""


class TableError(Exception):
    """Base class for all the errors raised by cellframe."""


class TableIOError(TableError, OSError):
    """An exception raised when a file can't be opened for reading."""


class ParseError(TableError, ValueError):
    """An exception raised when the header or a row of a file can't be parsed."""


class ColumnNotFoundError(TableError, KeyError):
    """An exception raised when an operation references a column that doesn't exist."""

    def __init__(self, column: str) -> None:
        super().__init__(column)
        self.column = column

    def __str__(self) -> str:
        return f"Column not found: {self.column!r}"


class RangeError(TableError, IndexError):
    """An exception raised when a row slice is out of the table bounds."""
