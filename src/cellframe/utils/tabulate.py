"""Format tabular data into a text table for print.

the `tabulate` function takes column names and rows of cells and formats them into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the content of a :class:`cellframe.table.Table`.

Example:

    >>> from cellframe.cells import as_cell
    >>> rows = [
    ...     [as_cell("Videogame"), as_cell(8), as_cell(66.5)],
    ...     [as_cell("Laptop"), as_cell(None), as_cell(38.72)],
    ...     [as_cell("Laptop"), as_cell(7), as_cell(77.46)],
    ... ]
    >>> print(tabulate(["Product", "Quantity", "Price"], rows))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | <NA>     | 38.72
    Laptop    | 7        | 77.46
"""

from typing import Sequence

from ..cells import Cell, CellType


def tabulate(
    cols: list[str], rows: Sequence[Sequence[Cell]], max_rows: int = 20
) -> str:
    """Format rows of cells into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22
    """
    textrows = [[format_value(cell) for cell in row] for row in rows[:max_rows]]

    colsizes = compute_max_colsize(cols, textrows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    body = [maketablerow(row, colsizes=colsizes) for row in textrows]

    table = "\n".join(header + separator + body)
    if len(rows) > max_rows:
        table += f"\n... and {len(rows) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(cell: Cell) -> str:
    """Format a cell to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.
    """
    if cell.tag is CellType.FLOAT:
        return f"{cell.value:.2f}"
    elif cell.tag is CellType.BOOLEAN:
        return "true" if cell.value else "false"

    v = str(cell)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
