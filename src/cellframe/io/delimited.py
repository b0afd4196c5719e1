"""Load data from delimited text files.

Given a local CSV (or any other single character delimited) file,
read the header and the rows and infer the type of each cell.

Parsing of the file is delegated to :mod:`pyarrow.csv`, but the type
inference of pyarrow works per column, while cellframe infers each
cell independently. So all the columns are read as strings and each
value is then passed through :func:`cellframe.cells.infer_cell`.

Given a file like::

    city,n_employees
    New York,10
    Los Angeles,8.5

the resulting data would be::

    {
        "city": [Cell(STRING, 'New York'), Cell(STRING, 'Los Angeles')],
        "n_employees": [Cell(INTEGER, 10), Cell(FLOAT, 8.5)]
    }
"""

import logging

import pyarrow as pa
import pyarrow.csv

from ..cells import infer_cell
from ..compute.base import ColumnsData
from ..errors import ParseError, TableIOError

logger = logging.getLogger(__name__)


def poll_column_names(filename: str, delimiter: str = ",") -> list[str]:
    """Read the header of the file without loading its content."""
    with pa.csv.open_csv(
        filename, parse_options=pa.csv.ParseOptions(delimiter=delimiter)
    ) as reader:
        return reader.schema.names


def read_delimited_columns(filename: str, delimiter: str = ",") -> ColumnsData:
    """Read a delimited file and return its columns.

    :param filename: The path of the local file.
    :param delimiter: The character separating the fields of a row.

    Raises :class:`cellframe.errors.TableIOError` when the file can't be opened
    and :class:`cellframe.errors.ParseError` when the header or one of the rows
    is malformed, for example has a different number of fields than the header.
    """
    try:
        names = poll_column_names(filename, delimiter)
        table = pa.csv.read_csv(
            filename,
            parse_options=pa.csv.ParseOptions(delimiter=delimiter),
            convert_options=pa.csv.ConvertOptions(
                # Read everything as text, inference happens per cell.
                column_types={name: pa.string() for name in names},
                strings_can_be_null=False,
                quoted_strings_can_be_null=False,
            ),
        )
    except pa.ArrowInvalid as err:
        raise ParseError(f"Unable to parse {filename}: {err}") from err
    except OSError as err:
        raise TableIOError(f"Unable to open {filename}: {err}") from err

    data: ColumnsData = {}
    # Header names can repeat, columns are taken by position and the last one wins.
    for name, column in zip(table.column_names, table.columns):
        if name in data:
            logger.warning(
                "Column %r appears more than once in %s, keeping the last one",
                name,
                filename,
            )
        data[name] = [infer_cell(text) for text in column.to_pylist()]
    logger.debug(
        "Loaded %d rows and %d columns from %s", table.num_rows, len(data), filename
    )
    return data
