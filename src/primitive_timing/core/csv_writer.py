"""
Sequential comma-separated value writer.

Entries are written row by row, and each row column by column.  Cells are
buffered until :meth:`CSVWriter.end_line` persists the row::

    with CSVWriter("example.csv") as csv:
        csv.add_entry("size")
        csv.add_entry("value")
        csv.end_line()
        csv.add_entry(10)
        csv.add_entry(3.14)
        csv.end_line()

produces::

    size,value
    10,3.14

Cells are not quoted; callers are expected to write plain labels and numbers.
"""

from __future__ import annotations

import logging
import numbers
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

Entry = Union[str, int, float]


def format_entry(value: Entry) -> str:
    """Return the cell text for a string, integer or floating-point value.

    Floats use Python's shortest round-trip form (``repr``), so ``2.5`` is
    written as ``2.5`` and ``0.1`` as ``0.1``.  Booleans are rejected along
    with every other non-numeric type.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError(f"unsupported entry type: {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return repr(float(value))
    raise TypeError(f"unsupported entry type: {type(value).__name__}")


class CSVWriter:
    """Write a CSV file one row at a time.

    Opening truncates any existing file at ``path``.  The file must be closed
    with :meth:`close` (or by leaving a ``with`` block) once all rows are
    written, otherwise trailing data may be lost.

    Parameters
    ----------
    path : str or Path
        Destination file.  Its parent directory must already exist.

    Raises
    ------
    OSError
        If the destination cannot be created.  The failure is logged with the
        offending path before being re-raised.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._line: List[str] = []
        try:
            self._out = open(self.path, "w", encoding="utf-8", newline="")
        except OSError:
            logger.error("Could not create file: %s", self.path)
            raise

    @property
    def closed(self) -> bool:
        return self._out.closed

    def add_entry(self, value: Entry) -> None:
        """Append one cell to the current row."""
        self._line.append(format_entry(value))

    def end_line(self) -> None:
        """Write the current row followed by a newline and start a new row."""
        try:
            self._out.write(",".join(self._line) + "\n")
        except OSError:
            logger.error("Could not write to file: %s", self.path)
            raise
        finally:
            self._line.clear()

    def add_row(self, *values: Entry) -> None:
        """Convenience wrapper: add every value then end the line."""
        for value in values:
            self.add_entry(value)
        self.end_line()

    def close(self) -> bool:
        """Flush and close the file.

        Returns True when this call closed the file and False if it was
        already closed.  A failure to flush or close is logged and re-raised.
        """
        if self._out.closed:
            return False
        self._line.clear()
        try:
            self._out.close()
        except OSError:
            logger.error("Could not close file %s", self.path)
            raise
        logger.info("Successfully wrote %s", self.path)
        return True

    def __enter__(self) -> "CSVWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"CSVWriter({str(self.path)!r}, closed={self.closed})"
