"""Timing records of dictionary operations and the table that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Optional

_HEADERS = ("Operation", "time", "size")


class Operation(IntEnum):
    """Dictionary operation whose duration is measured."""

    ADD = 0
    GET = 1
    REMOVE = 2

    def label(self) -> str:
        """Display name of the operation."""
        return self.name.capitalize()


@dataclass(frozen=True)
class Measurement:
    """One table row: operation, mean duration in seconds, dictionary size."""

    operation: Optional[Operation] = None
    time: float = 0.0
    size: int = 0


class OperationTable:
    """A three-column table of :class:`Measurement` rows."""

    def __init__(self, rows: int = 0) -> None:
        if rows < 0:
            raise ValueError("invalid row count")
        self._rows: list[Measurement] = [Measurement() for _ in range(rows)]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._rows)

    @property
    def column_count(self) -> int:
        return len(_HEADERS)

    def _has_row(self, row: int) -> bool:
        return 0 <= row < len(self._rows)

    def cell(self, row: int, column: int) -> Any:
        """Return the displayed value of a cell, or ``None`` outside the table.

        Reading the operation of a row that has none raises ``ValueError``.
        """
        if not self._has_row(row):
            return None
        measurement = self._rows[row]
        if column == 0:
            if measurement.operation is None:
                raise ValueError("row has no operation")
            return measurement.operation.label()
        if column == 1:
            return measurement.time
        if column == 2:
            return measurement.size
        return None

    def set_cell(self, row: int, column: int, value: Any) -> bool:
        """Set one cell; return whether the cell exists."""
        if not self._has_row(row):
            return False
        measurement = self._rows[row]
        if column == 0:
            updated = replace(measurement, operation=Operation(int(value)))
        elif column == 1:
            updated = replace(measurement, time=float(value))
        elif column == 2:
            updated = replace(measurement, size=int(value))
        else:
            return False
        self._rows[row] = updated
        return True

    def header(self, section: int, horizontal: bool = True) -> Any:
        """Column title for horizontal headers, the section number otherwise."""
        if not horizontal:
            return section
        if 0 <= section < len(_HEADERS):
            return _HEADERS[section]
        return None

    def insert_rows(self, row: int, count: int = 1) -> bool:
        """Append ``count`` empty rows; ``row`` must equal the current length."""
        if row != len(self._rows):
            return False
        self._rows.extend(Measurement() for _ in range(count))
        return True

    def record(self, operation: Operation, time: float, size: int) -> Measurement:
        """Add a row at the end holding the given values and return it."""
        row = len(self._rows)
        self.insert_rows(row, 1)
        self.set_cell(row, 0, int(operation))
        self.set_cell(row, 1, time)
        self.set_cell(row, 2, size)
        return self._rows[row]