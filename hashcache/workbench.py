"""File, data-generation and charting helpers for a dictionary session."""

from __future__ import annotations

import random
from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import Union

from hashcache.operations import Operation, OperationTable
from hashcache.records import MAX_LENGTH, random_token

_READ_CHUNK = 1023
_SERIES = tuple(operation.label() for operation in Operation)

PathArg = Union[str, "PathLike[str]"]


def random_records(
    count: int,
    max_length: int = MAX_LENGTH,
    rng: random.Random | None = None,
) -> list[str]:
    """Return ``count`` lines of two random tokens separated by a space."""
    generator = rng if rng is not None else random.Random()
    return [
        f"{random_token(max_length, generator)} {random_token(max_length, generator)}"
        for _ in range(max(count, 0))
    ]


def write_text_file(name: PathArg, text: str) -> Path:
    """Write ``text`` to ``<name>.txt``; refuse to overwrite an existing file."""
    path = Path(f"{name}.txt")
    if path.exists():
        raise FileExistsError("You already have file with the same name")
    with path.open("x", encoding="utf-8", newline="") as handle:
        handle.write(text)
    return path


def read_text_lines(path: PathArg) -> Iterator[str]:
    """Yield the lines of a text file without their line endings.

    Lines longer than 1023 characters are yielded in pieces of that size.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        while True:
            piece = handle.readline(_READ_CHUNK)
            if not piece:
                return
            if piece.endswith("\n"):
                piece = piece[:-1]
            yield piece


def plot_series(table: OperationTable) -> dict[str, list[tuple[int, float]]]:
    """Group the table's rows into ``(size, time)`` points per operation.

    The result maps ``"Add"``, ``"Get"`` and ``"Remove"`` to their points in
    row order. A row without an operation raises ``ValueError``.
    """
    series: dict[str, list[tuple[int, float]]] = {name: [] for name in _SERIES}
    for row in range(len(table)):
        label = table.cell(row, 0)
        series[label].append((table.cell(row, 2), table.cell(row, 1)))
    return series