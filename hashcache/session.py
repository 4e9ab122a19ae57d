"""A timed key/value dictionary session driven by lines of text."""

from __future__ import annotations

import time
from typing import Optional

from hashcache.dictionary import HashDictionary
from hashcache.operations import Measurement, Operation, OperationTable
from hashcache.records import MAX_LENGTH, is_valid_key, is_valid_record, string_hash


class SessionError(Exception):
    """Raised when a session request cannot be carried out."""


class DictionarySession:
    """String dictionary whose operations are timed into an :class:`OperationTable`.

    Records are lines of the form ``key value``. Every successful batch of
    additions, every value update and every batch of removals adds one row
    to :attr:`table`.
    """

    def __init__(self, max_length: int = MAX_LENGTH) -> None:
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.max_length = max_length
        self.dictionary = HashDictionary(string_hash)
        self.table = OperationTable()

    def add_records(self, text: str) -> Measurement:
        """Add every ``key value`` line of ``text``.

        All lines are validated first; a malformed line adds nothing. A
        duplicate key stops the batch, keeping the lines added before it,
        and no row is recorded.
        """
        lines = text.split("\n")
        if not all(is_valid_record(line, self.max_length) for line in lines):
            raise SessionError("You data has wrong format")

        total = 0.0
        for line in lines:
            key, value = line.split(" ")
            start = time.perf_counter()
            try:
                self.dictionary.add(key, value)
            except KeyError as error:
                raise SessionError(
                    "the element with same key have already existed"
                ) from error
            total += time.perf_counter() - start

        return self.table.record(Operation.ADD, total / len(lines), len(self.dictionary))

    def lookup(self, key: str) -> str:
        """Return the value stored under ``key``."""
        if key not in self.dictionary:
            raise SessionError("You have not an object with this key")
        return self.dictionary.get(key)

    def update_value(self, key: str, new_value: str) -> Measurement:
        """Replace the value stored under ``key`` and record the time taken."""
        if not new_value or len(new_value) > self.max_length:
            raise SessionError("new value has invalid format")
        if key not in self.dictionary:
            raise SessionError("the dictionary do not contain this value")

        start = time.perf_counter()
        self.dictionary[key] = new_value
        elapsed = time.perf_counter() - start

        return self.table.record(Operation.GET, elapsed, len(self.dictionary))

    def remove_records(self, text: str) -> Optional[Measurement]:
        """Remove the keys named by the lines of ``text``.

        A line is either ``key`` or ``key value``; with a value, the stored
        value must match. Empty text does nothing and returns ``None``. A
        missing key or mismatched value stops the batch, keeping the removals
        made before it, and no row is recorded.
        """
        if not text:
            return None
        lines = text.split("\n")
        for line in lines:
            if not is_valid_record(line, self.max_length) and not is_valid_key(line):
                raise SessionError("You data has wrong format")

        total = 0.0
        for number, line in enumerate(lines):
            parts = line.split(" ")
            key = parts[0]
            value = parts[1] if len(parts) == 2 else ""

            if key not in self.dictionary:
                raise SessionError(
                    f"You have not pointer with this key\n number of string:{number}"
                )
            if value and self.dictionary.get(key) != value:
                raise SessionError(
                    f"You have not pointer with this value\n number of string:{number}"
                )

            start = time.perf_counter()
            self.dictionary.remove(key)
            total += time.perf_counter() - start

        return self.table.record(Operation.REMOVE, total / len(lines), len(lines))

    def dump_lines(self) -> list[str]:
        """Return every stored pair as a ``key value`` line."""
        return [f"{entry.key} {entry.value}" for entry in self.dictionary.items()]