"""Fixed-capacity array that can be resized explicitly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class DynamicArray:
    """An array whose length equals its capacity; unset slots hold ``None``."""

    __slots__ = ("_elements",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("invalid size")
        self._elements: list[Any] = [None] * size

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> "DynamicArray":
        """Build an array holding a copy of ``items``."""
        if items is None:
            raise ValueError("invalid argument")
        array = cls()
        array._elements = list(items)
        return array

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._elements):
            raise IndexError("invalid index")

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._elements[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._elements[index] = value

    def __repr__(self) -> str:
        return f"DynamicArray({self._elements!r})"

    @property
    def capacity(self) -> int:
        """Number of slots in the array."""
        return len(self._elements)

    def recapacity(self, new_capacity: int) -> None:
        """Resize to ``new_capacity``, keeping the leading elements."""
        if new_capacity < 0:
            raise ValueError("invalid capacity")
        current = len(self._elements)
        if new_capacity <= current:
            del self._elements[new_capacity:]
        else:
            self._elements.extend([None] * (new_capacity - current))

    def delete(self, index: int) -> None:
        """Remove the element at ``index``; the capacity shrinks by one."""
        self._check_index(index)
        del self._elements[index]

    def swap(self, other: "DynamicArray") -> None:
        """Exchange contents with ``other``."""
        self._elements, other._elements = other._elements, self._elements