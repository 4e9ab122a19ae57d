"""Array-backed sequences in mutable and immutable flavours."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from hashcache.dynamic_array import DynamicArray

_S = TypeVar("_S", bound="ArraySequence")


class ArraySequence(ABC):
    """A sequence stored in a :class:`DynamicArray` with spare capacity.

    Modifying operations return the sequence that holds the result: the
    sequence itself for :class:`MutableArraySequence`, a fresh copy for
    :class:`ImmutableArraySequence`.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._array = DynamicArray.from_iterable(items)
        self._size = len(self._array)

    @abstractmethod
    def _target(self: _S) -> _S:
        """Return the sequence that a modifying operation should change."""

    def _clone(self: _S) -> _S:
        clone = type(self).__new__(type(self))
        clone._array = DynamicArray.from_iterable(self._array)
        clone._size = self._size
        return clone

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("invalid index")

    def _reserve(self) -> None:
        if self._size == self._array.capacity:
            capacity = self._array.capacity
            self._array.recapacity(1 if capacity == 0 else capacity * 2)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for index, item in enumerate(self._array):
            if index >= self._size:
                break
            yield item

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._array[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def first(self) -> Any:
        """Return the first item; raise ``IndexError`` when empty."""
        return self[0]

    def last(self) -> Any:
        """Return the last item; raise ``IndexError`` when empty."""
        return self[self._size - 1]

    @property
    def capacity(self) -> int:
        """Number of slots allocated, at least the length."""
        return self._array.capacity

    def set(self: _S, index: int, item: Any) -> _S:
        """Replace the item at ``index``."""
        self._check_index(index)
        target = self._target()
        target._array[index] = item
        return target

    def append(self: _S, item: Any) -> _S:
        """Add ``item`` at the end, doubling the capacity when full."""
        target = self._target()
        target._reserve()
        target._array[target._size] = item
        target._size += 1
        return target

    def prepend(self: _S, item: Any) -> _S:
        """Add ``item`` at the front."""
        return self.insert_at(item, 0)

    def insert_at(self: _S, item: Any, index: int) -> _S:
        """Insert ``item`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError("invalid index")
        target = self._target()
        target._reserve()
        array = target._array
        for position in range(target._size, index, -1):
            array[position] = array[position - 1]
        array[index] = item
        target._size += 1
        return target

    def delete(self: _S, index: int) -> _S:
        """Remove the item at ``index``; the capacity shrinks by one."""
        self._check_index(index)
        target = self._target()
        target._array.delete(index)
        target._size -= 1
        return target

    @abstractmethod
    def concat(self: _S, other: Iterable[Any]) -> _S:
        """Return the sequence extended by the items of ``other``."""

    def subsequence(self: _S, start: int, end: int) -> _S:
        """Return a new sequence of the items from ``start`` to ``end`` (exclusive)."""
        if start < 0 or end < 0 or end > self._size or end < start:
            raise IndexError("invalid range")
        return type(self)(self._array[position] for position in range(start, end))


class MutableArraySequence(ArraySequence):
    """Array sequence whose operations change it in place."""

    def _target(self) -> "MutableArraySequence":
        return self

    def concat(self, other: Iterable[Any]) -> "MutableArraySequence":
        for item in list(other):
            self.append(item)
        return self


class ImmutableArraySequence(ArraySequence):
    """Array sequence whose operations leave it untouched and return a copy."""

    def _target(self) -> "ImmutableArraySequence":
        return self._clone()

    def concat(self, other: Iterable[Any]) -> "ImmutableArraySequence":
        return type(self)([*self, *other])