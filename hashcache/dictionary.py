"""Separate-chaining hash table with configurable growth and shrink rules."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any, Optional

from hashcache.dynamic_array import DynamicArray
from hashcache.linked_list import LinkedList, Node

_INT_MAX = 2**31 - 1


class Entry:
    """A key/value pair stored in a :class:`HashDictionary`.

    The key is fixed; the value may be reassigned in place.
    """

    __slots__ = ("_key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self._key = key
        self.value = value

    @property
    def key(self) -> Any:
        return self._key

    def __iter__(self) -> Iterator[Any]:
        yield self._key
        yield self.value

    def __repr__(self) -> str:
        return f"Entry({self._key!r}, {self.value!r})"


class HashDictionary:
    """Hash table mapping keys to values through a user-supplied hash function.

    The table grows by ``increase_factor`` once the number of entries exceeds
    ``fill_factor * capacity`` and shrinks by the same factor once it falls
    below ``fill_factor * capacity / increase_factor``.
    """

    def __init__(
        self,
        hash_function: Callable[[Any], int],
        fill_factor: float = 0.7,
        increase_factor: float = 2,
        capacity: int = 0,
    ) -> None:
        if (
            increase_factor <= 1
            or fill_factor >= 1
            or fill_factor <= 0
            or capacity < 0
            or hash_function is None
        ):
            raise ValueError("invalid parameters")
        self._hash = hash_function
        self._fill_factor = fill_factor
        self._increase_factor = increase_factor
        self._buckets = self._new_buckets(capacity)
        self._size = 0

    @staticmethod
    def _new_buckets(count: int) -> DynamicArray:
        return DynamicArray.from_iterable(LinkedList() for _ in range(count))

    def _bucket_index(self, key: Any, capacity: Optional[int] = None) -> int:
        return self._hash(key) % (self._buckets.capacity if capacity is None else capacity)

    def _find(self, key: Any) -> Optional[Node]:
        if self._buckets.capacity == 0:
            return None
        for node in self._buckets[self._bucket_index(key)].nodes():
            if node.data.key == key:
                return node
        return None

    def _needs_growth(self) -> bool:
        return self._size > self._fill_factor * self._buckets.capacity

    def _needs_shrink(self) -> bool:
        return self._size < self._fill_factor * self._buckets.capacity / self._increase_factor

    def _rebuild(self, new_capacity: int) -> None:
        new_buckets = self._new_buckets(new_capacity)
        for entry in self.items():
            new_buckets[self._bucket_index(entry.key, new_capacity)].append(entry)
        self._buckets.swap(new_buckets)

    def add(self, key: Hashable, value: Any) -> None:
        """Insert a new key; raise ``KeyError`` if it is already present."""
        if self._buckets.capacity == 0:
            self._buckets = self._new_buckets(1)
        if self._find(key) is not None:
            raise KeyError(f"an element with key {key!r} already exists")
        self._buckets[self._bucket_index(key)].append(Entry(key, value))
        self._size += 1
        if self._needs_growth():
            if self._buckets.capacity > _INT_MAX / self._increase_factor:
                raise OverflowError("cannot increase dictionary")
            self._rebuild(int(self._buckets.capacity * self._increase_factor))

    def remove(self, key: Any) -> None:
        """Delete ``key``; raise ``KeyError`` if it is missing."""
        if self._buckets.capacity == 0:
            raise KeyError("dictionary is empty")
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        self._buckets[self._bucket_index(key)].erase(node)
        self._size -= 1
        if self._needs_shrink():
            self._rebuild(int(self._buckets.capacity / self._increase_factor))

    def get(self, key: Any) -> Any:
        """Return the value for ``key``; raise ``KeyError`` if it is missing."""
        if self._buckets.capacity == 0:
            raise KeyError("dictionary is empty")
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.data.value

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        node = self._find(key)
        if node is None:
            self.add(key, value)
        else:
            node.data.value = value

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for entry in self.items():
            yield entry.key

    def items(self) -> Iterator[Entry]:
        """Yield the stored entries, bucket by bucket."""
        for bucket in self._buckets:
            for node in bucket.nodes():
                yield node.data

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return self._buckets.capacity

    def erase(self, entry: Entry) -> None:
        """Remove a specific entry obtained from :meth:`items`.

        The table is not resized afterwards.
        """
        node = self._find(entry.key)
        if node is None or node.data is not entry:
            raise KeyError("entry is not stored in this dictionary")
        self._buckets[self._bucket_index(entry.key)].erase(node)
        self._size -= 1

    def __repr__(self) -> str:
        body = ", ".join(f"{e.key!r}: {e.value!r}" for e in self.items())
        return f"HashDictionary({{{body}}})"