"""Bounded cache in front of a loader function."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from hashcache.dictionary import HashDictionary
from hashcache.linked_list import LinkedList


class LRUCache:
    """Caches values produced by ``loader``, holding at most ``capacity`` keys.

    ``loader(key)`` returns the value for a key, or raises ``LookupError``
    when there is none; such failures are passed on and leave the cache as
    it was. A cache hit moves the key to the back of the access history; a
    freshly loaded key is placed at its front. When full, the key at the
    front is evicted before a new one is loaded in.
    """

    def __init__(
        self,
        loader: Callable[[Any], Any],
        capacity: int,
        hash_function: Callable[[Any], int],
    ) -> None:
        if capacity <= 0:
            raise ValueError("invalid capacity")
        self._loader = loader
        self._capacity = capacity
        self._history = LinkedList()
        self._index = HashDictionary(hash_function)

    def get(self, key: Any) -> Any:
        """Return the value for ``key``, loading and caching it if needed."""
        if key in self._index:
            value, node = self._index.get(key)
            self._history.erase(node)
            new_node = self._history.append(key)
            self._index.remove(key)
            self._index.add(key, (value, new_node))
            return value

        value = self._loader(key)

        if len(self._history) == self._capacity:
            self._index.remove(self._history.first())
            self._history.pop_first()

        node = self._history.prepend(key)
        self._index.add(key, (value, node))
        return value

    def __len__(self) -> int:
        return len(self._history)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> list[Any]:
        """Cached keys in access-history order, next to be evicted first."""
        return list(self._history)

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` for every cached key."""
        for entry in self._index.items():
            yield entry.key, entry.value[0]