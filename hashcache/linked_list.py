"""Doubly linked list with node handles that stay valid across edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class Node:
    """A list cell; ``data`` may be changed in place."""

    __slots__ = ("data", "prev", "next", "_owner")

    def __init__(self, data: Any, owner: "LinkedList") -> None:
        self.data = data
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None
        self._owner: Optional[LinkedList] = owner

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


class LinkedList:
    """A doubly linked list of arbitrary items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        if items is None:
            raise ValueError("invalid argument")
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    @classmethod
    def filled(cls, size: int, value: Any = None) -> "LinkedList":
        """Build a list of ``size`` copies of ``value``."""
        if size < 0:
            raise ValueError("invalid size")
        return cls(value for _ in range(size))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.data

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).data

    def __setitem__(self, index: int, item: Any) -> None:
        self._node_at(index).data = item

    def first(self) -> Any:
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def last(self) -> Any:
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    @property
    def head(self) -> Optional[Node]:
        """First node, or ``None`` when empty."""
        return self._head

    @property
    def tail(self) -> Optional[Node]:
        """Last node, or ``None`` when empty."""
        return self._tail

    def append(self, item: Any) -> Node:
        """Add ``item`` at the end and return its node."""
        node = Node(item, self)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def prepend(self, item: Any) -> Node:
        """Add ``item`` at the front and return its node."""
        if self._head is None:
            return self.append(item)
        node = Node(item, self)
        node.next = self._head
        self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def insert_at(self, item: Any, index: int) -> Node:
        """Insert ``item`` so it ends up at position ``index``.

        ``index`` must name an existing element.
        """
        target = self._node_at(index)
        if target is self._head:
            return self.prepend(item)
        node = Node(item, self)
        node.prev = target.prev
        node.next = target
        target.prev.next = node
        target.prev = node
        self._size += 1
        return node

    def _unlink(self, node: Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1

    def remove(self, index: int) -> Any:
        """Remove the element at ``index`` and return it."""
        node = self._node_at(index)
        self._unlink(node)
        return node.data

    def pop_first(self) -> Any:
        """Remove and return the first item; return ``None`` if empty."""
        if self._head is None:
            return None
        return self.remove(0)

    def erase(self, node: Node) -> Optional[Node]:
        """Remove ``node`` from the list and return the node after it."""
        if self._head is None or self._tail is None:
            raise ValueError("list is empty")
        if node is None or node._owner is not self:
            raise ValueError("node does not belong to this list")
        following = node.next
        self._unlink(node)
        return following

    def sublist(self, start: int, end: int) -> "LinkedList":
        """Return items ``start`` to ``end`` (exclusive); ``end`` must be < len."""
        if start < 0 or end < 0 or end >= self._size or end < start:
            raise IndexError("invalid range")
        result = LinkedList()
        node = self._node_at(start)
        for _ in range(end - start):
            result.append(node.data)
            node = node.next
        return result

    def __add__(self, other: object) -> "LinkedList":
        if not isinstance(other, LinkedList):
            return NotImplemented
        result = LinkedList(self)
        for item in other:
            result.append(item)
        return result