"""A doubly linked list with bidirectional cursors."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: T,
        prev: Optional["_Node[T]"] = None,
        next: Optional["_Node[T]"] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class Cursor(Generic[T]):
    """A movable position inside a LinkedList.

    Stepping past either end raises IndexError rather than falling off.
    """

    __slots__ = ("node",)

    def __init__(self, node: _Node[T]) -> None:
        self.node = node

    @property
    def value(self) -> T:
        return self.node.value

    @value.setter
    def value(self, new_value: T) -> None:
        self.node.value = new_value

    def advance(self) -> None:
        """Move to the next node."""
        if self.node.next is None:
            raise IndexError("Out of bound")
        self.node = self.node.next

    def retreat(self) -> None:
        """Move to the previous node."""
        if self.node.prev is None:
            raise IndexError("Out of bound")
        self.node = self.node.prev

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.node is other.node

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cursor({self.node.value!r})"


class LinkedList(Generic[T]):
    """A doubly linked list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._len = 0
        for item in items:
            self.append(item)

    def append(self, value: T) -> None:
        """Add a value at the end."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1

    def insert(self, index: int, value: T) -> None:
        """Insert a value so that it ends up at ``index``."""
        if index < 0:
            index += self._len
        if not 0 <= index <= self._len:
            raise IndexError("Out of bound")
        if index == self._len:
            self.append(value)
            return
        after = self._node_at(index)
        node = _Node(value, prev=after.prev, next=after)
        if after.prev is None:
            self._head = node
        else:
            after.prev.next = node
        after.prev = node
        self._len += 1

    def remove(self, value: Any) -> int:
        """Remove every occurrence of ``value``; return how many went."""
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if node.value == value:
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``."""
        self._unlink(self._node_at(index))

    def first(self) -> Cursor[T]:
        """A cursor at the first node."""
        if self._head is None:
            raise IndexError("Out of bound")
        return Cursor(self._head)

    def last(self) -> Cursor[T]:
        """A cursor at the last node."""
        if self._tail is None:
            raise IndexError("Out of bound")
        return Cursor(self._tail)

    def cursor(self, index: int) -> Cursor[T]:
        """A cursor at the node at ``index``."""
        return Cursor(self._node_at(index))

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, index: int) -> T:
        return self._node_at(index).value

    def __setitem__(self, index: int, value: T) -> None:
        self._node_at(index).value = value

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if not self._len:
            return "No data available"
        return " " + " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_at(self, index: int) -> _Node[T]:
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("Out of bound")
        if index <= self._len // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._len - 1 - index):
                node = node.prev
        return node

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._len -= 1