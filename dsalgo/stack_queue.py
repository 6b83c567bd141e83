"""A LIFO stack over DynamicArray and a FIFO queue over LinkedList."""

from __future__ import annotations

from typing import Generic, TypeVar

from dsalgo.dynamic_array import DynamicArray
from dsalgo.linked_list import LinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: DynamicArray[T] = DynamicArray()

    def push(self, value: T) -> None:
        """Put a value on top."""
        self._data.append(value)

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not len(self._data):
            raise IndexError("Out of range")
        return self._data[len(self._data) - 1]

    def pop(self) -> T:
        """Remove the top value and return it."""
        value = self.peek()
        self._data.remove_at(len(self._data) - 1)
        return value

    def is_empty(self) -> bool:
        return not len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return f"Stack({list(self._data)!r})"


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._data: LinkedList[T] = LinkedList()

    def enqueue(self, value: T) -> None:
        """Add a value at the back."""
        self._data.append(value)

    def dequeue(self) -> T:
        """Remove the front value and return it."""
        value = self._data[0]
        self._data.remove_at(0)
        return value

    def front(self) -> T:
        """Return the front value without removing it."""
        return self._data[0]

    def is_empty(self) -> bool:
        return not len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return f"Queue({list(self._data)!r})"