"""A growable array that tracks a power-of-two capacity."""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_DEFAULT_CAPACITY = 8


class DynamicArray(Generic[T]):
    """An array whose capacity doubles when full and halves when sparse."""

    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            capacity = _DEFAULT_CAPACITY
        else:
            capacity = 1
            while size > capacity:
                capacity *= 2
        self._capacity = capacity
        self._items: List[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, index: int, value: T) -> None:
        """Insert a value at ``index``, growing the capacity if full."""
        if not 0 <= index <= len(self._items):
            raise IndexError("Out of range")
        if self._capacity <= len(self._items):
            self._capacity *= 2
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        """Add a value at the end."""
        self.insert(len(self._items), value)

    def remove(self, value: Any) -> None:
        """Remove every occurrence of ``value``."""
        self._items = [item for item in self._items if item != value]
        self._shrink()

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("Out of range")
        del self._items[index]
        self._shrink()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError("Out of range")
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Out of range")
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "Data: " + "".join(f"{item} " for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"

    def _shrink(self) -> None:
        if self._capacity > len(self._items) * 2 and self._capacity > 1:
            self._capacity //= 2