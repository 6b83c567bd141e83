"""A growable array of strings with a power-of-two capacity."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, Sequence, Union

_DEFAULT_CAPACITY = 16


def _power_of_two_at_least(size: int) -> int:
    power = 1
    while power < size:
        power *= 2
    return power


class StringArray:
    """An ordered array of strings whose capacity doubles when it fills up."""

    def __init__(
        self,
        items: Optional[Iterable[str]] = None,
        capacity: Optional[int] = None,
    ) -> None:
        values = [str(item) for item in items] if items is not None else []
        if items is None and capacity is None:
            self._capacity = _DEFAULT_CAPACITY
        else:
            wanted = max(len(values), capacity or 0)
            self._capacity = _power_of_two_at_least(wanted)
        self._items: List[str] = values

    @property
    def capacity(self) -> int:
        """Number of slots held before the array has to grow."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity *= 2

    def append(self, value: str) -> None:
        """Add a string at the end."""
        self._grow_if_full()
        self._items.append(value)

    def insert(self, index: int, value: str) -> None:
        """Insert a string at ``index``, shifting later ones back."""
        if not 0 <= index <= len(self._items):
            raise IndexError(
                "Index has to be between 0 and len of the array to add new data"
            )
        self._grow_if_full()
        self._items.insert(index, value)

    def push_front(self, value: str) -> None:
        """Add a string at the front."""
        self.insert(0, value)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._items):
            raise IndexError(
                "Index has to be between 0 and len of the array to view data"
            )
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"StringArray({self._items!r})"

    def index(self, value: str) -> int:
        """Position of the first occurrence of ``value``, or -1 if absent."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return -1

    def sub_array(self, start: int, end: int) -> "StringArray":
        """A new array of the items from ``start`` to ``end``, both included."""
        size = len(self._items)
        if start >= end or start >= size or end >= size or start < 0:
            raise IndexError(
                "Index has to be between 0 and len of the array to get data"
            )
        result = StringArray(capacity=end - start + 1)
        for item in self._items[start : end + 1]:
            result.append(item)
        return result

    def is_empty(self) -> bool:
        return not self._items

    def remove(self, value: str) -> None:
        """Remove every occurrence of ``value``."""
        self._items = [item for item in self._items if item != value]

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(
                "Index has to be between 0 and len of the array to delete data"
            )
        del self._items[index]

    def pop_back(self) -> str:
        """Remove the last item and return it."""
        if not self._items:
            raise IndexError("pop from an empty array")
        value = self._items[-1]
        self.remove_at(len(self._items) - 1)
        return value

    def pop_front(self) -> str:
        """Remove the first item and return it."""
        if not self._items:
            raise IndexError("pop from an empty array")
        value = self._items[0]
        self.remove_at(0)
        return value

    @staticmethod
    def merge(
        a: Union["StringArray", Iterable[str]],
        b: Union["StringArray", Iterable[str]],
    ) -> "StringArray":
        """Merge two sorted sequences into a new sorted array.

        On equal strings the one from ``b`` comes first.
        """
        left = list(a)
        right = list(b)
        result = StringArray(capacity=len(left) + len(right))
        i = j = 0
        while i < len(left) or j < len(right):
            if i >= len(left):
                result.append(right[j])
                j += 1
            elif j >= len(right) or left[i] < right[j]:
                result.append(left[i])
                i += 1
            else:
                result.append(right[j])
                j += 1
        return result


def _line(array: StringArray) -> str:
    return "".join(f"{item} " for item in array)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise the array and print what it holds."""
    first = StringArray()
    second = StringArray(capacity=5)
    third = StringArray(["A", "Big", "Dancing", "Group", "Of", "Puppets"])

    for word in ("Like", "My", "New", "Pair", "Shoes"):
        first.append(word)

    for word in ("As", "If", "It", "Nothing"):
        second.append(word)
    second.insert(3, "was")
    for word in ("As", "As", "If"):
        second.append(word)

    second.remove("As")
    index = len(second) - 2
    print(index)
    second.remove_at(index)

    merged = StringArray.merge(first, third)
    part = merged.sub_array(2, 7)

    for array in (first, second, third, merged, part):
        print(_line(array))
    print(third.capacity)
    print(second.index("If"))
    print(second.index("Everything"))
    return 0


if __name__ == "__main__":
    sys.exit(main())