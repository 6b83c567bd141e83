"""Merge sort, quicksort and generators of test arrays."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, TypeVar

T = TypeVar("T")


def _merge(low: List[T], high: List[T]) -> List[T]:
    merged: List[T] = []
    i = j = 0
    while i < len(low) and j < len(high):
        if low[i] <= high[j]:
            merged.append(low[i])
            i += 1
        else:
            merged.append(high[j])
            j += 1
    merged.extend(low[i:])
    merged.extend(high[j:])
    return merged


def merge_sort(values: Iterable[T]) -> List[T]:
    """A new list holding ``values`` in ascending order, by merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def quick_sort(values: Iterable[T]) -> List[T]:
    """A new list holding ``values`` in ascending order, by quicksort.

    The last element of each range is the pivot.
    """
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        point = low - 1
        for i in range(low, high + 1):
            if items[i] < pivot:
                point += 1
                items[i], items[point] = items[point], items[i]
        point += 1
        items[high], items[point] = items[point], items[high]
        pending.append((low, point - 1))
        pending.append((point + 1, high))
    return items


def random_values(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """``size`` random integers in ``[0, size * 5)``."""
    rng = rng or random.Random()
    return [rng.randrange(size * 5) for _ in range(size)]


def ascending_values(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """A non-decreasing run starting below 5, rising by 0..4 each step."""
    rng = rng or random.Random()
    value = rng.randrange(5)
    result = []
    for _ in range(size):
        result.append(value)
        value += rng.randrange(5)
    return result


def descending_values(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """A non-increasing run starting at ``size * 5`` plus 0..4, falling by 0..4."""
    rng = rng or random.Random()
    value = size * 5 + rng.randrange(5)
    result = []
    for _ in range(size):
        result.append(value)
        value -= rng.randrange(5)
    return result