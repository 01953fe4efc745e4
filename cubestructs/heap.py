"""A binary min-heap kept in a list."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from typing import Any


class MinHeap:
    """A min-heap: ``remove_min`` always returns the smallest key."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._items.append(key)
        self._heapify_up(len(self._items) - 1)

    def remove_min(self) -> Any:
        """Remove and return the smallest key.

        Raises IndexError if the heap is empty.
        """
        if not self._items:
            raise IndexError("remove_min() on an empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        smallest = items.pop()
        self._heapify_down(0)
        return smallest

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in their heap (level) order."""
        return iter(self._items)

    def _heapify_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] < items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _min_child(self, index: int) -> int:
        left = 2 * index + 1
        right = left + 1
        if right >= len(self._items) or self._items[left] <= self._items[right]:
            return left
        return right

    def _heapify_down(self, index: int) -> None:
        items = self._items
        while 2 * index + 1 < len(items):
            child = self._min_child(index)
            if not items[index] > items[child]:
                break
            items[index], items[child] = items[child], items[index]
            index = child


_DEMO_KEYS = (4, 10, 2, 22, 45, 18, -8, 95, 13, 42)


def main(argv: list[str] | None = None) -> int:
    """Insert a fixed set of keys, then remove them all, printing each step."""
    parser = argparse.ArgumentParser(description="Run a small min-heap demo.")
    parser.parse_args(argv)

    heap = MinHeap()
    print(f" === {len(_DEMO_KEYS)} calls to heap.insert() === ")
    for key in _DEMO_KEYS:
        heap.insert(key)
        contents = " ".join(str(item) for item in heap)
        print(f"After insert(key = {key}): {contents}")

    print()
    print(f" === {len(_DEMO_KEYS)} calls to heap.remove_min() === ")
    while heap:
        print(heap.remove_min())
    return 0