"""A singly linked list that grows at the front."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _ListNode:
    data: Any
    next: _ListNode | None = None


class LinkedList:
    """A singly linked list; new items are added at the front."""

    def __init__(self) -> None:
        self._head: _ListNode | None = None
        self._size = 0

    def insert_at_front(self, data: Any) -> None:
        """Make ``data`` the new first item."""
        self._head = _ListNode(data, self._head)
        self._size += 1

    def __getitem__(self, index: int) -> Any:
        """Return the item at ``index``.

        Walking stops at the last node, so an index past the end yields the
        last item. Raises IndexError on an empty list or a negative index.
        """
        if self._head is None:
            raise IndexError("index into an empty list")
        if index < 0:
            raise IndexError("negative list index")
        node = self._head
        while index > 0 and node.next is not None:
            node = node.next
            index -= 1
        return node.data

    def _find(self, data: Any) -> _ListNode | None:
        node = self._head
        while node is not None:
            if node.data == data:
                return node
            node = node.next
        return None

    def __contains__(self, data: object) -> bool:
        return self._find(data) is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size