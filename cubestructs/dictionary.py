"""A dictionary of keys and data backed by a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .bst_node import (
    TreeNode,
    find_node,
    insert_node,
    iter_in_order,
    remove_node,
)


class Dictionary:
    """Map ordered keys to data using an unbalanced binary search tree.

    Duplicate keys are refused: ``insert`` on an existing key raises.
    """

    def __init__(self, items: Iterable[tuple[Any, Any]] = ()) -> None:
        self._root: TreeNode | None = None
        self._size = 0
        for key, data in items:
            self.insert(key, data)

    def find(self, key: Any) -> Any:
        """Return the data stored with ``key``.

        Raises KeyError if the key is not present.
        """
        node = find_node(self._root, key)
        if node is None:
            raise KeyError(key)
        return node.data

    def insert(self, key: Any, data: Any) -> None:
        """Store ``data`` under ``key``.

        Raises ValueError if the key is already present.
        """
        self._root = insert_node(self._root, key, data)
        self._size += 1

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return the data that was stored with it.

        Raises KeyError if the key is not present.
        """
        self._root, data = remove_node(self._root, key)
        self._size -= 1
        return data

    def empty(self) -> bool:
        """Tell whether the dictionary holds no keys."""
        return self._root is None

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, data)`` pairs in ascending key order."""
        for node in iter_in_order(self._root):
            yield node.key, node.data

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return find_node(self._root, key) is not None

    def format_in_order(self) -> str:
        """Render the tree in order as ``[key : data]`` entries.

        Every empty subtree is shown as a single space, so an empty tree
        renders as ``" "`` and entries are separated by one space.
        """
        return " " + "".join(f"[{key} : {data}] " for key, data in self.items())