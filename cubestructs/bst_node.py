"""Nodes of a binary search tree and the operations that reshape them.

Every function takes the root of a (sub)tree, which may be ``None`` for an
empty tree. Functions that change the shape of the tree return the new root.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One key with its data, and links to the left and right subtrees."""

    key: Any
    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def find_node(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key``, or ``None`` if there is none."""
    node = root
    while node is not None:
        if key == node.key:
            return node
        node = node.left if key < node.key else node.right
    return None


def insert_node(root: TreeNode | None, key: Any, data: Any) -> TreeNode:
    """Add ``key`` with ``data`` as a new leaf and return the root.

    Raises ValueError if the key is already in the tree.
    """
    new = TreeNode(key, data)
    if root is None:
        return new
    node = root
    while True:
        if key == node.key:
            raise ValueError("insert() used on an existing key")
        if key < node.key:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def rightmost_of(node: TreeNode | None) -> TreeNode | None:
    """Return the right-most node below and including ``node``."""
    if node is None:
        return None
    while node.right is not None:
        node = node.right
    return node


def iop_of(node: TreeNode | None) -> TreeNode | None:
    """Return the in-order predecessor of ``node`` within its subtree.

    That is the right-most node of the left subtree; ``None`` when ``node``
    is ``None`` or has no left child.
    """
    if node is None or node.left is None:
        return None
    return rightmost_of(node.left)


def _splice(node: TreeNode) -> TreeNode | None:
    """Return the subtree that takes the place of ``node`` once it is gone."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    # Two children: the in-order predecessor moves into the node's position.
    parent = node
    iop = node.left
    while iop.right is not None:
        parent = iop
        iop = iop.right
    if parent is not node:
        parent.right = iop.left
        iop.left = node.left
    iop.right = node.right
    return iop


def remove_node(root: TreeNode | None, key: Any) -> tuple[TreeNode | None, Any]:
    """Remove ``key`` from the tree.

    Returns the new root and the data that was stored with the key.
    Raises KeyError if the key is not in the tree.
    """
    parent: TreeNode | None = None
    node = root
    while node is not None and key != node.key:
        parent = node
        node = node.left if key < node.key else node.right
    if node is None:
        raise KeyError(key)

    replacement = _splice(node)
    node.left = node.right = None
    if parent is None:
        return replacement, node.data
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return root, node.data


def iter_in_order(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield the nodes of the tree in ascending key order."""
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node
        node = node.right