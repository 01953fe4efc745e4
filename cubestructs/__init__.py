"""Teaching data structures: cubes and colours, a Tower of Hanoi game, a BST dictionary, a min-heap and a linked list."""

__version__ = "0.1.0"