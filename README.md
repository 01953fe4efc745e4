# cubestructs

A small collection of classic data structures, the kind that shows up in a first
course on data structures. Everything is plain Python with no dependencies
beyond the standard library.

## What is inside

- `cubestructs.pixel.HSLAPixel` – a frozen dataclass holding a colour as hue
  (`h`, degrees), saturation (`s`), luminance (`l`) and alpha (`a`). The default
  is opaque white. Named colours: `HSLAPixel.BLUE`, `ORANGE`, `YELLOW`, `PURPLE`.
- `cubestructs.cube` – `Shape`, which has a `width` (1 by default), and `Cube`,
  a `Shape` with a `color`. A cube's `length` is its width; `volume()` and
  `surface_area()` compute from it, cubes compare by length, and `str(cube)`
  gives `Cube(3)`.
- `cubestructs.ordering.my_max(a, b)` – returns `a` if `a > b`, otherwise `b`.
- `cubestructs.tower` – the Tower of Hanoi played with cubes:
  - `Stack` – a pile of cubes with `push`, `remove_top`, `peek_top`, `len()`
    and iteration from bottom to top. Pushing a larger cube onto a smaller one
    raises `IllegalMoveError`; taking from or peeking at an empty stack raises
    `IndexError`.
  - `Game` – three stacks (`game.stacks`) with four cubes of lengths 4, 3, 2, 1
    on the first. `solve()` moves them to the last stack recursively;
    `solve_iterative()` repeatedly makes the one legal move between stacks
    0–1, 0–2 and 1–2 until done. Both return the list of `Move(source, target)`
    tuples made. `is_solved()` tells whether every cube is on the last stack.
- `cubestructs.dictionary.Dictionary` – a map from ordered keys to data, backed
  by an unbalanced binary search tree. `find`, `insert`, `remove`, `empty`,
  `clear`, `items()` (in ascending key order), `len()`, `in`, and
  `format_in_order()`, which renders entries as `[key : data]`. A node with two
  children is replaced by its in-order predecessor when removed.
- `cubestructs.bst_node` – the tree-level functions behind `Dictionary`:
  `TreeNode`, `find_node`, `insert_node`, `remove_node`, `iop_of`,
  `rightmost_of` and `iter_in_order`.
- `cubestructs.heap.MinHeap` – a list-backed binary min-heap with `insert`,
  `remove_min`, `len()` and iteration in heap (level) order. It can be built
  from an iterable of keys.
- `cubestructs.linked_list.LinkedList` – a singly linked list with
  `insert_at_front`, indexing, `in`, iteration and `len()`. An index past the
  end returns the last item; indexing an empty list or with a negative index
  raises `IndexError`.

## Installing

```
pip install .
```

## Using it

```python
from cubestructs.dictionary import Dictionary

d = Dictionary()
d.insert(37, "thirty seven")
d.insert(19, "nineteen")
print(d.find(19))        # nineteen
print(d.remove(37))      # thirty seven
print(19 in d, len(d))   # True 1
```

```python
from cubestructs.heap import MinHeap

h = MinHeap([4, 10, 2, -8])
print(h.remove_min())    # -8
```

```python
from cubestructs.tower import Game

game = Game()
moves = game.solve()
print(len(moves), game.is_solved())  # 15 True
```

Errors are raised rather than ignored: `Dictionary.find` and
`Dictionary.remove` raise `KeyError` for a missing key, `Dictionary.insert`
raises `ValueError` for a key that is already present, and
`MinHeap.remove_min` raises `IndexError` on an empty heap.

## Commands

Three small demonstration programs are installed:

```
cubestructs-tower               # solve the four-cube Tower of Hanoi recursively, printing each state
cubestructs-tower --iterative   # the same, using the pairwise legal-move strategy
cubestructs-heap                # insert ten keys into a min-heap, then remove them in order
cubestructs-bst                 # insert, find and remove entries in the BST dictionary
```

The BST walk-through can also be written to any text stream with
`cubestructs.bst_demo.run_demo(out)`.

## What it does not do

These are teaching structures kept deliberately simple. The `Dictionary` tree
is never rebalanced, so sorted insertions make it as deep as it is long. Nothing
is saved to disk, and there is no B-tree or other multi-way tree.

## Running the tests

```
pip install .[test]
pytest
```