"""The Tower of Hanoi puzzle played with stacks of coloured cubes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import NamedTuple

from .cube import Cube
from .pixel import HSLAPixel


class IllegalMoveError(RuntimeError):
    """Raised when a cube would be placed on top of a smaller cube."""


class Move(NamedTuple):
    """A single cube moved from one stack to another, by stack index."""

    source: int
    target: int


class Stack:
    """A pile of cubes where no cube may rest on a smaller one."""

    def __init__(self) -> None:
        self._cubes: list[Cube] = []

    def push(self, cube: Cube) -> None:
        """Place ``cube`` on top, refusing to cover a smaller cube."""
        if self._cubes and cube.length > self._cubes[-1].length:
            raise IllegalMoveError(
                "A smaller cube cannot be placed on top of a larger cube: "
                f"tried to add Cube(length={cube.length:g}) onto [{self}]"
            )
        self._cubes.append(cube)

    def remove_top(self) -> Cube:
        """Take the top cube off the stack and return it."""
        if not self._cubes:
            raise IndexError("remove_top() on an empty stack")
        return self._cubes.pop()

    def peek_top(self) -> Cube:
        """Return the top cube without removing it."""
        if not self._cubes:
            raise IndexError("peek_top() on an empty stack")
        return self._cubes[-1]

    def __len__(self) -> int:
        return len(self._cubes)

    def __iter__(self) -> Iterator[Cube]:
        """Iterate from the bottom cube to the top cube."""
        return iter(self._cubes)

    def __str__(self) -> str:
        return " ".join(f"{cube.length:g}" for cube in self._cubes)


class Game:
    """Three stacks, with four cubes starting on the first one."""

    def __init__(self) -> None:
        self.stacks: tuple[Stack, Stack, Stack] = (Stack(), Stack(), Stack())
        for length, color in (
            (4, HSLAPixel.BLUE),
            (3, HSLAPixel.ORANGE),
            (2, HSLAPixel.PURPLE),
            (1, HSLAPixel.YELLOW),
        ):
            self.stacks[0].push(Cube(length, color))
        self._total = sum(len(stack) for stack in self.stacks)

    def is_solved(self) -> bool:
        """Tell whether every cube now sits on the last stack."""
        return len(self.stacks[2]) == self._total

    def _move_cube(self, source: int, target: int) -> Move:
        cube = self.stacks[source].remove_top()
        self.stacks[target].push(cube)
        return Move(source, target)

    def _plan(
        self, start: int, end: int, source: int, target: int, spare: int
    ) -> Iterator[Move]:
        if start == end:
            yield self._move_cube(source, target)
        else:
            yield from self._plan(start + 1, end, source, spare, target)
            yield from self._plan(start, start, source, target, spare)
            yield from self._plan(start + 1, end, spare, target, source)

    def solve(self) -> list[Move]:
        """Move the whole first stack onto the last one recursively.

        Returns the moves made, in order.
        """
        count = len(self.stacks[0])
        if count == 0:
            return []
        return list(self._plan(0, count - 1, 0, 2, 1))

    def _legal_move(self, first: int, second: int) -> Move | None:
        a, b = self.stacks[first], self.stacks[second]
        if not a and b:
            return self._move_cube(second, first)
        if a and not b:
            return self._move_cube(first, second)
        if a and b:
            if a.peek_top().length < b.peek_top().length:
                return self._move_cube(first, second)
            return self._move_cube(second, first)
        return None

    def solve_iterative(self) -> list[Move]:
        """Solve by repeating the only legal move between each pair of stacks.

        Returns the moves made, in order.
        """
        moves: list[Move] = []
        while not self.is_solved():
            for first, second in ((0, 1), (0, 2), (1, 2)):
                move = self._legal_move(first, second)
                if move is not None:
                    moves.append(move)
        return moves

    def __str__(self) -> str:
        return "\n".join(
            f"Stack[{index}]: {stack}" for index, stack in enumerate(self.stacks)
        )


def main(argv: list[str] | None = None) -> int:
    """Create a game, solve it and print every state along the way."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument(
        "--iterative",
        action="store_true",
        help="use the pairwise legal-move strategy instead of recursion",
    )
    args = parser.parse_args(argv)

    game = Game()
    print("Initial game state: ")
    print(game)
    print()

    moves = game.solve_iterative() if args.iterative else game.solve()

    replay = Game()
    for move in moves:
        replay._move_cube(move.source, move.target)
        print(f"Move: Stack[{move.source}] -> Stack[{move.target}]")
        print(replay)
        print()

    print("Final game state: ")
    print(game)
    sys.stdout.flush()
    return 0