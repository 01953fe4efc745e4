"""Shapes with a width, and coloured cubes built on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from .pixel import HSLAPixel


@dataclass
class Shape:
    """A generic shape with a width (1 by default)."""

    width: float = 1.0


@total_ordering
@dataclass
class Cube(Shape):
    """A cube whose side length is the shape's width, with a colour.

    Cubes order by side length.
    """

    color: HSLAPixel = field(default_factory=HSLAPixel)

    @property
    def length(self) -> float:
        """Side length of the cube."""
        return self.width

    @length.setter
    def length(self, value: float) -> None:
        self.width = value

    def volume(self) -> float:
        """Return the volume of the cube."""
        return self.length * self.length * self.length

    def surface_area(self) -> float:
        """Return the total area of the six faces."""
        return 6 * self.length * self.length

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.length < other.length

    def __str__(self) -> str:
        return f"Cube({self.length:g})"