"""Colours expressed as hue, saturation, luminance and alpha."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class HSLAPixel:
    """A colour in HSLA space.

    ``h`` is the hue in degrees [0, 360); ``s``, ``l`` and ``a`` lie in
    [0, 1]. The default pixel is opaque white.
    """

    h: float = 0.0
    s: float = 0.0
    l: float = 1.0  # noqa: E741
    a: float = 1.0

    BLUE: ClassVar[HSLAPixel]
    ORANGE: ClassVar[HSLAPixel]
    YELLOW: ClassVar[HSLAPixel]
    PURPLE: ClassVar[HSLAPixel]


HSLAPixel.BLUE = HSLAPixel(240, 1, 0.5)
HSLAPixel.ORANGE = HSLAPixel(30, 1, 0.5)
HSLAPixel.YELLOW = HSLAPixel(60, 1, 0.5)
HSLAPixel.PURPLE = HSLAPixel(270, 1, 0.5)