"""Pixel values and pixel kinds for PNM images."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PixelType(Enum):
    """The kind of image a pixel belongs to."""

    RGB = "rgb"
    GRAYSCALE = "grayscale"
    BINARY = "binary"


@dataclass
class Pixel:
    """One pixel: three channels for colour, a single value for grayscale or binary.

    Unset fields hold -1.
    """

    red: int = -1
    green: int = -1
    blue: int = -1
    value: int = -1
    type: PixelType = PixelType.RGB

    def pixel_sum(self) -> int:
        """Return the sum of the red, green and blue channels."""
        return self.red + self.green + self.blue