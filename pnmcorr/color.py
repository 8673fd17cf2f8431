"""Colour (P3) images."""

from __future__ import annotations

import math

from .image import _DIGITS, Image, ImageError, PathLike, _header_number, _read_tokens
from .pixel import PixelType

_CHANNELS = ("red", "green", "blue")


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


class ColorImage(Image):
    """A plain PPM image with red, green and blue channels."""

    def __init__(self) -> None:
        super().__init__(256, -1)

    def load(self, path: PathLike) -> None:
        """Load a P3 file, raising ImageError if it is malformed."""
        tokens = iter(_read_tokens(path))
        if next(tokens, "") != "P3":
            raise ImageError("Invalid RGB image format")
        cols = _header_number(
            next(tokens, ""), _DIGITS, "Column value in RGB file contains invalid characters"
        )
        rows = _header_number(
            next(tokens, ""), _DIGITS, "Row value in RGB file contains invalid characters"
        )
        self.max_possible = _header_number(
            next(tokens, ""), _DIGITS, "Max pixel in RGB file value not accepted"
        )
        self._allocate(rows, cols)

        expected = rows * cols * 3
        count = 0
        for count, token in enumerate(tokens, start=1):
            if count > expected:
                raise ImageError(
                    "Number of elements in RGB file is greater than what header specifies"
                )
            if token.strip(_DIGITS):
                raise ImageError("Pixel in RGB file contains invalid characters")
            value = int(token)
            if not 0 <= value <= self.max_possible:
                raise ImageError("Pixel value in RGB file is out of range")
            position, channel = divmod(count - 1, 3)
            row, col = divmod(position, cols)
            pixel = self.data[row][col]
            setattr(pixel, _CHANNELS[channel], value)
            if channel == 2:
                for level in (pixel.red, pixel.green, pixel.blue):
                    self._track(level)

        if count < expected:
            raise ImageError("Number of elements in RGB file is less than what header specifies")

    def regularize(self) -> None:
        """Stretch all channels so the seen range spans 0..255."""
        if self.actual_max == self.actual_min:
            raise ImageError("Unable to regularize RGB file")
        low = self.actual_min
        scale = 255.0 / (self.actual_max - low)
        for row in self.data:
            for pixel in row:
                pixel.red = _round_half_away((pixel.red - low) * scale)
                pixel.green = _round_half_away((pixel.green - low) * scale)
                pixel.blue = _round_half_away((pixel.blue - low) * scale)

    def to_binary(self) -> None:
        """Threshold each pixel on the sum of its channels."""
        for row in self.data:
            for pixel in row:
                pixel.type = PixelType.BINARY
                pixel.value = 1 if pixel.pixel_sum() > 382.5 else 0

    def to_grayscale(self) -> None:
        """Replace each pixel with the truncated mean of its channels."""
        for row in self.data:
            for pixel in row:
                total = pixel.pixel_sum()
                pixel.type = PixelType.GRAYSCALE
                pixel.value = int(total / 3)

    def to_rgb(self) -> None:
        """The image is already in colour; nothing changes."""