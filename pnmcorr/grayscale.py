"""Grayscale (P2) images and their correlation."""

from __future__ import annotations

import math

from .image import _DIGITS, Image, ImageError, PathLike, _header_number, _read_tokens
from .pixel import PixelType


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


class GrayscaleImage(Image):
    """A plain PGM image with one intensity per pixel."""

    def __init__(self) -> None:
        super().__init__(256, -1)

    def load(self, path: PathLike) -> None:
        """Load a P2 file, raising ImageError if it is malformed."""
        tokens = iter(_read_tokens(path))
        if next(tokens, "") != "P2":
            raise ImageError("Invalid grayscale image format")
        cols = _header_number(
            next(tokens, ""), _DIGITS, "Column value in grayscale file contains invalid characters"
        )
        rows = _header_number(
            next(tokens, ""), _DIGITS, "Row value in grayscale file contains invalid characters"
        )
        self.max_possible = _header_number(
            next(tokens, ""), _DIGITS, "Max pixel in grayscale file value not accepted"
        )
        self._allocate(rows, cols)

        for row in self.data:
            for pixel in row:
                token = next(tokens, None)
                if token is None:
                    raise ImageError(
                        "Number of elements in grayscale file is less than what header specifies"
                    )
                value = _header_number(
                    token, _DIGITS, "Pixel in grayscale file contains invalid characters"
                )
                if not 0 <= value <= self.max_possible:
                    raise ImageError("Pixel in grayscale file value is out of range")
                pixel.value = value
                self._track(value)

        if next(tokens, None) is not None:
            raise ImageError(
                "Number of elements in grayscale file is greater than what header specifies"
            )

    def regularize(self) -> None:
        """Stretch intensities so the seen range spans 0..255."""
        if self.actual_max == self.actual_min:
            raise ImageError("Unable to regularize grayscale file")
        low = self.actual_min
        scale = 255.0 / (self.actual_max - low)
        for row in self.data:
            for pixel in row:
                pixel.value = _round_half_away((pixel.value - low) * scale)

    def to_binary(self) -> None:
        """Threshold each intensity at the middle of the 0..255 range."""
        for row in self.data:
            for pixel in row:
                pixel.type = PixelType.BINARY
                pixel.value = 1 if pixel.value > 127.5 else 0

    def to_grayscale(self) -> None:
        """The image is already grayscale; nothing changes."""

    def to_rgb(self) -> None:
        """Copy each intensity into all three colour channels."""
        for row in self.data:
            for pixel in row:
                pixel.type = PixelType.RGB
                pixel.red = pixel.value
                pixel.green = pixel.value
                pixel.blue = pixel.value

    def average_intensity(self) -> float:
        """Return the mean intensity, or NaN for an image with no pixels."""
        count = self.rows * self.cols
        total = float(sum(pixel.value for row in self.data for pixel in row))
        if count == 0:
            return math.nan
        return total / count


def correlation(image1: GrayscaleImage, image2: GrayscaleImage) -> float:
    """Return the Pearson correlation of two equally sized grayscale images."""
    if image1.rows != image2.rows or image1.cols != image2.cols:
        raise ImageError("Images of unequal dimensions cannot be correlated")

    mean1 = image1.average_intensity()
    mean2 = image2.average_intensity()

    numerator = 0.0
    squares1 = 0.0
    squares2 = 0.0
    for row1, row2 in zip(image1.data, image2.data):
        for pixel1, pixel2 in zip(row1, row2):
            delta1 = pixel1.value - mean1
            delta2 = pixel2.value - mean2
            numerator += delta1 * delta2
            squares1 += delta1 * delta1
            squares2 += delta2 * delta2

    denominator = math.sqrt(squares1) * math.sqrt(squares2)
    if denominator == 0:
        raise ImageError("Error correlating images")
    result = numerator / denominator
    if math.isnan(result) or result > 1.00000000001 or result < -1.00000000001:
        raise ImageError("Error correlating images")
    return result