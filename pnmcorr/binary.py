"""Binary (P1) images."""

from __future__ import annotations

from .image import _DIGITS, Image, ImageError, PathLike, _header_number, _read_tokens
from .pixel import PixelType


class BinaryImage(Image):
    """A plain PBM image whose pixels are 0 or 1."""

    def __init__(self) -> None:
        super().__init__(2, -1)

    def load(self, path: PathLike) -> None:
        """Load a P1 file, raising ImageError if it is malformed."""
        tokens = iter(_read_tokens(path))
        if next(tokens, "") != "P1":
            raise ImageError("Invalid binary image format")
        cols = _header_number(
            next(tokens, ""), _DIGITS, "Column value in binary file contains invalid characters"
        )
        rows = _header_number(
            next(tokens, ""), _DIGITS, "Row value in binary file contains invalid characters"
        )
        self.max_possible = _header_number(
            next(tokens, ""), "01", "Max pixel in binary file value not accepted"
        )
        self._allocate(rows, cols)

        expected = rows * cols
        count = 0
        for count, token in enumerate(tokens, start=1):
            if count > expected:
                raise ImageError(
                    "Number of elements in binary file is greater than what header specifies"
                )
            if token.strip("01"):
                raise ImageError("Pixel in binary file contains invalid characters")
            value = int(token)
            if not 0 <= value <= self.max_possible:
                raise ImageError("Pixel value in binary file is out of range")
            row, col = divmod(count - 1, cols)
            self.data[row][col].value = value
            self._track(value)

        if count < expected:
            raise ImageError(
                "Number of elements in binary file is less than what header specifies"
            )

    def regularize(self) -> None:
        """Binary images cannot be stretched; nothing changes."""

    def to_binary(self) -> None:
        """The image is already binary; nothing changes."""

    def to_grayscale(self) -> None:
        """Map 0 to black and 1 to white grayscale values."""
        for row in self.data:
            for pixel in row:
                pixel.type = PixelType.GRAYSCALE
                pixel.value *= 255

    def to_rgb(self) -> None:
        """Map 0 to black and 1 to white colour pixels."""
        for row in self.data:
            for pixel in row:
                intensity = pixel.value * 255
                pixel.type = PixelType.RGB
                pixel.red = intensity
                pixel.green = intensity
                pixel.blue = intensity