"""Common behaviour of PNM images: validation, checksums and writing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .pixel import Pixel, PixelType

PathLike = Union[str, Path]

_DIGITS = "0123456789"

_HEADERS = {
    PixelType.BINARY: ("P1", 1),
    PixelType.GRAYSCALE: ("P2", 255),
    PixelType.RGB: ("P3", 255),
}


class ImageError(Exception):
    """Raised when an image or checksum file cannot be read, parsed or written."""


class Image(ABC):
    """An image held as rows of pixels, with the value range seen while loading."""

    def __init__(self, highest: int, lowest: int) -> None:
        self.rows = -1
        self.cols = -1
        self.max_possible = -1
        self.actual_max = lowest
        self.actual_min = highest
        self.data: list[list[Pixel]] = []

    @abstractmethod
    def load(self, path: PathLike) -> None:
        """Load the image from a file, raising ImageError if it is malformed."""

    @abstractmethod
    def regularize(self) -> None:
        """Stretch the pixel intensities to the full 0..255 range."""

    @abstractmethod
    def to_binary(self) -> None:
        """Convert the pixels to binary form."""

    @abstractmethod
    def to_grayscale(self) -> None:
        """Convert the pixels to grayscale form."""

    @abstractmethod
    def to_rgb(self) -> None:
        """Convert the pixels to colour form."""

    def row_checksums(self) -> list[int]:
        """Return the sum of the channel sums of each row."""
        return [sum(pixel.pixel_sum() for pixel in row) for row in self.data]

    def col_checksums(self) -> list[int]:
        """Return the sum of the channel sums of each column."""
        return [sum(pixel.pixel_sum() for pixel in column) for column in zip(*self.data)]

    def write_row_checksums(self, path: PathLike) -> None:
        """Write the row checksums to a file, one per line."""
        _write_lines(path, self.row_checksums(), "Error writing to row checksum file")

    def write_col_checksums(self, path: PathLike) -> None:
        """Write the column checksums to a file, one per line."""
        _write_lines(path, self.col_checksums(), "Error writing to column checksum file")

    def write(self, path: PathLike, pixel_type: PixelType) -> None:
        """Write the image as a plain PNM file of the given pixel type."""
        try:
            magic, max_value = _HEADERS[pixel_type]
        except (KeyError, TypeError):
            raise ImageError("Invalid format prevented writing image file") from None

        lines = [f"{magic} {self.cols} {self.rows} {max_value}"]
        for row in self.data:
            for pixel in row:
                if pixel_type is PixelType.RGB:
                    lines.append(f"{pixel.red} {pixel.green} {pixel.blue}")
                else:
                    lines.append(str(pixel.value))
        try:
            with open(path, "w", encoding="ascii") as output:
                output.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise ImageError("Error writing to file") from exc

    def _allocate(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.data = [[Pixel() for _ in range(cols)] for _ in range(rows)]

    def _track(self, value: int) -> None:
        if value > self.actual_max:
            self.actual_max = value
        if value < self.actual_min:
            self.actual_min = value


def _write_lines(path: PathLike, values: list[int], message: str) -> None:
    try:
        with open(path, "w", encoding="ascii") as output:
            output.writelines(f"{value}\n" for value in values)
    except OSError as exc:
        raise ImageError(message) from exc


def _read_tokens(path: PathLike) -> list[str]:
    """Return the whitespace-separated tokens of a file."""
    try:
        with open(path, encoding="latin-1") as source:
            return source.read().split()
    except OSError as exc:
        raise ImageError(f"Could not open image file {path}") from exc


def _header_number(token: str, allowed: str, message: str) -> int:
    """Parse a header token made only of the allowed characters."""
    if not token or token.strip(allowed):
        raise ImageError(message)
    return int(token)


def check_image_file(path: PathLike) -> None:
    """Raise ImageError if the file cannot be opened or is empty."""
    try:
        with open(path, "rb") as source:
            first = source.read(1)
    except OSError as exc:
        raise ImageError("Error opening image file") from exc
    if not first:
        raise ImageError("Image file is empty")


def check_checksum_files(row_path: PathLike, col_path: PathLike) -> None:
    """Raise ImageError if either checksum file cannot be opened."""
    for path in (row_path, col_path):
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise ImageError("Error opening one of the image files") from exc


def read_format(path: PathLike) -> str:
    """Return the first token of a file: its PNM magic number.

    Returns "Unknown" if the file cannot be opened and "" if it has no tokens.
    """
    try:
        with open(path, encoding="latin-1") as source:
            for line in source:
                tokens = line.split()
                if tokens:
                    return tokens[0]
    except OSError:
        return "Unknown"
    return ""