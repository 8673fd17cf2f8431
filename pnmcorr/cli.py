"""Command line entry point: correlate two grayscale images."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .grayscale import GrayscaleImage, correlation
from .image import ImageError, PathLike, check_image_file, read_format


def run(first_path: PathLike, second_path: PathLike) -> float:
    """Load two P2 images and return their correlation."""
    if read_format(first_path) != "P2":
        raise ImageError("Unknown input file format")

    images = []
    try:
        for path in (first_path, second_path):
            check_image_file(path)
            image = GrayscaleImage()
            image.load(path)
            images.append(image)
    except ImageError as exc:
        raise ImageError("One of the input files is invalid") from exc

    return correlation(*images)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the correlation of the two image files given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: Incorrect number of arguments provided", file=sys.stderr)
        return 1
    try:
        result = run(args[0], args[1])
    except ImageError as exc:
        if exc.__cause__ is not None:
            print(exc.__cause__, file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    print(f"{result:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())