"""Load, convert, normalise and correlate plain-text PBM, PGM and PPM images."""

__version__ = "0.1.0"

__all__ = ["pixel", "image", "binary", "color", "grayscale", "cli"]