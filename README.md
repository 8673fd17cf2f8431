# pnmcorr

Read plain-text Netpbm images, convert between their kinds, normalise
their intensity, write them back, and measure how closely two grayscale
images match.

Supported formats:

| Magic | Kind      | Class                              |
|-------|-----------|------------------------------------|
| `P1`  | binary    | `pnmcorr.binary.BinaryImage`       |
| `P2`  | grayscale | `pnmcorr.grayscale.GrayscaleImage` |
| `P3`  | colour    | `pnmcorr.color.ColorImage`         |

Files are read as whitespace-separated tokens: the magic number, the
width, the height, the maximum value, then the pixel values. Comment
lines (`#`) are not supported.

## Installation

```
pip install .
```

## Command line

```
pnmcorr first.pgm second.pgm
```

Both files must be plain `P2` grayscale images with the same width and
height. The command prints the Pearson correlation of their pixel
intensities, a number between -1 and 1, and exits with status 0. It
exits with status 1, and says why on standard error, when the number of
arguments is not two, a file cannot be read or is malformed, the sizes
differ, or the correlation is undefined (for example when one image is a
single flat colour).

The same work is available from Python as `pnmcorr.cli.run(first, second)`,
which returns the correlation as a float, and `pnmcorr.cli.main(argv)`,
which returns the exit status.

## Library use

```python
from pnmcorr.grayscale import GrayscaleImage, correlation
from pnmcorr.pixel import PixelType

a = GrayscaleImage()
a.load("first.pgm")
b = GrayscaleImage()
b.load("second.pgm")
print(correlation(a, b))

a.regularize()              # stretch intensities to 0..255
a.to_binary()               # 1 above 127.5, else 0
a.write("first.pbm", PixelType.BINARY)
```

Every image class offers:

- `load(path)` – parse a file of its own kind, checking the header, the
  characters of every value, the value range and the number of values.
- `regularize()` – stretch the range of values seen while loading to
  0..255 (grayscale and colour; a no-op for binary images).
- `to_binary()`, `to_grayscale()`, `to_rgb()` – convert the pixels in
  place; converting to the image's own kind changes nothing.
- `write(path, pixel_type)` – write a plain `P1`, `P2` or `P3` file,
  one pixel per line, choosing the kind from a `PixelType`.
- `row_checksums()` / `col_checksums()` – the sums of the red, green and
  blue channels of each row or column, and `write_row_checksums(path)` /
  `write_col_checksums(path)` to write them one per line.

`GrayscaleImage.average_intensity()` gives the mean intensity, and
`pnmcorr.grayscale.correlation(image1, image2)` the Pearson correlation
of two images of equal size.

Pixels are `pnmcorr.pixel.Pixel` dataclasses with `red`, `green`, `blue`,
`value` and `type` fields (unset fields hold -1) and a `pixel_sum()`
method.

Problems are reported by raising `pnmcorr.image.ImageError`.

The helpers `check_image_file`, `check_checksum_files` and `read_format`
in `pnmcorr.image` check that an image file can be opened and is
non-empty, check that two checksum files can be opened, and read the
magic number at the start of an image file.

## What it does not do

The command only correlates two grayscale images. Loading binary or
colour images, conversion, normalisation, writing images and checksums
are available from Python only. Checksums are computed and written but
never compared with checksums read from a file.

## Running the tests

```
pip install .[test]
pytest
```