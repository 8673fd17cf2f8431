import copy

import pytest

from pnmcorr.grayscale import GrayscaleImage, correlation
from pnmcorr.image import ImageError
from pnmcorr.pixel import PixelType

SAMPLE = "P2 2 2 255\n0 50\n200 255\n"
INVERSE = "P2 2 2 255\n255 205\n55 0\n"


def _write(tmp_path, text, name="image.pgm"):
    path = tmp_path / name
    path.write_text(text)
    return path


def _loaded(tmp_path, text=SAMPLE, name="image.pgm"):
    image = GrayscaleImage()
    image.load(_write(tmp_path, text, name))
    return image


def _values(image):
    return [[pixel.value for pixel in row] for row in image.data]


def test_load_reads_values(tmp_path):
    image = _loaded(tmp_path)
    assert (image.rows, image.cols, image.max_possible) == (2, 2, 255)
    assert _values(image) == [[0, 50], [200, 255]]
    assert (image.actual_min, image.actual_max) == (0, 255)


@pytest.mark.parametrize(
    "text",
    [
        "P5 2 2 255\n0 50\n200 255\n",
        "P2 2 two 255\n0 50\n200 255\n",
        "P2 2 2 255\n0 50\n200\n",
        "P2 2 2 255\n0 50\n200 255 1\n",
        "P2 2 2 255\n0 5x\n200 255\n",
        "P2 2 2 100\n0 50\n200 255\n",
    ],
)
def test_malformed_files_are_rejected(tmp_path, text):
    with pytest.raises(ImageError):
        _loaded(tmp_path, text)


def test_missing_file_is_rejected(tmp_path):
    with pytest.raises(ImageError):
        GrayscaleImage().load(tmp_path / "absent.pgm")


def test_regularize_stretches_to_full_range(tmp_path):
    image = _loaded(tmp_path, "P2 3 1 255\n40 60 90\n")
    image.regularize()
    values = _values(image)[0]
    assert values[0] == 0
    assert values[-1] == 255
    assert values == sorted(values)


def test_regularize_rounds_half_away_from_zero(tmp_path):
    image = _loaded(tmp_path, "P2 3 1 2\n0 1 2\n")
    image.regularize()
    assert _values(image)[0][1] == 128


def test_regularize_flat_image_fails(tmp_path):
    image = _loaded(tmp_path, "P2 2 1 255\n9 9\n")
    with pytest.raises(ImageError, match="Unable to regularize"):
        image.regularize()


def test_to_binary_thresholds_at_middle(tmp_path):
    image = _loaded(tmp_path, "P2 2 1 255\n127 128\n")
    image.to_binary()
    assert _values(image) == [[0, 1]]
    assert all(p.type is PixelType.BINARY for p in image.data[0])


def test_to_rgb_copies_intensity(tmp_path):
    image = _loaded(tmp_path)
    before = _values(image)
    image.to_rgb()
    for old_row, row in zip(before, image.data):
        for old, pixel in zip(old_row, row):
            assert (pixel.red, pixel.green, pixel.blue) == (old, old, old)
            assert pixel.type is PixelType.RGB


def test_to_grayscale_leaves_data_unchanged(tmp_path):
    image = _loaded(tmp_path)
    before = copy.deepcopy(image.data)
    image.to_grayscale()
    assert image.data == before


def test_average_of_uniform_image(tmp_path):
    image = _loaded(tmp_path, "P2 3 2 255\n7 7 7\n7 7 7\n")
    assert image.average_intensity() == pytest.approx(7.0)


def test_correlation_with_itself_is_one(tmp_path):
    image = _loaded(tmp_path)
    assert correlation(image, image) == pytest.approx(1.0)


def test_correlation_with_inverse_is_minus_one(tmp_path):
    first = _loaded(tmp_path)
    second = _loaded(tmp_path, INVERSE, "inverse.pgm")
    assert correlation(first, second) == pytest.approx(-1.0)


def test_correlation_is_symmetric_and_bounded(tmp_path):
    first = _loaded(tmp_path)
    second = _loaded(tmp_path, "P2 2 2 255\n3 90\n40 100\n", "other.pgm")
    forward = correlation(first, second)
    assert forward == pytest.approx(correlation(second, first))
    assert -1.0 <= forward <= 1.0


def test_correlation_of_unequal_sizes_fails(tmp_path):
    first = _loaded(tmp_path)
    second = _loaded(tmp_path, "P2 1 2 255\n1\n2\n", "small.pgm")
    with pytest.raises(ImageError, match="unequal dimensions"):
        correlation(first, second)


def test_correlation_with_flat_image_fails(tmp_path):
    first = _loaded(tmp_path)
    flat = _loaded(tmp_path, "P2 2 2 255\n5 5\n5 5\n", "flat.pgm")
    with pytest.raises(ImageError, match="Error correlating"):
        correlation(first, flat)


def test_write_and_reload_round_trip(tmp_path):
    image = _loaded(tmp_path)
    out = tmp_path / "out.pgm"
    image.write(out, PixelType.GRAYSCALE)
    again = GrayscaleImage()
    again.load(out)
    assert _values(again) == _values(image)