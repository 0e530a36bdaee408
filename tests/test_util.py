import numpy
import pytest

from histeq.util import (ColorSpace, check_image, check_pixel_count, check_histogram, get_workers,
                         row_blocks, DegenerateImageError, UnsupportedColorSpaceError,
                         UnsupportedImageTypeError, ConfigError, HistEqError)

def test_color_space_of():
    assert ColorSpace.of(numpy.zeros((4, 5), numpy.uint8)) == ColorSpace.GRAYSCALE
    assert ColorSpace.of(numpy.zeros((4, 5, 1), numpy.uint8)) == ColorSpace.GRAYSCALE
    assert ColorSpace.of(numpy.zeros((4, 5, 3), numpy.uint8)) == ColorSpace.RGB
    assert ColorSpace.GRAYSCALE.channels == 1
    assert ColorSpace.RGB.channels == 3

@pytest.mark.parametrize('shape', [(4,), (4, 5, 2), (4, 5, 4), (2, 4, 5, 3)])
def test_color_space_unsupported(shape):
    with pytest.raises(UnsupportedColorSpaceError):
        ColorSpace.of(numpy.zeros(shape, numpy.uint8))

def test_check_image_squeezes_without_copying():
    im = numpy.zeros((3, 4, 1), numpy.uint8)
    out, color_space = check_image(im)
    assert out.shape == (3, 4)
    assert color_space == ColorSpace.GRAYSCALE
    out[1, 2] = 7
    assert im[1, 2, 0] == 7

@pytest.mark.parametrize('dtype', [numpy.uint16, numpy.int8, numpy.float64, bool])
def test_check_image_dtype(dtype):
    with pytest.raises(UnsupportedImageTypeError):
        check_image(numpy.zeros((3, 4), dtype))

def test_errors_are_value_errors():
    assert issubclass(DegenerateImageError, HistEqError)
    assert issubclass(HistEqError, ValueError)

@pytest.mark.parametrize('npixels', [-1, 0, 1])
def test_check_pixel_count_degenerate(npixels):
    with pytest.raises(DegenerateImageError):
        check_pixel_count(npixels)

def test_check_pixel_count():
    check_pixel_count(2)

def test_check_histogram():
    assert check_histogram([0]*256).dtype == numpy.int64
    with pytest.raises(ValueError):
        check_histogram([0]*255)
    with pytest.raises(ValueError):
        check_histogram([-1] + [0]*255)
    with pytest.raises(ValueError):
        check_histogram(numpy.zeros(256))

def test_get_workers(monkeypatch):
    monkeypatch.setattr('os.cpu_count', lambda: 4)
    assert get_workers() == 4
    assert get_workers(3) == 3
    assert get_workers(100) == 4
    monkeypatch.setattr('os.cpu_count', lambda: None)
    assert get_workers() == 1
    assert get_workers(8) == 1
    with pytest.raises(ConfigError):
        get_workers(0)

@pytest.mark.parametrize('height,nblocks', [(10, 3), (10, 1), (2, 8), (100, 7), (5, 5), (1, 4)])
def test_row_blocks_cover_rows(height, nblocks):
    blocks = row_blocks(height, nblocks)
    assert 1 <= len(blocks) <= nblocks
    assert blocks[0][0] == 0
    assert blocks[-1][1] == height
    for (_, stop), (start, _) in zip(blocks, blocks[1:]):
        assert stop == start
    assert all(stop > start for start, stop in blocks)

def test_row_blocks_sizes():
    assert row_blocks(10, 3) == [(0, 4), (4, 7), (7, 10)]
    assert row_blocks(0, 4) == []
