import os

import imageio.v2 as imageio
import numpy
import pytest

from histeq.codec import check_extension, decode, encode
from histeq.util import (ColorSpace, UndecodableImageError, UnsupportedColorSpaceError,
                         UnsupportedFormatError)

def test_check_extension():
    assert check_extension('a/b/image.JPG') == '.jpg'
    assert check_extension('image.png') == '.png'
    for filename in ('image.gif', 'image', 'image.npy'):
        with pytest.raises(UnsupportedFormatError):
            check_extension(filename)

def test_png_gray_round_trip(tmp_path, gray_image):
    filename = str(tmp_path / 'gray.png')
    encode(filename, gray_image)
    im, width, height, color_space = decode(filename)
    assert (width, height) == (53, 37)
    assert color_space == ColorSpace.GRAYSCALE
    assert (im == gray_image).all()
    im[0, 0] = 1 # writeable

def test_png_rgb_round_trip(tmp_path, rgb_image):
    filename = str(tmp_path / 'rgb.png')
    encode(filename, rgb_image)
    im, width, height, color_space = decode(filename)
    assert (width, height) == (41, 29)
    assert color_space == ColorSpace.RGB
    assert (im == rgb_image).all()

def test_jpeg_quality(tmp_path, rng):
    im = rng.integers(0, 256, (64, 64, 3), dtype=numpy.uint8)
    low, high = str(tmp_path / 'low.jpg'), str(tmp_path / 'high.jpeg')
    encode(low, im, 10)
    encode(high, im, 95)
    assert os.path.getsize(low) < os.path.getsize(high)
    decoded, width, height, color_space = decode(low)
    assert decoded.shape == (64, 64, 3)
    assert (width, height, color_space) == (64, 64, ColorSpace.RGB)

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        decode(str(tmp_path / 'missing.jpg'))

def test_unwritable(tmp_path, gray_image):
    with pytest.raises(OSError):
        encode(str(tmp_path / 'no-such-dir' / 'out.png'), gray_image)

def test_rgba_unsupported(tmp_path):
    filename = str(tmp_path / 'rgba.png')
    imageio.imwrite(filename, numpy.zeros((4, 4, 4), numpy.uint8))
    with pytest.raises(UnsupportedColorSpaceError):
        decode(filename)

@pytest.mark.parametrize('name', ['bad.png', 'bad.jpg'])
def test_undecodable(tmp_path, name):
    filename = tmp_path / name
    filename.write_bytes(b'not an image at all')
    with pytest.raises(UndecodableImageError):
        decode(str(filename))
