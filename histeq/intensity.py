"""
Intensity of pixels. For grayscale images this is the pixel value itself. For RGB images it is the
luma using the weights 0.299, 0.587, and 0.114 for red, green, and blue. The weighted sum is
computed with double precision and truncated (not rounded) to an 8-bit integer.
"""

import numpy

from .util import ColorSpace, check_image

LUMA_WEIGHTS = (0.299, 0.587, 0.114)

def intensity(im, x, y):
    """Gets the 8-bit intensity of the pixel in column x and row y of an image."""
    im, color_space = check_image(im)
    if color_space == ColorSpace.GRAYSCALE:
        return int(im[y, x])
    red, green, blue = (int(v) for v in im[y, x])
    return int(red*LUMA_WEIGHTS[0] + green*LUMA_WEIGHTS[1] + blue*LUMA_WEIGHTS[2])

def intensities(im):
    """
    Gets the 8-bit intensities of every pixel in an image as an HxW uint8 array. For grayscale
    images this is the image itself (not a copy).
    """
    im, color_space = check_image(im)
    return im if color_space == ColorSpace.GRAYSCALE else luma(im)

def luma(im):
    """Core of intensities for RGB images with no checks."""
    wr, wg, wb = LUMA_WEIGHTS
    out = numpy.multiply(im[..., 0], wr)
    out += numpy.multiply(im[..., 1], wg)
    out += numpy.multiply(im[..., 2], wb)
    return out.astype(numpy.uint8) # truncates
