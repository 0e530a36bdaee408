"""
Basic utilities for working with images: color spaces, image verification, exceptions, and
splitting an image into blocks of rows for the worker pool.

Images are numpy uint8 arrays that are either HxW (grayscale) or HxWx3 (RGB).
"""

import os
from enum import Enum

import numpy

NLEVELS = 256


##### Exceptions #####
class HistEqError(ValueError):
    """Base class for all errors about invalid input to histogram equalization."""

class DegenerateImageError(HistEqError):
    """The image has too few pixels (at most 1) for the cumulative histogram to be normalized."""

class UnsupportedColorSpaceError(HistEqError):
    """The image is neither single-channel nor three-channel."""

class UnsupportedImageTypeError(HistEqError):
    """The image data is not 8-bit unsigned integers."""

class UnsupportedFormatError(HistEqError):
    """The image file extension is not one that can be read or written."""

class UndecodableImageError(HistEqError):
    """The image file could not be decoded."""

class ConfigError(HistEqError):
    """A configuration value is out of range."""


##### Color Spaces #####
class ColorSpace(Enum):
    """The channel layout of a pixel buffer."""
    GRAYSCALE = 1
    RGB = 3

    @property
    def channels(self):
        """Number of samples per pixel."""
        return self.value

    @classmethod
    def of(cls, im):
        """
        Gets the color space of an image from its shape. A 2D array or one with a trailing axis of
        length 1 is grayscale and one with a trailing axis of length 3 is RGB. Anything else raises
        an UnsupportedColorSpaceError.
        """
        if im.ndim == 2 or im.ndim == 3 and im.shape[2] == 1:
            return cls.GRAYSCALE
        if im.ndim == 3 and im.shape[2] == 3:
            return cls.RGB
        raise UnsupportedColorSpaceError('Unsupported image shape %s, only single-channel and '
                                         'three-channel images are supported' % (im.shape,))


##### Image Verification #####
def check_image(im):
    """
    Checks that `im` is an 8-bit grayscale or RGB image. Returns the image (with a trailing axis of
    length 1 removed) and its color space. The image data is never copied so any changes to the
    returned image are reflected in the original.
    """
    im = numpy.asanyarray(im)
    color_space = ColorSpace.of(im)
    if im.dtype != numpy.uint8:
        raise UnsupportedImageTypeError('Unsupported image data-type %s, only uint8 images are '
                                        'supported' % im.dtype)
    if im.ndim == 3 and color_space == ColorSpace.GRAYSCALE:
        im = im[:, :, 0]
    return im, color_space

def check_pixel_count(npixels):
    """Raises a DegenerateImageError if there are not enough pixels to equalize."""
    if npixels <= 1:
        raise DegenerateImageError('Image has %d pixel(s), at least 2 are required' % npixels)

def check_histogram(h):
    """Checks that a histogram is a sequence of 256 non-negative counts, returned as int64."""
    h = numpy.asarray(h)
    if h.shape != (NLEVELS,):
        raise ValueError('Histogram must have exactly %d bins' % NLEVELS)
    if h.dtype.kind not in 'iu' or (h < 0).any():
        raise ValueError('Histogram must contain non-negative integer counts')
    return h.astype(numpy.int64, copy=False)


##### Worker Pool Helpers #####
def get_workers(workers=None):
    """
    Gets the number of workers to use. None means one per available CPU and larger values are capped
    at the number of CPUs. Raises a ConfigError if the number is not positive.
    """
    ncpus = os.cpu_count() or 1
    if workers is None:
        return ncpus
    workers = int(workers)
    if workers < 1: raise ConfigError('workers must be at least 1')
    return min(workers, ncpus)

def row_blocks(height, nblocks):
    """
    Splits the rows [0, height) into at most nblocks contiguous non-empty ranges of nearly equal
    size. Returns a list of (start, stop) pairs in order. An image with no rows produces no blocks.
    """
    nblocks = max(min(nblocks, height), 0)
    if nblocks == 0: return []
    size, extra = divmod(height, nblocks)
    blocks, start = [], 0
    for i in range(nblocks):
        stop = start + size + (i < extra)
        blocks.append((start, stop))
        start = stop
    return blocks
