"""
Reading and writing image files with imageio.
"""

import logging
import os.path

import numpy

from .util import UndecodableImageError, UnsupportedFormatError, check_image

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.bmp', '.tif', '.tiff')
JPEG_EXTENSIONS = ('.jpg', '.jpeg')
DEFAULT_QUALITY = 75

def check_extension(filename):
    """Gets the lowercase extension of a filename, raising an error if it is not supported."""
    ext = os.path.splitext(filename)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError("Unsupported file extension '%s'" % ext)
    return ext

def decode(filename):
    """
    Read an image file. Returns the image as a writeable uint8 array along with its width, height,
    and color space. Raises FileNotFoundError if the file does not exist and an
    UndecodableImageError if it cannot be read. Other HistEqErrors are raised if it is not an 8-bit
    grayscale or RGB image.
    """
    import imageio.v2 as imageio
    check_extension(filename)
    if not os.path.isfile(filename):
        raise FileNotFoundError("No such image file: '%s'" % filename)
    try:
        im = numpy.array(imageio.imread(filename)) # plain, writeable, and owned by us
    except FileNotFoundError:
        raise
    except (ValueError, OSError) as ex:
        raise UndecodableImageError("Could not decode image file '%s': %s" %
                                    (filename, ex)) from ex
    im, color_space = check_image(im)
    logger.debug('read %s: %dx%d %s', filename, im.shape[1], im.shape[0], color_space.name)
    return im, im.shape[1], im.shape[0], color_space

def encode(filename, im, quality=DEFAULT_QUALITY):
    """
    Write an 8-bit grayscale or RGB image to a file. JPEG files are written with the given quality
    (0 to 100), other formats ignore it. Errors creating the file are raised as OSError.
    """
    import imageio.v2 as imageio
    ext = check_extension(filename)
    im, _ = check_image(im)
    kwargs = {'quality': int(quality)} if ext in JPEG_EXTENSIONS else {}
    imageio.imwrite(filename, im, **kwargs)
    logger.debug('wrote %s', filename)
