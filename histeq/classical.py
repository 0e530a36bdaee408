"""
Implements classical global histogram equalization of 8-bit grayscale and RGB images.

The transform is computed from the cumulative histogram as:

    mapping[i] = round((cdf[i] - cdf[0]) / (npixels - 1) * 255)

Subtracting cdf[0] means level 0 always maps to 0. Other levels are not shifted down, so when there
are no pixels with an intensity of 0 the darkest level in the image maps above 0 and the top of the
range overshoots 255. The result is clipped to [0, 255].

RGB images are equalized by their luma and the equalized luma is written to all three channels, so
the output is always gray. The chrominance is not preserved.
"""

import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

import numpy

from .config import DEFAULT_CONFIG
from .histogram import imhist, imhist_parallel, cumulative
from .intensity import luma
from .util import (NLEVELS, ColorSpace, check_image, check_histogram, check_pixel_count,
                   get_workers, row_blocks)

logger = logging.getLogger(__name__)

EqualizationResult = namedtuple('EqualizationResult', (
    'image', 'color_space', 'hist_before', 'hist_after', 'mapping', 'chart_before', 'chart_after'))

class Phase(Enum):
    """The steps of histeq(), always run in this order."""
    EXTRACTING_HISTOGRAM = 1
    RENDERING_BEFORE = 2
    BUILDING_MAPPING = 3
    REMAPPING = 4
    RENDERING_AFTER = 5
    DONE = 6

def histeq(im, config=None, diagnostics=False, parallel=True):
    """
    Equalize the histogram of a grayscale or RGB uint8 image in place. Returns an
    EqualizationResult with the (same) image, its color space, the histograms before and after,
    and the mapping that was applied. If diagnostics is True then bar charts of the histograms
    before and after are rendered as well, otherwise those fields are None.

    When parallel is True (the default) the histograms and remapping are computed using
    config.workers threads.

    The image is checked before anything else is done. If it is not a supported image or has fewer
    than 2 pixels an error is raised and the image is not changed.
    """
    config = DEFAULT_CONFIG if config is None else config
    image = im
    im, color_space = check_image(im)
    check_pixel_count(im.shape[0]*im.shape[1])
    if not im.flags.writeable: raise ValueError('Image must be writeable')
    workers = get_workers(config.workers) if parallel else 1

    logger.debug('%s: equalizing %dx%d %s image with %d worker(s)', Phase.EXTRACTING_HISTOGRAM.name,
                 im.shape[1], im.shape[0], color_space.name, workers)
    hist_before = __build_hist(im, workers)

    chart_before = chart_after = None
    if diagnostics:
        logger.debug(Phase.RENDERING_BEFORE.name)
        chart_before = __render(hist_before, config)

    logger.debug(Phase.BUILDING_MAPPING.name)
    mapping = histeq_trans(hist_before, im.shape[0]*im.shape[1])

    logger.debug(Phase.REMAPPING.name)
    histeq_apply(im, mapping, workers)

    hist_after = __build_hist(im, workers)
    if diagnostics:
        logger.debug(Phase.RENDERING_AFTER.name)
        chart_after = __render(hist_after, config)

    logger.debug(Phase.DONE.name)
    return EqualizationResult(image, color_space, hist_before, hist_after, mapping,
                              chart_before, chart_after)

def __build_hist(im, workers):
    return imhist(im) if workers == 1 else imhist_parallel(im, workers)

def __render(h, config):
    from .chart import render_histogram
    return render_histogram(h, config)

def histeq_trans(h, npixels=None):
    """
    Calculates the histogram equalization transform from a 256-bin histogram. The number of pixels
    defaults to the sum of the histogram and if given must equal it. Returns a 256 element uint8
    array that maps each intensity to its equalized intensity. This allows you to calculate the
    transform once and apply it many times with histeq_apply.

    The transform is non-decreasing and always maps 0 to 0. A DegenerateImageError is raised if
    there are fewer than 2 pixels.
    """
    h = check_histogram(h)
    total = int(h.sum())
    npixels = total if npixels is None else int(npixels)
    check_pixel_count(npixels)
    if total != npixels: raise ValueError('Histogram has %d counts but there are %d pixels' %
                                          (total, npixels))
    cdf = cumulative(h)
    transform = (cdf - cdf[0]) / (npixels - 1) * 255
    transform = transform.round(out=transform)
    transform = transform.clip(0, 255, out=transform).astype(numpy.uint8)
    transform[0] = 0
    return transform

def histeq_apply(im, transform, workers=1):
    """
    Apply a histogram-equalization transform to a grayscale or RGB uint8 image in place. The
    transform can be created with histeq_trans. Returns the image.

    Grayscale pixels are replaced by transform[pixel]. RGB pixels have all three channels replaced
    by transform[luma(pixel)].

    The rows of the image are split among the workers with each one only writing to its own rows.
    """
    image = im
    im, color_space = check_image(im)
    transform = numpy.asarray(transform)
    if transform.shape != (NLEVELS,) or transform.dtype != numpy.uint8:
        raise ValueError('Transform must be %d uint8 values' % NLEVELS)
    if not im.flags.writeable: raise ValueError('Image must be writeable')
    apply = __apply_gray if color_space == ColorSpace.GRAYSCALE else __apply_rgb
    blocks = row_blocks(im.shape[0], get_workers(workers))
    if len(blocks) <= 1:
        for start, stop in blocks: apply(im[start:stop], transform)
        return image
    with ThreadPoolExecutor(max_workers=len(blocks)) as executor:
        futures = [executor.submit(apply, im[start:stop], transform) for start, stop in blocks]
        for future in futures:
            future.result()
    return image

def __apply_gray(block, transform):
    block[...] = transform[block]

def __apply_rgb(block, transform):
    block[...] = transform[luma(block)][..., None]
