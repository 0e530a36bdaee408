"""
Histogram calculation. Histograms always have 256 bins, one for each 8-bit intensity level, and are
computed from the intensities of the pixels (see the intensity module).

There is a serial and a parallel version which produce identical results. The parallel version
splits the rows of the image into contiguous blocks, one per worker. Each worker counts its rows
into its own private histogram and then adds that to the shared histogram while holding a lock.
Since integer addition is associative and commutative the order the workers finish in and the
number of workers does not change the result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from threading import Lock

import numpy

from .intensity import intensities
from .util import NLEVELS, check_image, check_histogram, get_workers, row_blocks

logger = logging.getLogger(__name__)

def imhist(im):
    """Calculate the 256-bin intensity histogram of an image in a single pass."""
    im, _ = check_image(im)
    return __imhist(intensities(im))

def imhist_parallel(im, workers=None):
    """
    Calculate the 256-bin intensity histogram of an image using a pool of worker threads. The
    number of workers defaults to the number of CPUs. The result is always identical to imhist().
    """
    im, _ = check_image(im)
    blocks = row_blocks(im.shape[0], get_workers(workers))
    total = numpy.zeros(NLEVELS, numpy.int64)
    lock = Lock()

    def _count(start, stop):
        local = __imhist(intensities(im[start:stop]))
        with lock:
            numpy.add(total, local, out=total)

    logger.debug('counting %d rows in %d blocks', im.shape[0], len(blocks))
    if len(blocks) <= 1:
        for start, stop in blocks: _count(start, stop)
        return total
    with ThreadPoolExecutor(max_workers=len(blocks)) as executor:
        futures = [executor.submit(_count, start, stop) for start, stop in blocks]
        for future in futures:
            future.result() # re-raises any error from a worker
    return total

def __imhist(vals):
    """Core of imhist with no checks, takes an array of intensities."""
    from scipy.ndimage import histogram
    if vals.size == 0: return numpy.zeros(NLEVELS, numpy.int64)
    return histogram(vals, 0, NLEVELS-1, NLEVELS).astype(numpy.int64, copy=False)

def cumulative(h):
    """Calculates the cumulative histogram, the running total of the counts in each bin."""
    return check_histogram(h).cumsum()

def entropy(h):
    """
    Shannon entropy of a histogram, in bits. This is at most 8 for a 256-bin histogram, which is
    only reached when every bin has the same count. An empty histogram has an entropy of 0.
    """
    h = check_histogram(h)
    total = h.sum()
    if total == 0: return 0.0
    p = h[h > 0] / total
    return float(-(p * numpy.log2(p)).sum())
