"""
Global histogram equalization of 8-bit grayscale and RGB images along with bar charts of the
histograms for diagnostics.
"""

from .util import (ColorSpace, HistEqError, DegenerateImageError, UnsupportedColorSpaceError,
                   UnsupportedImageTypeError, UnsupportedFormatError, UndecodableImageError,
                   ConfigError)
from .config import Config, DEFAULT_CONFIG
from .intensity import intensity, intensities
from .histogram import imhist, imhist_parallel, cumulative, entropy
from .classical import histeq, histeq_trans, histeq_apply, EqualizationResult
from .chart import render_histogram
from .codec import decode, encode
