"""
Renders a histogram as a bar chart image for diagnostics: black bars on a white background.

Each of the 256 bins gets a bar chart_width//256 pixels wide starting at the left edge. With the
default 800 pixel width the bars are 3 pixels wide and the rightmost 32 columns are always blank.
"""

import numpy

from .config import DEFAULT_CONFIG
from .util import NLEVELS, check_histogram

def render_histogram(h, config=None):
    """
    Render a 256-bin histogram as a chart_height x chart_width x 3 uint8 RGB image. See Config for
    the chart settings and the available ways to scale the bars.
    """
    config = DEFAULT_CONFIG if config is None else config
    h = check_histogram(h)
    width, height = config.chart_width, config.chart_height
    chart = numpy.full((height, width, 3), 255, numpy.uint8)
    bar_width = width // NLEVELS
    if bar_width == 0: return chart
    for i, bar_height in enumerate(bar_heights(h, config)):
        if bar_height <= 0: continue
        chart[max(height - bar_height, 0):, i*bar_width:(i+1)*bar_width] = 0
    return chart

def bar_heights(h, config=None):
    """
    Gets the height of each bar in pixels, truncated to an integer. With 'fixed' scaling the heights
    may be taller than the chart.
    """
    config = DEFAULT_CONFIG if config is None else config
    h = check_histogram(h)
    max_height = config.chart_height - config.chart_margin
    if config.chart_scaling == 'max':
        divisor = h.max()
        if divisor == 0: return numpy.zeros(NLEVELS, numpy.int64)
    else:
        divisor = config.chart_divisor
    return (h / divisor * max_height).astype(numpy.int64) # truncates
