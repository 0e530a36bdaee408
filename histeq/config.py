"""
Tunable constants for equalization, encoding, and histogram charts.

The two chart scaling policies are not equivalent:

    'max'   Bars are scaled by the largest bin so the tallest bar is always
            chart_height-chart_margin pixels tall. This is the default.
    'fixed' Bars are scaled by the constant chart_divisor, so a bin with chart_divisor pixels is
            chart_height-chart_margin pixels tall. Larger bins run off the top of the chart and are
            clipped. Only useful for comparing charts of similarly sized images.
"""

from collections import namedtuple

from .util import ConfigError

CHART_SCALINGS = ('max', 'fixed')

_FIELDS = ('workers', 'quality', 'chart_width', 'chart_height', 'chart_margin', 'chart_scaling',
           'chart_divisor')

class Config(namedtuple('Config', _FIELDS,
                        defaults=(None, 75, 800, 400, 20, 'max', 1000))):
    """
    Settings for histogram equalization. All fields have defaults:

        workers        number of worker threads, None for one per CPU, capped at the CPU count
        quality        JPEG quality used when writing images, 0 to 100
        chart_width    width of histogram charts, in pixels
        chart_height   height of histogram charts, in pixels
        chart_margin   space left above the tallest possible bar, in pixels
        chart_scaling  how bar heights are scaled, either 'max' or 'fixed'
        chart_divisor  bin count that reaches full height when chart_scaling is 'fixed'

    The values are checked when constructed and a ConfigError is raised if any are invalid.
    """
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        self = super().__new__(cls, *args, **kwargs)
        self.validate()
        return self

    def validate(self):
        """Raises a ConfigError if any setting is out of range."""
        if self.workers is not None and (not isinstance(self.workers, int) or self.workers < 1):
            raise ConfigError('workers must be a positive integer or None')
        if not 0 <= self.quality <= 100:
            raise ConfigError('quality must be from 0 to 100')
        if self.chart_width < 1 or self.chart_height < 1:
            raise ConfigError('chart dimensions must be positive')
        if not 0 <= self.chart_margin < self.chart_height:
            raise ConfigError('chart_margin must be non-negative and less than chart_height')
        if self.chart_scaling not in CHART_SCALINGS:
            raise ConfigError('chart_scaling must be one of %s' % (CHART_SCALINGS,))
        if self.chart_divisor <= 0:
            raise ConfigError('chart_divisor must be positive')

    def replace(self, **kwargs):
        """Returns a copy of this configuration with some settings changed."""
        config = self._replace(**kwargs) # _replace does not go through __new__
        config.validate()
        return config

DEFAULT_CONFIG = Config()
