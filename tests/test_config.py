import pytest

from histeq.config import Config, DEFAULT_CONFIG
from histeq.util import ConfigError

def test_defaults():
    assert DEFAULT_CONFIG.workers is None
    assert DEFAULT_CONFIG.quality == 75
    assert (DEFAULT_CONFIG.chart_width, DEFAULT_CONFIG.chart_height) == (800, 400)
    assert DEFAULT_CONFIG.chart_margin == 20
    assert DEFAULT_CONFIG.chart_scaling == 'max'
    assert DEFAULT_CONFIG.chart_divisor == 1000

@pytest.mark.parametrize('kwargs', [
    {'workers': 0}, {'workers': 2.5}, {'quality': 101}, {'quality': -1}, {'chart_width': 0},
    {'chart_margin': 400}, {'chart_scaling': 'log'}, {'chart_divisor': 0},
])
def test_invalid(kwargs):
    with pytest.raises(ConfigError):
        Config(**kwargs)

def test_replace():
    config = DEFAULT_CONFIG.replace(chart_scaling='fixed', workers=2)
    assert config.chart_scaling == 'fixed'
    assert config.workers == 2
    assert DEFAULT_CONFIG.chart_scaling == 'max'
    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.replace(quality=1000)
