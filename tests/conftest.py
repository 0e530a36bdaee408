"""Shared fixtures for the tests."""

import numpy
import pytest

@pytest.fixture
def rng():
    """A seeded random number generator so that tests are repeatable."""
    return numpy.random.default_rng(12345)

@pytest.fixture
def gray_image(rng):
    """A 37x53 grayscale image with values clustered around the middle of the range."""
    im = rng.normal(128, 30, (37, 53)).clip(0, 255)
    return im.astype(numpy.uint8)

@pytest.fixture
def rgb_image(rng):
    """A 29x41 RGB image of random values."""
    return rng.integers(0, 256, (29, 41, 3), dtype=numpy.uint8)
