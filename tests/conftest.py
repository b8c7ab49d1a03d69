# -*- coding: utf-8 -*-
"""
Shared fixtures for sepresample tests.

License
-------
MIT License
Copyright (c) 2026 sepresample developers
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

import numpy as np
import pytest

from sepresample.buffer import PixelBuffer

#: Uniform test color, 16-bit RGBA.
UNIFORM_COLOR = np.array([13107, 26214, 39321, 52428], dtype=np.uint16)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def random_buffer(rng):
    """Random 23 x 17 RGBA buffer (width 23, height 17)."""
    pixels = rng.integers(0, 65536, size=(17, 23, 4), dtype=np.uint16)
    return PixelBuffer(pixels)


def make_uniform(width, height, color=UNIFORM_COLOR):
    """Uniform-color buffer of the given size."""
    pixels = np.empty((height, width, 4), dtype=np.uint16)
    pixels[...] = color
    return PixelBuffer(pixels)


@pytest.fixture
def uniform_factory():
    """Factory for uniform-color buffers."""
    return make_uniform
