# -*- coding: utf-8 -*-
"""
Basic Kernels - Box (nearest neighbor) and triangle (linear) kernels.

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

# Third-party
import numpy as np

# sepresample internal
from sepresample.kernels.base import FilterKernel


class BoxKernel(FilterKernel):
    """Box kernel: 1 on ``(-0.5, 0.5]``, 0 elsewhere. Support 0.5.

    Upsampling with it replicates pixels; downsampling averages the
    source pixels that fall inside each destination pixel.
    """

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(0.5, 'box')

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.where((x > -0.5) & (x <= 0.5), 1.0, 0.0)


class TriangleKernel(FilterKernel):
    """Triangle kernel ``max(0, 1 - |x|)``. Support 1 (linear interpolation)."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(1.0, 'triangle')

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.maximum(0.0, 1.0 - np.abs(x))
