# -*- coding: utf-8 -*-
"""
Cubic Kernels - Mitchell-Netravali family of piecewise cubic filters.

Every member is the two-parameter ``(B, C)`` cubic from Mitchell and
Netravali (1988) with support 2. The presets differ only in ``B`` and
``C``:

- Mitchell: ``B = C = 1/1.3``
- Catmull-Rom: ``B = 0, C = 1/2`` (interpolating)
- cubic B-spline: ``B = 1, C = 0`` (smoothing, never negative)

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


class MitchellNetravaliKernel(FilterKernel):
    """Piecewise cubic ``(B, C)`` kernel, support 2.

    For ``|x| < 1``::

        ((12 - 9B - 6C)|x|^3 + (-18 + 12B + 6C)|x|^2 + (6 - 2B)) / 6

    for ``1 <= |x| < 2``::

        ((-B - 6C)|x|^3 + (6B + 30C)|x|^2 + (-12B - 48C)|x| + (8B + 24C)) / 6

    and zero beyond.

    Parameters
    ----------
    b : float
        Blur parameter ``B``.
    c : float
        Ringing parameter ``C``.
    name : str
        Kernel name. Default ``'mitchell-netravali'``.
    """

    __slots__ = ('_b', '_c', '_near', '_far')

    def __init__(self, b: float, c: float,
                 name: str = 'mitchell-netravali') -> None:
        object.__setattr__(self, '_b', float(b))
        object.__setattr__(self, '_c', float(c))
        # Polynomial coefficients, highest power first, already divided by 6.
        object.__setattr__(self, '_near', np.array([
            12.0 - 9.0 * b - 6.0 * c,
            -18.0 + 12.0 * b + 6.0 * c,
            0.0,
            6.0 - 2.0 * b,
        ]) / 6.0)
        object.__setattr__(self, '_far', np.array([
            -b - 6.0 * c,
            6.0 * b + 30.0 * c,
            -12.0 * b - 48.0 * c,
            8.0 * b + 24.0 * c,
        ]) / 6.0)
        super().__init__(2.0, name)

    @property
    def b(self) -> float:
        """Blur parameter ``B``."""
        return self._b

    @property
    def c(self) -> float:
        """Ringing parameter ``C``."""
        return self._c

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        ax = np.abs(x)
        near = np.polyval(self._near, ax)
        far = np.polyval(self._far, ax)
        return np.where(ax < 1.0, near, np.where(ax < 2.0, far, 0.0))
