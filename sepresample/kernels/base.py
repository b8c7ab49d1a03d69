# -*- coding: utf-8 -*-
"""
Filter Kernel Base Classes - Continuous weighting functions with bounded support.

Defines the ``FilterKernel`` ABC shared by every resampling kernel and
``FunctionKernel`` for wrapping an arbitrary callable. Kernels are
stateless and immutable: attributes are fixed at construction and the
presets in :mod:`sepresample.kernels` are built once at import time.

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

# Standard library
import math
from abc import ABC, abstractmethod
from typing import Callable, Union

# Third-party
import numpy as np

#: Magnitude below which kernel outputs are snapped to exactly zero.
NOISE_CUTOFF = 1.25e-5

ArrayLike = Union[float, np.ndarray]


def sinc(x: ArrayLike) -> np.ndarray:
    """Normalized sinc ``sin(pi*x) / (pi*x)``.

    Uses a Taylor expansion for ``|pi*x| < 0.01`` so ``x = 0`` evaluates
    to exactly 1 instead of ``0/0``.

    Parameters
    ----------
    x : float or np.ndarray
        Sample positions.

    Returns
    -------
    np.ndarray
        ``sinc(x)``, float64, same shape as ``x``.
    """
    f = np.pi * np.asarray(x, dtype=np.float64)
    near_zero = np.abs(f) < 0.01
    f2 = f * f
    taylor = 1.0 + f2 * (-1.0 / 6.0 + f2 / 120.0)
    with np.errstate(divide='ignore', invalid='ignore'):
        exact = np.sin(f) / f
    return np.where(near_zero, taylor, exact)


def cut_noise(values: ArrayLike) -> np.ndarray:
    """Snap near-zero and non-finite values to exactly zero.

    Parameters
    ----------
    values : float or np.ndarray
        Raw kernel outputs.

    Returns
    -------
    np.ndarray
        ``values`` with ``|v| <= NOISE_CUTOFF`` and NaN/inf replaced by 0.
    """
    v = np.asarray(values, dtype=np.float64)
    keep = np.isfinite(v) & (np.abs(v) > NOISE_CUTOFF)
    return np.where(keep, v, 0.0)


class FilterKernel(ABC):
    """Abstract base class for continuous resampling kernels.

    A kernel is a function ``R -> R`` that is zero for ``|x| >= support``
    (the box kernel keeps its half-open ``(-0.5, 0.5]`` definition). The
    nominal integral is 1 but exactness is not required: filter tables
    renormalize every destination entry.

    Subclasses implement :meth:`_evaluate` on float64 arrays; ``apply``
    and ``__call__`` handle scalar/array conversion.

    Parameters
    ----------
    support : float
        Support radius. Must be finite and > 0.
    name : str
        Human-readable name used in logs and ``repr``.
    """

    __slots__ = ('_support', '_name')

    def __init__(self, support: float, name: str) -> None:
        if not (isinstance(support, (int, float)) and math.isfinite(support)
                and support > 0):
            raise ValueError(f"support must be finite and > 0, got {support!r}")
        self._support = float(support)
        self._name = name

    @property
    def support(self) -> float:
        """Support radius; the kernel is zero at and beyond it."""
        return self._support

    @property
    def name(self) -> str:
        """Kernel name."""
        return self._name

    @abstractmethod
    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        """Evaluate the kernel.

        Parameters
        ----------
        x : np.ndarray
            Float64 sample positions, any shape.

        Returns
        -------
        np.ndarray
            Kernel values, same shape as ``x``.
        """
        ...

    def apply(self, x: ArrayLike) -> Union[float, np.ndarray]:
        """Evaluate the kernel at ``x``.

        Parameters
        ----------
        x : float or np.ndarray
            Sample position(s).

        Returns
        -------
        float or np.ndarray
            A Python float for scalar input, otherwise a float64 array of
            the same shape.
        """
        arr = np.asarray(x, dtype=np.float64)
        out = self._evaluate(arr)
        if arr.ndim == 0:
            return float(out)
        return out

    def __call__(self, x: ArrayLike) -> Union[float, np.ndarray]:
        return self.apply(x)

    def __setattr__(self, name, value):
        if hasattr(self, '_name'):
            raise AttributeError(
                f"{type(self).__name__} is immutable; cannot set {name!r}"
            )
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, support={self._support!r})"


class FunctionKernel(FilterKernel):
    """Kernel backed by an arbitrary scalar or vectorized callable.

    The callable is tried on the whole array first; if it cannot handle
    arrays it is applied element by element. Outputs for
    ``|x| >= support`` are forced to zero.

    Parameters
    ----------
    func : Callable[[float], float]
        Weighting function.
    support : float
        Support radius, > 0.
    name : str
        Name for logs. Default ``'custom'``.

    Examples
    --------
    >>> k = FunctionKernel(lambda x: max(0.0, 1.0 - abs(x)), support=1.0)
    >>> k(0.5)
    0.5
    """

    __slots__ = ('_func',)

    def __init__(
        self,
        func: Callable[[float], float],
        support: float,
        name: str = 'custom',
    ) -> None:
        if not callable(func):
            raise TypeError(
                f"func must be callable, got {type(func).__name__}"
            )
        object.__setattr__(self, '_func', func)
        super().__init__(support, name)

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        try:
            out = np.asarray(self._func(x), dtype=np.float64)
            if out.shape != x.shape:
                raise ValueError("shape mismatch")
        except (TypeError, ValueError):
            out = np.vectorize(self._func, otypes=[np.float64])(x)
        return np.where(np.abs(x) < self._support, out, 0.0)
