# -*- coding: utf-8 -*-
"""
Discrete Filter Tables - Precomputed per-destination (source index, weight) lists.

Evaluating the continuous kernel once per destination coordinate and
storing the surviving taps lets the convolution passes run as pure
gather-multiply-accumulate. A table covers one axis of one resize
request.

Construction, per destination coordinate ``i``:

1. ``dst2src = (ndst - 1) / (nsrc - 1)`` so the first and last samples
   map exactly onto the source endpoints.
2. ``center = i / dst2src``.
3. When downsampling (``dst2src < 1``) the support is widened by
   ``1 / dst2src`` and the kernel is scaled by ``dst2src``, turning it
   into a decimation low-pass filter.
4. Every integer candidate in
   ``[floor(center - support - eps), ceil(center + support + eps)]`` is
   passed through the boundary policy; accepted candidates get weight
   ``kernel(fscale * (j - center)) * fscale``. Rejected or zero-weight
   candidates are dropped.
5. Surviving weights are divided by their sum.

The whole axis is built in one vectorized sweep: candidates form a
``(ndst, width)`` matrix which is compacted so that surviving taps come
first in each row.

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
import logging
import math
from typing import Any, Iterator, List, Tuple

# Third-party
import numpy as np

# sepresample internal
from sepresample.boundary import BoundaryPolicy
from sepresample.kernels.base import FilterKernel

logger = logging.getLogger(__name__)

#: Guards candidate enumeration against rounding at exact support edges.
SUPPORT_NUDGE = 1e-8


class DiscreteFilterTable:
    """Sparse filter taps for one axis, stored as padded dense arrays.

    Row ``i`` describes destination coordinate ``i``: its first
    ``counts[i]`` columns hold the surviving ``(index, weight)`` pairs in
    ascending candidate order; the remaining columns are padding with
    index 0 and weight 0.

    Parameters
    ----------
    indices : np.ndarray
        ``intp`` source indices, shape ``(ndst, taps)``.
    weights : np.ndarray
        ``float32`` weights, shape ``(ndst, taps)``.
    counts : np.ndarray
        Surviving taps per destination, shape ``(ndst,)``.
    src_size : int
        Length of the source axis.
    """

    __slots__ = ('indices', 'weights', 'counts', 'src_size', 'op_count')

    def __init__(
        self,
        indices: np.ndarray,
        weights: np.ndarray,
        counts: np.ndarray,
        src_size: int,
    ) -> None:
        self.indices = indices
        self.weights = weights
        self.counts = counts
        self.src_size = src_size
        #: Total surviving pairs, the axis's multiply-accumulate cost per line.
        self.op_count = int(counts.sum())

    @property
    def dst_size(self) -> int:
        """Number of destination coordinates."""
        return self.indices.shape[0]

    @property
    def taps(self) -> int:
        """Padded row width (largest entry length)."""
        return self.indices.shape[1]

    def __len__(self) -> int:
        return self.dst_size

    def entry(self, i: int) -> List[Tuple[int, float]]:
        """Surviving ``(source_index, weight)`` pairs for destination ``i``."""
        n = int(self.counts[i])
        return [(int(k), float(w))
                for k, w in zip(self.indices[i, :n], self.weights[i, :n])]

    def __iter__(self) -> Iterator[List[Tuple[int, float]]]:
        for i in range(self.dst_size):
            yield self.entry(i)

    def __repr__(self) -> str:
        return (f"DiscreteFilterTable(dst_size={self.dst_size}, "
                f"src_size={self.src_size}, taps={self.taps}, "
                f"op_count={self.op_count})")


def axis_mapping(ndst: int, nsrc: int) -> Tuple[float, np.ndarray]:
    """Destination-to-source scale and source-space centers for one axis.

    Parameters
    ----------
    ndst : int
        Destination length, >= 1.
    nsrc : int
        Source length, >= 1.

    Returns
    -------
    dst2src : float
        Scale factor; ``inf`` when a single source sample is stretched.
    centers : np.ndarray
        Float64 source coordinate of every destination sample.
    """
    if ndst == 1:
        # A single sample sees the whole source, centered on its middle.
        return 1.0 / nsrc, np.array([(nsrc - 1) / 2.0])
    if nsrc == 1:
        return math.inf, np.zeros(ndst)
    dst2src = (ndst - 1) / (nsrc - 1)
    return dst2src, np.arange(ndst, dtype=np.float64) / dst2src


def _evaluate_kernel(kernel: Any, x: np.ndarray) -> np.ndarray:
    if isinstance(kernel, FilterKernel):
        return kernel.apply(x)
    try:
        out = np.asarray(kernel.apply(x), dtype=np.float64)
        if out.shape == x.shape:
            return out
    except (TypeError, ValueError):
        pass
    return np.vectorize(kernel.apply, otypes=[np.float64])(x)


def _map_indices(boundary: Any, candidates: np.ndarray, hi: int) -> np.ndarray:
    if isinstance(boundary, BoundaryPolicy):
        return boundary(candidates, 0, hi)
    try:
        out = np.asarray(boundary(candidates, 0, hi))
        if out.shape == candidates.shape and np.issubdtype(out.dtype, np.integer):
            return out.astype(np.intp)
    except (TypeError, ValueError):
        pass

    def _scalar(j):
        k = boundary(int(j), 0, hi)
        return -1 if k is None else int(k)

    return np.vectorize(_scalar, otypes=[np.intp])(candidates)


def build_filter_table(
    kernel: FilterKernel,
    boundary: BoundaryPolicy,
    ndst: int,
    nsrc: int,
) -> DiscreteFilterTable:
    """Build the discrete filter table for one axis.

    Parameters
    ----------
    kernel : FilterKernel
        Continuous kernel (any object with ``apply`` and ``support``).
    boundary : BoundaryPolicy
        Boundary policy (any ``(index, lo, hi) -> index`` callable).
    ndst : int
        Destination length, >= 0.
    nsrc : int
        Source length, >= 1.

    Returns
    -------
    DiscreteFilterTable
        Table whose every non-empty entry sums to 1.

    Raises
    ------
    ValueError
        If ``nsrc < 1`` or ``ndst < 0``.
    """
    if nsrc < 1:
        raise ValueError(f"source length must be >= 1, got {nsrc}")
    if ndst < 0:
        raise ValueError(f"destination length must be >= 0, got {ndst}")
    if ndst == 0:
        return DiscreteFilterTable(
            np.zeros((0, 0), dtype=np.intp),
            np.zeros((0, 0), dtype=np.float32),
            np.zeros(0, dtype=np.intp),
            nsrc,
        )

    dst2src, centers = axis_mapping(ndst, nsrc)
    support = float(kernel.support)
    fscale = 1.0
    if dst2src < 1.0:
        # Downsampling: stretch the kernel into a low-pass filter.
        support /= dst2src
        fscale = dst2src

    lo = np.floor(centers - support - SUPPORT_NUDGE).astype(np.intp)
    hi = np.ceil(centers + support + SUPPORT_NUDGE).astype(np.intp)
    width = int((hi - lo).max()) + 1
    offsets = np.arange(width, dtype=np.intp)
    candidates = lo[:, np.newaxis] + offsets[np.newaxis, :]

    mapped = _map_indices(boundary, candidates, nsrc - 1)
    raw = _evaluate_kernel(kernel, fscale * (candidates - centers[:, np.newaxis]))
    raw = raw * fscale

    keep = (
        (candidates <= hi[:, np.newaxis])
        & (mapped >= 0) & (mapped < nsrc)
        & np.isfinite(raw) & (raw != 0.0)
    )

    # Move surviving taps to the front of each row, preserving order.
    order = np.argsort(~keep, axis=1, kind='stable')
    keep = np.take_along_axis(keep, order, axis=1)
    mapped = np.take_along_axis(mapped, order, axis=1)
    raw = np.take_along_axis(raw, order, axis=1)

    counts = keep.sum(axis=1)
    taps = int(counts.max())
    keep = keep[:, :taps]
    indices = np.where(keep, mapped[:, :taps], 0).astype(np.intp)
    weights = np.where(keep, raw[:, :taps], 0.0)

    sums = weights.sum(axis=1)
    degenerate = sums == 0.0
    if degenerate.any():
        # Nothing to normalize against; the destination sample stays empty.
        counts = np.where(degenerate, 0, counts)
        indices[degenerate] = 0
        weights[degenerate] = 0.0
        sums = np.where(degenerate, 1.0, sums)
    weights = (weights / sums[:, np.newaxis]).astype(np.float32)

    table = DiscreteFilterTable(indices, weights, counts.astype(np.intp), nsrc)
    logger.debug(
        "Filter table %d -> %d (%s, %s): dst2src=%g taps=%d ops=%d",
        nsrc, ndst, getattr(kernel, 'name', kernel),
        getattr(boundary, 'name', boundary), dst2src, table.taps,
        table.op_count,
    )
    return table
