# -*- coding: utf-8 -*-
"""
Axis Convolver - One separable pass of a resize.

Applies a ``DiscreteFilterTable`` along one axis of a source image,
writing a ``PixelBuffer`` whose size differs only along that axis. The
same line routine serves both axes: for a Y pass the image is viewed
column-major so every pass walks "lines" along the filtered axis.

For each line the source samples are gathered into a contiguous
``float32`` scratch line, every destination sample is accumulated from
its table entry, and the accumulators are quantized back into the
16-bit destination line with saturation.

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
from typing import Callable, Optional

# Third-party
import numpy as np

# sepresample internal
from sepresample.buffer import (
    CHANNELS,
    ArraySource,
    U16_TO_F32,
    PixelBuffer,
    PixelSource,
    quantize,
)
from sepresample.engine.filter_table import DiscreteFilterTable
from sepresample.vocabulary import Axis

#: Called after every finished line with that line's operation count.
LineCallback = Callable[[int], None]


def _line_view(pixels: np.ndarray, axis: Axis) -> np.ndarray:
    """View ``(h, w, 4)`` pixels as ``(lines, samples, 4)`` along ``axis``."""
    if axis is Axis.X:
        return pixels
    return pixels.swapaxes(0, 1)


def _line_reader(source: PixelSource, axis: Axis) -> Callable[[int, np.ndarray], None]:
    """Return ``read(i, scratch)`` filling ``scratch`` with source line ``i``."""
    if isinstance(source, PixelBuffer):
        lines = _line_view(source.pixels, axis)

        def read(i: int, scratch: np.ndarray) -> None:
            np.multiply(lines[i], U16_TO_F32, out=scratch, casting='unsafe')

        return read

    if axis is Axis.Y and not isinstance(source, ArraySource):
        # Columns of a row-oriented source: read every row once up front.
        columns = _line_view(source.to_float(), axis)

        def read(i: int, scratch: np.ndarray) -> None:
            scratch[...] = columns[i]

        return read

    fetch = source.read_row if axis is Axis.X else source.read_column

    def read(i: int, scratch: np.ndarray) -> None:
        scratch[...] = fetch(i)

    return read


def accumulate_line(line: np.ndarray, table: DiscreteFilterTable) -> np.ndarray:
    """Resample one normalized line through ``table``.

    Parameters
    ----------
    line : np.ndarray
        ``float32`` source samples, shape ``(table.src_size, 4)``.
    table : DiscreteFilterTable
        Filter taps for the line's axis.

    Returns
    -------
    np.ndarray
        ``float32`` accumulators, shape ``(table.dst_size, 4)``.
    """
    # Padding taps carry weight 0 at index 0 and add nothing.
    return np.einsum('ij,ijc->ic', table.weights, line[table.indices],
                     dtype=np.float32)


def convolve_axis(
    source: PixelSource,
    dest: PixelBuffer,
    table: DiscreteFilterTable,
    axis: Axis,
    on_line: Optional[LineCallback] = None,
) -> None:
    """Resample ``source`` along ``axis`` into ``dest``.

    Parameters
    ----------
    source : PixelSource
        Input image. A ``PixelBuffer`` is read directly from its packed
        storage, an ``ArraySource`` a row or column at a time. Any other
        source is read one row at a time; for a Y pass every row is read
        once into a float copy before the first column is filtered.
    dest : PixelBuffer
        Output image. Must match ``source`` along the axis orthogonal to
        ``axis`` and have ``len(table)`` samples along ``axis``.
    table : DiscreteFilterTable
        Filter taps built for ``axis``.
    axis : Axis
        Axis being filtered.
    on_line : LineCallback, optional
        Invoked after each written line with ``table.op_count``. May raise
        to abandon the pass.

    Raises
    ------
    ValueError
        If the buffer sizes do not agree with ``table`` and ``axis``.
    """
    if axis is Axis.X:
        n_lines, src_len, dst_lines, dst_len = (
            source.height, source.width, dest.height, dest.width)
    else:
        n_lines, src_len, dst_lines, dst_len = (
            source.width, source.height, dest.width, dest.height)
    if dst_lines != n_lines:
        raise ValueError(
            f"{axis.value} pass must preserve the orthogonal axis: "
            f"source has {n_lines} lines, destination {dst_lines}"
        )
    if src_len != table.src_size or dst_len != table.dst_size:
        raise ValueError(
            f"{axis.value} pass expects {table.src_size} -> "
            f"{table.dst_size} samples, got {src_len} -> {dst_len}"
        )

    read = _line_reader(source, axis)
    dst_lines_view = _line_view(dest.pixels, axis)
    scratch = np.empty((src_len, CHANNELS), dtype=np.float32)
    ops = table.op_count

    for i in range(n_lines):
        read(i, scratch)
        quantize(accumulate_line(scratch, table), out=dst_lines_view[i])
        if on_line is not None:
            on_line(ops)
