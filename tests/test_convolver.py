# -*- coding: utf-8 -*-
"""
Tests for single-axis convolution passes.

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

from sepresample.boundary import CLAMP, REJECT
from sepresample.buffer import CHANNEL_MAX, ArraySource, PixelBuffer, PixelSource
from sepresample.engine.convolver import accumulate_line, convolve_axis
from sepresample.engine.filter_table import build_filter_table
from sepresample.kernels import BOX, CATMULL_ROM, LANCZOS3
from sepresample.vocabulary import Axis


def _pairs_buffer():
    """2 x 4 buffer whose rows step in pairs of equal pixels."""
    pixels = np.zeros((2, 4, 4), dtype=np.uint16)
    pixels[:, 0:2] = 1000
    pixels[:, 2:4] = 3000
    pixels[1, 0] = 2000
    return PixelBuffer(pixels)


class TestAccumulateLine:
    """Per-line multiply-accumulate."""

    def test_averages(self):
        table = build_filter_table(BOX, REJECT, 2, 4)
        line = np.array([[0.2] * 4, [0.4] * 4, [0.6] * 4, [1.0] * 4],
                        dtype=np.float32)
        out = accumulate_line(line, table)
        assert out.dtype == np.float32
        np.testing.assert_allclose(out, [[0.3] * 4, [0.8] * 4], rtol=1e-6)

    def test_overshoot_kept_until_quantized(self):
        table = build_filter_table(CATMULL_ROM, CLAMP, 20, 6)
        line = np.zeros((6, 4), dtype=np.float32)
        line[3:] = 1.0
        out = accumulate_line(line, table)
        assert out.max() > 1.0
        assert out.min() < 0.0


class TestConvolveAxis:
    """Full passes over a buffer."""

    def test_x_pass(self):
        src = _pairs_buffer()
        table = build_filter_table(BOX, REJECT, 2, 4)
        dest = PixelBuffer.new(2, 2)
        convolve_axis(src, dest, table, Axis.X)
        np.testing.assert_array_equal(dest.pixels[0, :, 0], [1000, 3000])
        np.testing.assert_array_equal(dest.pixels[1, :, 0], [1500, 3000])

    def test_y_pass_matches_transposed_x_pass(self, random_buffer):
        table = build_filter_table(LANCZOS3, REJECT, 9, 17)
        dest_y = PixelBuffer.new(23, 9)
        convolve_axis(random_buffer, dest_y, table, Axis.Y)

        transposed = PixelBuffer(
            np.ascontiguousarray(random_buffer.pixels.swapaxes(0, 1)))
        dest_x = PixelBuffer.new(9, 23)
        convolve_axis(transposed, dest_x, table, Axis.X)
        np.testing.assert_array_equal(dest_y.pixels,
                                      dest_x.pixels.swapaxes(0, 1))

    def test_identity_table(self, random_buffer):
        table = build_filter_table(LANCZOS3, REJECT, 23, 23)
        dest = PixelBuffer.new(23, 17)
        convolve_axis(random_buffer, dest, table, Axis.X)
        assert dest == random_buffer

    def test_generic_source_matches_buffer(self, random_buffer):
        table = build_filter_table(CATMULL_ROM, CLAMP, 40, 17)
        fast = PixelBuffer.new(23, 40)
        slow = PixelBuffer.new(23, 40)
        convolve_axis(random_buffer, fast, table, Axis.Y)
        convolve_axis(ArraySource(random_buffer.pixels), slow, table, Axis.Y)
        assert fast == slow

    def test_row_source_y_pass_reads_each_row_once(self, random_buffer):
        reads = []

        class RowSource(PixelSource):
            width = random_buffer.width
            height = random_buffer.height

            def read_row(self, y):
                reads.append(y)
                return random_buffer.read_row(y)

        table = build_filter_table(LANCZOS3, REJECT, 9, 17)
        slow = PixelBuffer.new(23, 9)
        fast = PixelBuffer.new(23, 9)
        convolve_axis(RowSource(), slow, table, Axis.Y)
        convolve_axis(random_buffer, fast, table, Axis.Y)
        assert slow == fast
        assert sorted(reads) == list(range(17))

    def test_saturates_instead_of_wrapping(self):
        pixels = np.zeros((1, 6, 4), dtype=np.uint16)
        pixels[:, 3:] = CHANNEL_MAX
        table = build_filter_table(CATMULL_ROM, CLAMP, 20, 6)
        dest = PixelBuffer.new(20, 1)
        convolve_axis(PixelBuffer(pixels), dest, table, Axis.X)
        acc = accumulate_line(PixelBuffer(pixels).read_row(0), table)[:, 0]
        row = dest.pixels[0, :, 0]
        np.testing.assert_array_equal(row[acc >= 1.0], CHANNEL_MAX)
        np.testing.assert_array_equal(row[acc <= 0.0], 0)

    def test_line_callback(self, random_buffer):
        table = build_filter_table(BOX, REJECT, 5, 23)
        calls = []
        convolve_axis(random_buffer, PixelBuffer.new(5, 17), table, Axis.X,
                      on_line=calls.append)
        assert calls == [table.op_count] * 17

    def test_callback_can_abort(self, random_buffer):
        table = build_filter_table(BOX, REJECT, 5, 23)

        def stop(ops):
            raise RuntimeError("stop")

        with pytest.raises(RuntimeError, match="stop"):
            convolve_axis(random_buffer, PixelBuffer.new(5, 17), table,
                          Axis.X, on_line=stop)

    def test_orthogonal_mismatch(self, random_buffer):
        table = build_filter_table(BOX, REJECT, 5, 23)
        with pytest.raises(ValueError, match="orthogonal"):
            convolve_axis(random_buffer, PixelBuffer.new(5, 16), table, Axis.X)

    def test_table_mismatch(self, random_buffer):
        table = build_filter_table(BOX, REJECT, 5, 22)
        with pytest.raises(ValueError, match="expects"):
            convolve_axis(random_buffer, PixelBuffer.new(5, 17), table, Axis.X)
