# -*- coding: utf-8 -*-
"""
Tests for discrete filter table construction.

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

import math

import numpy as np
import pytest

from sepresample.boundary import CLAMP, REFLECT, REJECT
from sepresample.engine.filter_table import (
    DiscreteFilterTable,
    axis_mapping,
    build_filter_table,
)
from sepresample.kernels import (
    BOX,
    CATMULL_ROM,
    LANCZOS3,
    LANCZOS12,
    MITCHELL,
    TRIANGLE,
    FunctionKernel,
)


def _entry_sum(entry):
    return sum(w for _, w in entry)


class _DuckKernel:
    """Kernel-shaped object that is not a FilterKernel."""

    support = 1.0
    name = 'duck'

    def apply(self, x):
        return max(0.0, 1.0 - abs(x))


class TestAxisMapping:
    """Destination-to-source coordinate mapping."""

    def test_endpoints_align(self):
        dst2src, centers = axis_mapping(5, 9)
        assert dst2src == pytest.approx(0.5)
        np.testing.assert_allclose(centers, [0, 2, 4, 6, 8])

    def test_single_destination(self):
        dst2src, centers = axis_mapping(1, 8)
        assert dst2src == pytest.approx(1 / 8)
        np.testing.assert_allclose(centers, [3.5])

    def test_single_source(self):
        dst2src, centers = axis_mapping(4, 1)
        assert math.isinf(dst2src)
        np.testing.assert_array_equal(centers, 0.0)


class TestIdentity:
    """Same-size tables reduce to single unit taps."""

    @pytest.mark.parametrize('kernel', [LANCZOS3, TRIANGLE, CATMULL_ROM, BOX])
    @pytest.mark.parametrize('boundary', [CLAMP, REJECT, REFLECT])
    def test_unit_taps(self, kernel, boundary):
        table = build_filter_table(kernel, boundary, 12, 12)
        assert list(table) == [[(i, 1.0)] for i in range(12)]
        assert table.op_count == 12


class TestUpsample:
    """Interpolating tables."""

    def test_triangle_midpoint(self):
        table = build_filter_table(TRIANGLE, REJECT, 3, 2)
        assert table.entry(0) == [(0, 1.0)]
        assert table.entry(1) == [(0, 0.5), (1, 0.5)]
        assert table.entry(2) == [(1, 1.0)]
        assert table.op_count == 4

    def test_single_source_sample(self):
        table = build_filter_table(LANCZOS3, CLAMP, 6, 1)
        assert list(table) == [[(0, 1.0)]] * 6


class TestDownsample:
    """Decimating tables widen and rescale the kernel."""

    def test_box_reject_pairs(self):
        table = build_filter_table(BOX, REJECT, 2, 4)
        assert table.entry(0) == [(0, 0.5), (1, 0.5)]
        assert table.entry(1) == [(2, 0.5), (3, 0.5)]

    def test_box_clamp_repeats_edge(self):
        table = build_filter_table(BOX, CLAMP, 2, 4)
        entry = table.entry(0)
        assert [k for k, _ in entry] == [0, 0, 1]
        np.testing.assert_allclose([w for _, w in entry], [1 / 3] * 3,
                                   rtol=1e-6)

    def test_single_destination_averages(self):
        table = build_filter_table(BOX, REJECT, 1, 5)
        entry = table.entry(0)
        assert [k for k, _ in entry] == [0, 1, 2, 3, 4]
        np.testing.assert_allclose([w for _, w in entry], [0.2] * 5,
                                   rtol=1e-6)

    def test_support_widens(self):
        narrow = build_filter_table(LANCZOS3, CLAMP, 50, 50)
        wide = build_filter_table(LANCZOS3, CLAMP, 10, 100)
        assert wide.taps > narrow.taps


class TestInvariants:
    """Properties every table satisfies."""

    @pytest.mark.parametrize('kernel', [BOX, TRIANGLE, LANCZOS3, LANCZOS12,
                                        MITCHELL, CATMULL_ROM])
    @pytest.mark.parametrize('boundary', [CLAMP, REJECT, REFLECT])
    @pytest.mark.parametrize('ndst, nsrc', [(1, 1), (7, 3), (3, 7), (64, 17),
                                            (17, 64), (2, 200)])
    def test_normalized_and_in_range(self, kernel, boundary, ndst, nsrc):
        table = build_filter_table(kernel, boundary, ndst, nsrc)
        assert len(table) == ndst
        assert table.src_size == nsrc
        total = 0
        for entry in table:
            assert entry
            assert _entry_sum(entry) == pytest.approx(1.0, abs=1e-5)
            assert all(0 <= k < nsrc for k, _ in entry)
            assert all(w != 0.0 for _, w in entry)
            total += len(entry)
        assert table.op_count == total

    def test_storage(self):
        table = build_filter_table(LANCZOS3, REJECT, 9, 20)
        assert table.indices.dtype == np.intp
        assert table.weights.dtype == np.float32
        assert table.indices.shape == table.weights.shape == (9, table.taps)
        assert table.taps == int(table.counts.max())

    def test_candidate_order_ascending(self):
        table = build_filter_table(LANCZOS3, REJECT, 5, 30)
        for entry in table:
            indices = [k for k, _ in entry]
            assert indices == sorted(indices)


class TestEdgeCases:
    """Empty, degenerate and custom inputs."""

    def test_zero_destination(self):
        table = build_filter_table(LANCZOS3, REJECT, 0, 10)
        assert len(table) == 0
        assert table.op_count == 0
        assert list(table) == []

    @pytest.mark.parametrize('ndst, nsrc', [(3, 0), (-1, 3)])
    def test_invalid_lengths(self, ndst, nsrc):
        with pytest.raises(ValueError, match="must be >="):
            build_filter_table(LANCZOS3, REJECT, ndst, nsrc)

    def test_zero_kernel_leaves_entries_empty(self):
        zero = FunctionKernel(lambda x: 0.0, support=1.0)
        table = build_filter_table(zero, CLAMP, 4, 4)
        assert list(table) == [[]] * 4
        assert table.op_count == 0

    def test_cancelling_weights_leave_entry_empty(self):
        # Odd kernel: symmetric taps around an integer center sum to zero.
        odd = FunctionKernel(lambda x: x, support=1.5)
        table = build_filter_table(odd, REJECT, 5, 5)
        assert table.entry(2) == []
        assert table.counts[2] == 0

    def test_custom_scalar_boundary(self):
        def reject_or_none(j, lo, hi):
            return j if lo <= j <= hi else None

        custom = build_filter_table(LANCZOS3, reject_or_none, 4, 11)
        builtin = build_filter_table(LANCZOS3, REJECT, 4, 11)
        np.testing.assert_array_equal(custom.indices, builtin.indices)
        np.testing.assert_allclose(custom.weights, builtin.weights)

    def test_duck_typed_kernel(self):
        duck = build_filter_table(_DuckKernel(), REJECT, 3, 2)
        tri = build_filter_table(TRIANGLE, REJECT, 3, 2)
        assert list(duck) == list(tri)

    def test_repr(self):
        table = build_filter_table(BOX, REJECT, 2, 4)
        assert isinstance(table, DiscreteFilterTable)
        assert 'op_count=4' in repr(table)
