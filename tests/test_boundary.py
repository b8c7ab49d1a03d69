# -*- coding: utf-8 -*-
"""
Tests for boundary policies.

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

from sepresample.boundary import (
    BOUNDARIES,
    CLAMP,
    REFLECT,
    REJECT,
    get_boundary,
    rejected,
)
from sepresample.exceptions import BoundaryInvalidError


def _is_rejected(value, lo=0, hi=9):
    return value < lo or value > hi


class TestClamp:
    """Saturating policy."""

    @pytest.mark.parametrize('index, expected', [
        (-3, 0), (0, 0), (4, 4), (9, 9), (15, 9),
    ])
    def test_scalar(self, index, expected):
        assert CLAMP(index, 0, 9) == expected

    def test_array(self):
        out = CLAMP(np.array([-1, 3, 10]), 0, 9)
        np.testing.assert_array_equal(out, [0, 3, 9])

    def test_scalar_returns_int(self):
        assert isinstance(CLAMP(3, 0, 9), int)


class TestReject:
    """Dropping policy."""

    def test_in_range_unchanged(self):
        for i in range(10):
            assert REJECT(i, 0, 9) == i

    @pytest.mark.parametrize('index', [-1, -20, 10, 100])
    def test_out_of_range_rejected(self, index):
        assert _is_rejected(REJECT(index, 0, 9))

    def test_sentinel(self):
        assert REJECT(-5, 2, 9) == rejected(2)
        assert rejected(2) == 1


class TestReflect:
    """Mirroring policy."""

    @pytest.mark.parametrize('index, expected', [
        (-1, 1), (-3, 3), (10, 8), (12, 6), (5, 5),
    ])
    def test_scalar(self, index, expected):
        assert REFLECT(index, 0, 9) == expected

    def test_nonzero_lower_bound(self):
        assert REFLECT(1, 3, 9) == 5

    def test_far_out_of_range_rejected(self):
        assert _is_rejected(REFLECT(-30, 0, 9))
        assert _is_rejected(REFLECT(40, 0, 9))

    def test_array(self):
        out = REFLECT(np.array([-2, 0, 11]), 0, 9)
        np.testing.assert_array_equal(out, [2, 0, 7])


class TestPresets:
    """Registry and immutability."""

    def test_registry(self):
        assert BOUNDARIES == {'clamp': CLAMP, 'reject': REJECT,
                              'reflect': REFLECT}

    @pytest.mark.parametrize('name, policy', [
        ('clamp', CLAMP), ('REJECT', REJECT), ('Reflect', REFLECT),
    ])
    def test_lookup(self, name, policy):
        assert get_boundary(name) is policy

    def test_unknown(self):
        with pytest.raises(BoundaryInvalidError, match="unknown boundary"):
            get_boundary('wrap')

    def test_immutable(self):
        with pytest.raises(AttributeError):
            CLAMP._name = 'other'

    def test_names(self):
        assert [p.name for p in (CLAMP, REJECT, REFLECT)] == [
            'clamp', 'reject', 'reflect']
