# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for sepresample.

Single source of truth for the controlled values used across the
engine, the processor facade, and the tests.

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

from enum import Enum


class Axis(Enum):
    """Image axis filtered by one convolution pass."""

    X = "x"
    Y = "y"


class PassOrder(Enum):
    """Order in which the two 1-D passes are applied."""

    Y_THEN_X = "y_then_x"
    X_THEN_Y = "x_then_y"

    @property
    def axes(self):
        """The ``(first, second)`` axes filtered by this order."""
        if self is PassOrder.Y_THEN_X:
            return (Axis.Y, Axis.X)
        return (Axis.X, Axis.Y)


class StepKind(Enum):
    """Kind of a progress step."""

    CONTINUING = "continuing"
    DONE = "done"
    FAILED = "failed"


class KernelName(Enum):
    """Names of the built-in filter kernel presets."""

    BOX = "box"
    TRIANGLE = "triangle"
    LANCZOS3 = "lanczos3"
    LANCZOS5 = "lanczos5"
    LANCZOS12 = "lanczos12"
    MITCHELL = "mitchell"
    CATMULL_ROM = "catmullrom"
    BSPLINE = "bspline"


class BoundaryName(Enum):
    """Names of the built-in boundary policy presets."""

    CLAMP = "clamp"
    REJECT = "reject"
    REFLECT = "reflect"
