# -*- coding: utf-8 -*-
"""
Engine - Filter tables, axis convolution, progress protocol, and orchestration.

- ``build_filter_table`` / ``DiscreteFilterTable``: per-axis taps.
- ``convolve_axis``: one separable pass, shared by both axes.
- ``Step`` / ``ResizeStream`` / ``ProgressTracker``: progress protocol.
- ``resize`` / ``resize_progressive`` / ``run_resize`` / ``plan_resize``:
  request orchestration and pass-order selection.

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

from sepresample.engine.convolver import accumulate_line, convolve_axis
from sepresample.engine.filter_table import (
    DiscreteFilterTable,
    axis_mapping,
    build_filter_table,
)
from sepresample.engine.progress import (
    DEFAULT_QUANTUM,
    ProgressTracker,
    ResizeStream,
    Step,
)
from sepresample.engine.resampler import (
    ResizePlan,
    plan_resize,
    resize,
    resize_progressive,
    run_resize,
)

__all__ = [
    'DiscreteFilterTable',
    'axis_mapping',
    'build_filter_table',
    'accumulate_line',
    'convolve_axis',
    'DEFAULT_QUANTUM',
    'ProgressTracker',
    'ResizeStream',
    'Step',
    'ResizePlan',
    'plan_resize',
    'resize',
    'resize_progressive',
    'run_resize',
]
