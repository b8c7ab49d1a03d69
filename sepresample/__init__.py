# -*- coding: utf-8 -*-
"""
sepresample - Separable image resampling with progressive, cancellable execution.

Resizes RGBA pixel grids by two 1-D convolution passes with a
configurable continuous kernel and per-axis boundary policy. Each axis
gets a precomputed discrete filter table, the cheaper pass order is
chosen from the tables' operation counts, and long requests report
progress through a step stream that the caller can abandon at any time.

Dependencies
------------
numpy

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

__version__ = "0.1.0"

from sepresample.exceptions import (
    ResampleError,
    ValidationError,
    SourceInvalidError,
    TargetSizeInvalidError,
    FilterInvalidError,
    BoundaryInvalidError,
    ProcessorError,
    ResizeCancelled,
)
from sepresample.vocabulary import (
    Axis,
    PassOrder,
    StepKind,
    KernelName,
    BoundaryName,
)
from sepresample.kernels import (
    FilterKernel,
    FunctionKernel,
    BOX,
    TRIANGLE,
    LANCZOS3,
    LANCZOS5,
    LANCZOS12,
    MITCHELL,
    CATMULL_ROM,
    BSPLINE,
    get_kernel,
)
from sepresample.boundary import (
    BoundaryPolicy,
    CLAMP,
    REJECT,
    REFLECT,
    get_boundary,
)
from sepresample.buffer import ArraySource, PixelBuffer, PixelSource
from sepresample.engine import (
    ResizePlan,
    ResizeStream,
    Step,
    plan_resize,
    resize,
    resize_progressive,
    run_resize,
)

__all__ = [
    'ResampleError',
    'ValidationError',
    'SourceInvalidError',
    'TargetSizeInvalidError',
    'FilterInvalidError',
    'BoundaryInvalidError',
    'ProcessorError',
    'ResizeCancelled',
    'Axis',
    'PassOrder',
    'StepKind',
    'KernelName',
    'BoundaryName',
    'FilterKernel',
    'FunctionKernel',
    'BOX',
    'TRIANGLE',
    'LANCZOS3',
    'LANCZOS5',
    'LANCZOS12',
    'MITCHELL',
    'CATMULL_ROM',
    'BSPLINE',
    'get_kernel',
    'BoundaryPolicy',
    'CLAMP',
    'REJECT',
    'REFLECT',
    'get_boundary',
    'ArraySource',
    'PixelBuffer',
    'PixelSource',
    'ResizePlan',
    'ResizeStream',
    'Step',
    'plan_resize',
    'resize',
    'resize_progressive',
    'run_resize',
]
