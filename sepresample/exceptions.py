# -*- coding: utf-8 -*-
"""
Resample Exception Hierarchy - Domain-specific exceptions for resizing.

Lets callers catch resampling errors distinctly from Python built-in
exceptions. Every concrete error subclasses both ``ResampleError`` and
the matching built-in exception so existing ``except ValueError``
handlers keep working.

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


class ResampleError(Exception):
    """Base exception for all sepresample errors."""


class ValidationError(ResampleError, ValueError):
    """Invalid input image, size, kernel, or boundary policy.

    Raised synchronously, before any background work is started.
    """


class SourceInvalidError(ValidationError):
    """Source image is missing, malformed, or the source region is bad."""


class TargetSizeInvalidError(ValidationError):
    """Target dimensions are negative or not integers."""


class FilterInvalidError(ValidationError):
    """Kernel has no callable ``apply`` or a non-positive support."""


class BoundaryInvalidError(ValidationError):
    """Boundary policy is missing or not callable."""


class ProcessorError(ResampleError, RuntimeError):
    """Unexpected failure while the convolution passes were running."""


class ResizeCancelled(ResampleError):
    """The consumer stopped reading the step stream.

    Used internally to unwind the worker; never delivered to callers.
    """
