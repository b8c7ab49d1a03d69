# -*- coding: utf-8 -*-
"""
Request Validation Helpers - Shared checks for resize requests.

Every public entry point runs these before any filter table is built or
any worker is started, so invalid requests fail synchronously with one
of the four ``ValidationError`` kinds.

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
import numbers
from typing import Any, Optional, Sequence, Tuple

# sepresample internal
from sepresample.boundary import get_boundary
from sepresample.buffer import PixelSource, as_source, crop
from sepresample.exceptions import (
    BoundaryInvalidError,
    FilterInvalidError,
    SourceInvalidError,
    TargetSizeInvalidError,
)
from sepresample.kernels import get_kernel
from sepresample.vocabulary import BoundaryName, KernelName


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_source(
    source: Any,
    region: Optional[Sequence[int]] = None,
) -> PixelSource:
    """Coerce ``source`` to a ``PixelSource`` and apply ``region``.

    Parameters
    ----------
    source : PixelSource or np.ndarray
        Image to resample.
    region : Sequence[int], optional
        Half-open ``(x0, y0, x1, y1)`` rectangle inside ``source``.

    Returns
    -------
    PixelSource
        The (possibly cropped) source.

    Raises
    ------
    SourceInvalidError
        If ``source`` is ``None``, of an unsupported type, or ``region``
        is malformed or out of bounds.
    """
    src = as_source(source)
    if region is None:
        return src
    try:
        values = tuple(region)
    except TypeError:
        values = ()
    if len(values) != 4 or not all(_is_int(v) for v in values):
        raise SourceInvalidError(
            f"source_region must be four integers (x0, y0, x1, y1), got {region!r}"
        )
    x0, y0, x1, y1 = (int(v) for v in values)
    if not (0 <= x0 <= x1 <= src.width and 0 <= y0 <= y1 <= src.height):
        raise SourceInvalidError(
            f"source_region {region!r} is not inside the "
            f"{src.width}x{src.height} source"
        )
    return crop(src, (x0, y0, x1, y1))


def validate_target_size(size: Any) -> Tuple[int, int]:
    """Validate a ``(width, height)`` target size.

    Zero is allowed in either dimension.

    Raises
    ------
    TargetSizeInvalidError
        If ``size`` is not a pair of non-negative integers.
    """
    try:
        width, height = size
    except (TypeError, ValueError):
        raise TargetSizeInvalidError(
            f"target size must be a (width, height) pair, got {size!r}"
        ) from None
    if not (_is_int(width) and _is_int(height)):
        raise TargetSizeInvalidError(
            f"target size must be integers, got {size!r}"
        )
    if width < 0 or height < 0:
        raise TargetSizeInvalidError(
            f"target size must be >= 0, got {size!r}"
        )
    return int(width), int(height)


def validate_kernel(kernel: Any) -> Any:
    """Resolve and validate a filter kernel.

    Parameters
    ----------
    kernel : FilterKernel, str or KernelName
        Kernel object (anything with a callable ``apply`` and a numeric
        ``support``) or preset name.

    Raises
    ------
    FilterInvalidError
        If the kernel is missing, has no callable ``apply``, or its
        support is not finite and positive.
    """
    if isinstance(kernel, (str, KernelName)):
        return get_kernel(kernel)
    if kernel is None:
        raise FilterInvalidError("kernel is None")
    if not callable(getattr(kernel, 'apply', None)):
        raise FilterInvalidError(
            f"kernel {kernel!r} has no callable apply()"
        )
    support = getattr(kernel, 'support', None)
    if (not isinstance(support, numbers.Real) or isinstance(support, bool)
            or not math.isfinite(support) or support <= 0):
        raise FilterInvalidError(
            f"kernel support must be finite and > 0, got {support!r}"
        )
    return kernel


def validate_boundary(boundary: Any, name: str = 'boundary') -> Any:
    """Resolve and validate a boundary policy.

    Parameters
    ----------
    boundary : BoundaryPolicy, callable, str or BoundaryName
        Policy object, ``(index, lo, hi) -> index`` callable, or preset
        name.
    name : str
        Parameter name for error messages.

    Raises
    ------
    BoundaryInvalidError
        If the policy is missing or not callable.
    """
    if isinstance(boundary, (str, BoundaryName)):
        return get_boundary(boundary)
    if boundary is None:
        raise BoundaryInvalidError(f"{name} is None")
    if not callable(boundary):
        raise BoundaryInvalidError(
            f"{name} must be callable, got {type(boundary).__name__}"
        )
    return boundary
