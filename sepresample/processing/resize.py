# -*- coding: utf-8 -*-
"""
Resize Transform - Configurable resize as an ``ImageTransform``.

Wraps the resampling engine in the tunable-parameter processor
interface: target size, kernel and boundary policies are declared
``Annotated`` fields, may be overridden per call through ``**kwargs``,
and progress is forwarded to a ``progress_callback`` as a fraction.

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
from typing import Annotated, Any, Dict

# Third-party
import numpy as np

# sepresample internal
from sepresample.engine.progress import DEFAULT_QUANTUM, Step
from sepresample.engine.resampler import run_resize
from sepresample.processing.base import ImageTransform
from sepresample.processing.params import Desc, Options, Range
from sepresample.processing.versioning import processor_version
from sepresample.vocabulary import BoundaryName, KernelName

_KERNEL_CHOICES = tuple(k.value for k in KernelName)
_BOUNDARY_CHOICES = tuple(b.value for b in BoundaryName)


@processor_version('1.0.0')
class Resize(ImageTransform):
    """Resize an RGBA, RGB or grayscale image array.

    Parameters
    ----------
    width : int
        Target width in pixels, >= 0.
    height : int
        Target height in pixels, >= 0.
    kernel : str
        Kernel preset name. Default ``'lanczos3'``.
    x_boundary : str
        Horizontal boundary policy name. Default ``'reject'``.
    y_boundary : str
        Vertical boundary policy name. Default ``'reject'``.
    progress_quantum : int
        Accumulation operations between progress reports. Default 200000.

    Examples
    --------
    >>> from sepresample.processing import Resize
    >>> half = Resize(width=320, height=240, kernel='catmullrom')
    >>> out = half.apply(image)                  # uint16 (240, 320, 4)
    >>> thumb = half.apply(image, width=64, height=48)
    """

    width: Annotated[int, Range(min=0), Desc('Target width in pixels')] = 0
    height: Annotated[int, Range(min=0), Desc('Target height in pixels')] = 0
    kernel: Annotated[str, Options(*_KERNEL_CHOICES),
                      Desc('Filter kernel preset')] = KernelName.LANCZOS3.value
    x_boundary: Annotated[str, Options(*_BOUNDARY_CHOICES),
                          Desc('Horizontal boundary policy')] = BoundaryName.REJECT.value
    y_boundary: Annotated[str, Options(*_BOUNDARY_CHOICES),
                          Desc('Vertical boundary policy')] = BoundaryName.REJECT.value
    progress_quantum: Annotated[int, Range(min=1),
                                Desc('Operations between progress reports')] = DEFAULT_QUANTUM

    def apply(self, source: Any, **kwargs: Any) -> np.ndarray:
        """Resize ``source``.

        Parameters
        ----------
        source : np.ndarray or PixelSource
            Image accepted by :class:`~sepresample.buffer.ArraySource`,
            or any ``PixelSource``.
        **kwargs
            Per-call overrides of any declared parameter, plus an optional
            ``progress_callback(fraction)`` and ``source_region``.

        Returns
        -------
        np.ndarray
            ``uint16`` RGBA array of shape ``(height, width, 4)``.
        """
        params: Dict[str, Any] = self._resolve_params(kwargs)

        def forward(step: Step) -> None:
            self._report_progress(kwargs, step.percent / 100.0)

        result = run_resize(
            (params['width'], params['height']),
            source,
            params['kernel'],
            params['x_boundary'],
            params['y_boundary'],
            source_region=kwargs.get('source_region'),
            progress_quantum=params['progress_quantum'],
            progress_callback=forward,
        )
        return result.pixels
