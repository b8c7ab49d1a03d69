# -*- coding: utf-8 -*-
"""
Kernels - Continuous filter kernels and their named presets.

Presets are immutable module-level instances built once at import:

- ``BOX``, ``TRIANGLE``
- ``LANCZOS3``, ``LANCZOS5``, ``LANCZOS12``
- ``MITCHELL``, ``CATMULL_ROM``, ``BSPLINE``

``get_kernel(name)`` looks a preset up by (case-insensitive) name.

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
from types import MappingProxyType
from typing import Mapping, Union

# sepresample internal
from sepresample.exceptions import FilterInvalidError
from sepresample.kernels.base import (
    NOISE_CUTOFF,
    FilterKernel,
    FunctionKernel,
    cut_noise,
    sinc,
)
from sepresample.kernels.basic import BoxKernel, TriangleKernel
from sepresample.kernels.cubic import MitchellNetravaliKernel
from sepresample.kernels.lanczos import LanczosKernel
from sepresample.vocabulary import KernelName

BOX = BoxKernel()
TRIANGLE = TriangleKernel()
LANCZOS3 = LanczosKernel(3)
LANCZOS5 = LanczosKernel(5)
LANCZOS12 = LanczosKernel(12)
MITCHELL = MitchellNetravaliKernel(1.0 / 1.3, 1.0 / 1.3, name='mitchell')
CATMULL_ROM = MitchellNetravaliKernel(0.0, 0.5, name='catmullrom')
BSPLINE = MitchellNetravaliKernel(1.0, 0.0, name='bspline')

#: Read-only registry of preset kernels keyed by ``KernelName`` value.
KERNELS: Mapping[str, FilterKernel] = MappingProxyType({
    KernelName.BOX.value: BOX,
    KernelName.TRIANGLE.value: TRIANGLE,
    KernelName.LANCZOS3.value: LANCZOS3,
    KernelName.LANCZOS5.value: LANCZOS5,
    KernelName.LANCZOS12.value: LANCZOS12,
    KernelName.MITCHELL.value: MITCHELL,
    KernelName.CATMULL_ROM.value: CATMULL_ROM,
    KernelName.BSPLINE.value: BSPLINE,
})


def get_kernel(name: Union[str, KernelName]) -> FilterKernel:
    """Look up a preset kernel by name.

    Parameters
    ----------
    name : str or KernelName
        Preset name, e.g. ``'lanczos3'``. Case-insensitive; ``'-'`` and
        ``'_'`` are ignored, so ``'Catmull-Rom'`` works.

    Returns
    -------
    FilterKernel
        The shared preset instance.

    Raises
    ------
    FilterInvalidError
        If no preset has that name.
    """
    if isinstance(name, KernelName):
        key = name.value
    else:
        key = str(name).lower().replace('-', '').replace('_', '')
    try:
        return KERNELS[key]
    except KeyError:
        raise FilterInvalidError(
            f"unknown kernel {name!r}; expected one of {sorted(KERNELS)}"
        ) from None


__all__ = [
    'NOISE_CUTOFF',
    'FilterKernel',
    'FunctionKernel',
    'BoxKernel',
    'TriangleKernel',
    'LanczosKernel',
    'MitchellNetravaliKernel',
    'sinc',
    'cut_noise',
    'BOX',
    'TRIANGLE',
    'LANCZOS3',
    'LANCZOS5',
    'LANCZOS12',
    'MITCHELL',
    'CATMULL_ROM',
    'BSPLINE',
    'KERNELS',
    'get_kernel',
]
