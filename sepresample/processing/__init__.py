# -*- coding: utf-8 -*-
"""
Processing - Processor interface, tunable parameters, and the Resize transform.

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

from sepresample.processing.base import ImageProcessor, ImageTransform
from sepresample.processing.params import (
    Desc,
    Options,
    ParamMeta,
    ParamSpec,
    Range,
    collect_param_specs,
)
from sepresample.processing.resize import Resize
from sepresample.processing.versioning import processor_version

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'Desc',
    'Options',
    'ParamMeta',
    'ParamSpec',
    'Range',
    'collect_param_specs',
    'processor_version',
    'Resize',
]
