# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

``ImageProcessor`` gives every processor two cross-cutting capabilities:

**Version checking**: concrete subclasses without ``@processor_version``
trigger a ``UserWarning`` at first instantiation. The check runs in
``__new__`` so class decorators have already been applied.

**Tunable parameters**: ``typing.Annotated`` class fields carrying
``Range``/``Options``/``Desc`` markers are collected into
``__param_specs__`` by ``__init_subclass__``, which also generates a
validating keyword-only ``__init__`` unless the subclass defines one.
``_resolve_params(kwargs)`` merges instance values with per-call
overrides.

``ImageTransform`` adds the abstract ``apply(source, **kwargs)``.

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
import logging
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

# Third-party
import numpy as np

# sepresample internal
from sepresample.processing.params import ParamSpec, collect_param_specs, make_init

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """Common base class for image processors."""

    # Classes already checked for a version stamp.
    _version_warned_classes: set = set()

    #: Built by ``__init_subclass__`` from ``Annotated`` fields.
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)
        if cls.__param_specs__ and '__init__' not in cls.__dict__:
            cls.__init__ = make_init(cls.__param_specs__)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (not getattr(cls, '__processor_version__', None)
                    and not getattr(cls, '__abstractmethods__', None)):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance values with ``kwargs`` overrides and validate.

        Keys in ``kwargs`` that are not declared parameters (for example
        ``progress_callback``) are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{name: value}`` for every declared parameter.

        Raises
        ------
        TypeError, ValueError
            If a resolved value violates its spec.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs[spec.name] if spec.name in kwargs else getattr(self, spec.name)
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def _report_progress(self, kwargs: Dict[str, Any], fraction: float) -> None:
        """Forward ``fraction`` (0.0 to 1.0) to ``kwargs['progress_callback']``, if any."""
        cb = kwargs.get('progress_callback')
        if cb is not None:
            cb(float(fraction))


class ImageTransform(ImageProcessor):
    """Abstract base class for transforms mapping one image array to another."""

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to ``source`` and return the result."""
        ...
