# -*- coding: utf-8 -*-
"""
Processor Versioning - Version stamp decorator for image processors.

``@processor_version('x.y.z')`` sets ``__processor_version__`` on a
processor class. The version identifies both the algorithm and the
output it produces, so downstream caches can tell results apart.

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
import importlib.metadata
from typing import Callable, Optional, Type, TypeVar

T = TypeVar('T')


def processor_version(version: Optional[str] = None) -> Callable[[Type[T]], Type[T]]:
    """Class decorator stamping ``__processor_version__``.

    Parameters
    ----------
    version : str, optional
        Semantic version string. When omitted, the installed
        ``sepresample`` distribution version is used (``'unknown'`` if
        the package is not installed).

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('sepresample')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = 'unknown'
        return cls
    return decorator
