# -*- coding: utf-8 -*-
"""
Boundary Policies - Map out-of-range source indices into range or reject them.

A boundary policy is a callable ``(index, lo, hi) -> index`` applied to
candidate source indices while a filter table is built. Indices returned
outside ``[lo, hi]`` are treated as rejected and their contribution is
dropped; the table's per-destination renormalization compensates, so a
uniform image stays uniform at the edges (drop-and-renormalize).

Three presets are provided, all immutable and shared:

- ``CLAMP`` saturates into range (edge pixels extend outward).
- ``REJECT`` drops every out-of-range sample.
- ``REFLECT`` mirrors across the nearest edge: ``2*lo - x`` below,
  ``2*hi - x`` above. A reflection that is still out of range (support
  wider than the image) is rejected.

All policies accept Python ints or integer numpy arrays.

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
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping, Union

# Third-party
import numpy as np

# sepresample internal
from sepresample.exceptions import BoundaryInvalidError
from sepresample.vocabulary import BoundaryName

IndexLike = Union[int, np.ndarray]


def rejected(lo: int) -> int:
    """Sentinel index meaning "drop this sample" for the range ``[lo, hi]``."""
    return lo - 1


class BoundaryPolicy(ABC):
    """Abstract base class for boundary policies.

    Subclasses implement :meth:`_map` on integer arrays. Calling a policy
    with a scalar returns a Python ``int``.

    Parameters
    ----------
    name : str
        Policy name used in logs and ``repr``.
    """

    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        object.__setattr__(self, '_name', name)

    @property
    def name(self) -> str:
        """Policy name."""
        return self._name

    @abstractmethod
    def _map(self, index: np.ndarray, lo: int, hi: int) -> np.ndarray:
        ...

    def __call__(self, index: IndexLike, lo: int, hi: int) -> IndexLike:
        """Map ``index`` into ``[lo, hi]`` or to a rejection sentinel.

        Parameters
        ----------
        index : int or np.ndarray
            Candidate source index (or indices).
        lo : int
            Smallest valid index.
        hi : int
            Largest valid index.

        Returns
        -------
        int or np.ndarray
            Mapped index; values outside ``[lo, hi]`` mean rejected.
        """
        arr = np.asarray(index, dtype=np.intp)
        out = self._map(arr, lo, hi)
        if arr.ndim == 0:
            return int(out)
        return out

    def __setattr__(self, name, value):
        raise AttributeError(
            f"{type(self).__name__} is immutable; cannot set {name!r}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ClampPolicy(BoundaryPolicy):
    """Saturate indices to the nearest edge."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(BoundaryName.CLAMP.value)

    def _map(self, index: np.ndarray, lo: int, hi: int) -> np.ndarray:
        return np.clip(index, lo, hi)


class RejectPolicy(BoundaryPolicy):
    """Reject every out-of-range index."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(BoundaryName.REJECT.value)

    def _map(self, index: np.ndarray, lo: int, hi: int) -> np.ndarray:
        inside = (index >= lo) & (index <= hi)
        return np.where(inside, index, rejected(lo))


class ReflectPolicy(BoundaryPolicy):
    """Mirror out-of-range indices across the nearest edge."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(BoundaryName.REFLECT.value)

    def _map(self, index: np.ndarray, lo: int, hi: int) -> np.ndarray:
        mirrored = np.where(index < lo, 2 * lo - index,
                            np.where(index > hi, 2 * hi - index, index))
        inside = (mirrored >= lo) & (mirrored <= hi)
        return np.where(inside, mirrored, rejected(lo))


CLAMP = ClampPolicy()
REJECT = RejectPolicy()
REFLECT = ReflectPolicy()

#: Read-only registry of preset policies keyed by ``BoundaryName`` value.
BOUNDARIES: Mapping[str, BoundaryPolicy] = MappingProxyType({
    BoundaryName.CLAMP.value: CLAMP,
    BoundaryName.REJECT.value: REJECT,
    BoundaryName.REFLECT.value: REFLECT,
})


def get_boundary(name: Union[str, BoundaryName]) -> BoundaryPolicy:
    """Look up a preset boundary policy by (case-insensitive) name.

    Raises
    ------
    BoundaryInvalidError
        If no preset has that name.
    """
    key = name.value if isinstance(name, BoundaryName) else str(name).lower()
    try:
        return BOUNDARIES[key]
    except KeyError:
        raise BoundaryInvalidError(
            f"unknown boundary policy {name!r}; "
            f"expected one of {sorted(BOUNDARIES)}"
        ) from None
