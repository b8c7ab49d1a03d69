# -*- coding: utf-8 -*-
"""
Pixel Buffers - Packed 16-bit RGBA storage and the pixel-source contract.

``PixelBuffer`` is the canonical storage for resampled images: a
``uint16`` array of shape ``(height, width, 4)`` holding
non-premultiplied RGBA. ``PixelSource`` is the read-only contract the
engine consumes; ``PixelBuffer`` implements it directly (and is taken on
a fast path by the convolver), ``ArraySource`` adapts ordinary numpy
images.

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
from typing import Any, Optional, Tuple

# Third-party
import numpy as np

# sepresample internal
from sepresample.exceptions import SourceInvalidError

#: Largest stored channel value.
CHANNEL_MAX = 0xFFFF

#: Stored-to-normalized conversion factor.
U16_TO_F32 = np.float32(1.0 / CHANNEL_MAX)

CHANNELS = 4


class PixelSource(ABC):
    """Read-only image the engine can resample.

    Implementations expose their size and return one row at a time as
    normalized ``float32`` RGBA in ``[0, 1]``.
    """

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def read_row(self, y: int) -> np.ndarray:
        """Return row ``y`` as ``float32`` of shape ``(width, 4)`` in [0, 1]."""
        ...

    def read_column(self, x: int) -> np.ndarray:
        """Return column ``x`` as ``float32`` of shape ``(height, 4)``.

        The default gathers one pixel per row; subclasses with random
        access storage override it.
        """
        out = np.empty((self.height, CHANNELS), dtype=np.float32)
        for y in range(self.height):
            out[y] = self.read_row(y)[x]
        return out

    @property
    def size(self) -> Tuple[int, int]:
        """``(width, height)``."""
        return (self.width, self.height)

    def to_float(self) -> np.ndarray:
        """Whole image as normalized ``float32`` ``(height, width, 4)``."""
        out = np.empty((self.height, self.width, CHANNELS), dtype=np.float32)
        for y in range(self.height):
            out[y] = self.read_row(y)
        return out


class PixelBuffer(PixelSource):
    """Packed 16-bit-per-channel, non-premultiplied RGBA image.

    Parameters
    ----------
    pixels : np.ndarray
        ``uint16`` array of shape ``(height, width, 4)``. Taken by
        reference, not copied.

    Raises
    ------
    SourceInvalidError
        If ``pixels`` has the wrong dtype or shape.

    Examples
    --------
    >>> buf = PixelBuffer.new(3, 2)
    >>> buf.size
    (3, 2)
    """

    def __init__(self, pixels: np.ndarray) -> None:
        if not isinstance(pixels, np.ndarray):
            raise SourceInvalidError(
                f"pixels must be a numpy array, got {type(pixels).__name__}"
            )
        if pixels.dtype != np.uint16:
            raise SourceInvalidError(
                f"pixels must be uint16, got {pixels.dtype}"
            )
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise SourceInvalidError(
                f"pixels must have shape (height, width, 4), got {pixels.shape}"
            )
        self._pixels = pixels

    @classmethod
    def new(cls, width: int, height: int) -> 'PixelBuffer':
        """Allocate a zero-filled (transparent black) buffer."""
        return cls(np.zeros((height, width, CHANNELS), dtype=np.uint16))

    @classmethod
    def empty(cls) -> 'PixelBuffer':
        """A ``0 x 0`` buffer."""
        return cls.new(0, 0)

    @classmethod
    def from_float(cls, values: np.ndarray) -> 'PixelBuffer':
        """Quantize normalized float RGBA ``(h, w, 4)`` into a new buffer."""
        return cls(quantize(np.asarray(values, dtype=np.float32)))

    @property
    def pixels(self) -> np.ndarray:
        """The underlying ``uint16 (height, width, 4)`` array."""
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def is_empty(self) -> bool:
        """True when either dimension is zero."""
        return self.width == 0 or self.height == 0

    def read_row(self, y: int) -> np.ndarray:
        return self._pixels[y].astype(np.float32) * U16_TO_F32

    def read_column(self, x: int) -> np.ndarray:
        return self._pixels[:, x].astype(np.float32) * U16_TO_F32

    def to_float(self) -> np.ndarray:
        return self._pixels.astype(np.float32) * U16_TO_F32

    def pixel(self, x: int, y: int) -> Tuple[float, float, float, float]:
        """Normalized ``(r, g, b, a)`` at column ``x``, row ``y``."""
        r, g, b, a = (float(v) / CHANNEL_MAX for v in self._pixels[y, x])
        return (r, g, b, a)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self._pixels.shape == other._pixels.shape
                and bool(np.array_equal(self._pixels, other._pixels)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"


class ArraySource(PixelSource):
    """Adapt a numpy image array to the ``PixelSource`` contract.

    Accepted layouts:

    - ``(h, w)`` grayscale, alpha opaque
    - ``(h, w, 3)`` RGB, alpha opaque
    - ``(h, w, 4)`` RGBA (non-premultiplied)

    Integer dtypes are normalized by their dtype maximum; float dtypes are
    taken as already normalized and clipped to ``[0, 1]`` (NaN reads as 0).

    Parameters
    ----------
    array : np.ndarray
        Source image.

    Raises
    ------
    SourceInvalidError
        On unsupported shape or dtype.
    """

    def __init__(self, array: np.ndarray) -> None:
        if not isinstance(array, np.ndarray):
            raise SourceInvalidError(
                f"source must be a numpy array, got {type(array).__name__}"
            )
        if array.ndim == 3 and array.shape[2] not in (3, CHANNELS):
            raise SourceInvalidError(
                f"3-D source must have 3 or 4 channels, got {array.shape[2]}"
            )
        if array.ndim not in (2, 3):
            raise SourceInvalidError(
                f"source must be 2-D or 3-D, got {array.ndim}-D"
            )
        if array.dtype == np.bool_:
            scale = 1.0
        elif np.issubdtype(array.dtype, np.integer):
            if np.iinfo(array.dtype).min < 0:
                raise SourceInvalidError(
                    f"signed integer sources are not supported, got {array.dtype}"
                )
            scale = 1.0 / np.iinfo(array.dtype).max
        elif np.issubdtype(array.dtype, np.floating):
            scale = None
        else:
            raise SourceInvalidError(
                f"unsupported source dtype {array.dtype}"
            )
        self._array = array
        self._scale = scale

    @property
    def width(self) -> int:
        return self._array.shape[1]

    @property
    def height(self) -> int:
        return self._array.shape[0]

    def read_row(self, y: int) -> np.ndarray:
        return self._normalize(self._array[y])

    def read_column(self, x: int) -> np.ndarray:
        return self._normalize(self._array[:, x])

    def _normalize(self, line: np.ndarray) -> np.ndarray:
        out = np.ones((line.shape[0], CHANNELS), dtype=np.float32)
        if self._scale is None:
            values = np.nan_to_num(line.astype(np.float32), nan=0.0,
                                   posinf=1.0, neginf=0.0)
            values = np.clip(values, 0.0, 1.0)
        else:
            values = line.astype(np.float32) * np.float32(self._scale)
        if line.ndim == 1:
            out[:, :3] = values[:, np.newaxis]
        else:
            out[:, :values.shape[1]] = values
        return out


def as_source(obj: Any) -> PixelSource:
    """Coerce ``obj`` to a ``PixelSource``.

    ``PixelSource`` instances (including ``PixelBuffer``) pass through;
    numpy arrays are wrapped in ``ArraySource``.

    Raises
    ------
    SourceInvalidError
        If ``obj`` is ``None`` or of an unsupported type.
    """
    if obj is None:
        raise SourceInvalidError("source image is None")
    if isinstance(obj, PixelSource):
        return obj
    if isinstance(obj, np.ndarray):
        return ArraySource(obj)
    raise SourceInvalidError(
        f"unsupported source type {type(obj).__name__}"
    )


class RegionSource(PixelSource):
    """Read-only rectangular window onto another ``PixelSource``.

    Parameters
    ----------
    parent : PixelSource
        Full image.
    region : Tuple[int, int, int, int]
        Half-open ``(x0, y0, x1, y1)`` rectangle inside ``parent``.
    """

    def __init__(self, parent: PixelSource,
                 region: Tuple[int, int, int, int]) -> None:
        self._parent = parent
        self._x0, self._y0, self._x1, self._y1 = region

    @property
    def width(self) -> int:
        return self._x1 - self._x0

    @property
    def height(self) -> int:
        return self._y1 - self._y0

    def read_row(self, y: int) -> np.ndarray:
        return self._parent.read_row(self._y0 + y)[self._x0:self._x1]

    def read_column(self, x: int) -> np.ndarray:
        return self._parent.read_column(self._x0 + x)[self._y0:self._y1]


def crop(source: PixelSource, region: Tuple[int, int, int, int]) -> PixelSource:
    """Restrict ``source`` to the half-open ``(x0, y0, x1, y1)`` rectangle.

    A ``PixelBuffer`` yields a ``PixelBuffer`` view sharing its storage;
    any other source is wrapped in ``RegionSource``. The region is not
    validated here.
    """
    x0, y0, x1, y1 = region
    if (x0, y0, x1, y1) == (0, 0, source.width, source.height):
        return source
    if isinstance(source, PixelBuffer):
        return PixelBuffer(source.pixels[y0:y1, x0:x1])
    return RegionSource(source, region)


def quantize(values: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """Convert normalized float samples to stored ``uint16`` channels.

    Values are scaled by ``CHANNEL_MAX``, saturated to ``[0, CHANNEL_MAX]``
    and rounded to nearest. Non-finite values never propagate: ``+inf``
    saturates high, ``-inf`` and NaN saturate low.

    Parameters
    ----------
    values : np.ndarray
        Normalized float samples, any shape.
    out : np.ndarray, optional
        ``uint16`` destination of the same shape.

    Returns
    -------
    np.ndarray
        ``uint16`` samples.
    """
    scaled = np.nan_to_num(values * np.float32(CHANNEL_MAX), nan=0.0,
                           posinf=float(CHANNEL_MAX), neginf=0.0)
    np.clip(scaled, 0.0, float(CHANNEL_MAX), out=scaled)
    np.rint(scaled, out=scaled)
    if out is None:
        return scaled.astype(np.uint16)
    out[...] = scaled
    return out
