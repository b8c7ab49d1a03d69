# -*- coding: utf-8 -*-
"""
Resampling Engine - Separable two-pass resize with progress and cancellation.

A request is validated synchronously, its two filter tables are built,
and the cheaper of the two pass orders is chosen from the tables'
operation counts:

- ``cost(Y then X) = y_ops * src_width  + x_ops * dst_height``
- ``cost(X then Y) = x_ops * src_height + y_ops * dst_width``

The passes then run through exactly one intermediate buffer. Three entry
points share that work:

- :func:`resize_progressive` runs it on a worker thread and returns a
  :class:`~sepresample.engine.progress.ResizeStream` of steps.
- :func:`resize` consumes such a stream and returns the image.
- :func:`run_resize` runs it in the calling thread with an optional
  step callback.

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

# Standard library
import logging
import time
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Tuple

# sepresample internal
from sepresample._validation import (
    validate_boundary,
    validate_kernel,
    validate_source,
    validate_target_size,
)
from sepresample.boundary import REJECT
from sepresample.buffer import PixelBuffer, PixelSource
from sepresample.engine.convolver import convolve_axis
from sepresample.engine.filter_table import DiscreteFilterTable, build_filter_table
from sepresample.engine.progress import (
    DEFAULT_QUANTUM,
    ProgressTracker,
    ResizeStream,
    Step,
)
from sepresample.exceptions import ProcessorError, SourceInvalidError, ValidationError
from sepresample.kernels import LANCZOS3
from sepresample.vocabulary import Axis, PassOrder

logger = logging.getLogger(__name__)

Size = Tuple[int, int]


class ResizePlan(NamedTuple):
    """Cost estimate and pass order for one request.

    Attributes
    ----------
    src_size, dst_size : Tuple[int, int]
        ``(width, height)`` of the (region-cropped) source and target.
    x_ops, y_ops : int
        Operation counts of the X and Y filter tables.
    cost_y_then_x, cost_x_then_y : int
        Total multiply-accumulate estimate of each order.
    order : PassOrder
        The cheaper order; ties go to Y then X.
    """

    src_size: Size
    dst_size: Size
    x_ops: int
    y_ops: int
    cost_y_then_x: int
    cost_x_then_y: int
    order: PassOrder

    @property
    def total_cost(self) -> int:
        """Estimated operations of the chosen order."""
        if self.order is PassOrder.Y_THEN_X:
            return self.cost_y_then_x
        return self.cost_x_then_y

    @property
    def intermediate_size(self) -> Size:
        """``(width, height)`` of the buffer between the two passes."""
        (sw, sh), (dw, dh) = self.src_size, self.dst_size
        if self.order is PassOrder.Y_THEN_X:
            return (sw, dh)
        return (dw, sh)


def plan_resize(
    src_size: Size,
    dst_size: Size,
    x_table: DiscreteFilterTable,
    y_table: DiscreteFilterTable,
) -> ResizePlan:
    """Estimate both pass orders and pick the cheaper one.

    Parameters
    ----------
    src_size : Tuple[int, int]
        Source ``(width, height)``.
    dst_size : Tuple[int, int]
        Target ``(width, height)``.
    x_table, y_table : DiscreteFilterTable
        Filter tables for the two axes.

    Returns
    -------
    ResizePlan
    """
    (sw, sh), (dw, dh) = src_size, dst_size
    x_ops, y_ops = x_table.op_count, y_table.op_count
    cost_yx = y_ops * sw + x_ops * dh
    cost_xy = x_ops * sh + y_ops * dw
    order = PassOrder.Y_THEN_X if cost_yx <= cost_xy else PassOrder.X_THEN_Y
    plan = ResizePlan(src_size, dst_size, x_ops, y_ops, cost_yx, cost_xy, order)
    logger.debug(
        "Plan %dx%d -> %dx%d: y_then_x=%d x_then_y=%d, chose %s",
        sw, sh, dw, dh, cost_yx, cost_xy, order.value,
    )
    return plan


class _Request:
    """A validated request with its tables built and its order chosen."""

    def __init__(
        self,
        target_size: Any,
        source: Any,
        kernel: Any,
        x_boundary: Any,
        y_boundary: Any,
        source_region: Optional[Sequence[int]],
        quantum: int,
    ) -> None:
        self.source: PixelSource = validate_source(source, source_region)
        self.dst_size = validate_target_size(target_size)
        self.kernel = validate_kernel(kernel)
        self.x_boundary = validate_boundary(x_boundary, 'x_boundary')
        self.y_boundary = validate_boundary(y_boundary, 'y_boundary')
        if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum < 1:
            raise ValidationError(
                f"progress_quantum must be an integer >= 1, got {quantum!r}"
            )
        self.quantum = quantum
        self.src_size = self.source.size
        self.empty = self.dst_size[0] == 0 or self.dst_size[1] == 0
        if not self.empty and (self.src_size[0] == 0 or self.src_size[1] == 0):
            raise SourceInvalidError(
                f"cannot resize an empty {self.src_size[0]}x"
                f"{self.src_size[1]} source to {self.dst_size}"
            )
        self.tables: Dict[Axis, DiscreteFilterTable] = {}
        self.plan: Optional[ResizePlan] = None
        if not self.empty:
            self._build()

    def _build(self) -> None:
        (sw, sh), (dw, dh) = self.src_size, self.dst_size
        self.tables[Axis.X] = build_filter_table(self.kernel, self.x_boundary, dw, sw)
        self.tables[Axis.Y] = build_filter_table(self.kernel, self.y_boundary, dh, sh)
        self.plan = plan_resize(self.src_size, self.dst_size,
                                self.tables[Axis.X], self.tables[Axis.Y])

    @property
    def label(self) -> str:
        (sw, sh), (dw, dh) = self.src_size, self.dst_size
        return f"resize {sw}x{sh}->{dw}x{dh}"

    def empty_step(self) -> Step:
        return Step.finished(PixelBuffer.new(*self.dst_size), 0, 0)

    def execute(self, emit: Callable[[Step], None]) -> Step:
        """Run both passes, emitting continuing steps, and return the done step."""
        plan = self.plan
        tracker = ProgressTracker(emit, plan.total_cost, self.quantum)
        started = time.perf_counter()
        logger.info(
            "%s started (%s, x=%s, y=%s, %s)", self.label,
            getattr(self.kernel, 'name', self.kernel),
            getattr(self.x_boundary, 'name', self.x_boundary),
            getattr(self.y_boundary, 'name', self.y_boundary),
            plan.order.value,
        )
        tracker.start()

        first, second = plan.order.axes
        intermediate = PixelBuffer.new(*plan.intermediate_size)
        dest = PixelBuffer.new(*self.dst_size)
        convolve_axis(self.source, intermediate, self.tables[first], first,
                      tracker.advance)
        convolve_axis(intermediate, dest, self.tables[second], second,
                      tracker.advance)

        logger.info(
            "%s finished: %d kOps in %.3fs", self.label,
            tracker.completed // 1000, time.perf_counter() - started,
        )
        return Step.finished(dest, tracker.completed, plan.total_cost)


def resize_progressive(
    target_size: Size,
    source: Any,
    kernel: Any,
    x_boundary: Any,
    y_boundary: Any,
    *,
    source_region: Optional[Sequence[int]] = None,
    progress_quantum: int = DEFAULT_QUANTUM,
) -> ResizeStream:
    """Start a background resize and return its step stream.

    Parameters
    ----------
    target_size : Tuple[int, int]
        Target ``(width, height)``. Zero in either dimension yields an
        empty image without starting a worker.
    source : PixelSource or np.ndarray
        Source image.
    kernel : FilterKernel or str
        Continuous filter kernel or preset name.
    x_boundary, y_boundary : BoundaryPolicy, callable or str
        Boundary policies for the horizontal and vertical axes.
    source_region : Sequence[int], optional
        Half-open ``(x0, y0, x1, y1)`` source rectangle to resample.
        Default is the whole source.
    progress_quantum : int
        Operations between continuing steps. Default 200000.

    Returns
    -------
    ResizeStream
        Stream of steps; its ``plan`` attribute holds the chosen
        :class:`ResizePlan` (``None`` for an empty target).

    Raises
    ------
    SourceInvalidError, TargetSizeInvalidError, FilterInvalidError, BoundaryInvalidError
        Synchronously, for invalid requests.
    """
    request = _Request(target_size, source, kernel, x_boundary, y_boundary,
                       source_region, progress_quantum)
    if request.empty:
        logger.debug("%s: empty target, no work", request.label)
        return ResizeStream.immediate(request.empty_step(), name=request.label)
    return ResizeStream(request.execute, name=request.label,
                        total=request.plan.total_cost, plan=request.plan)


def resize(
    target_size: Size,
    source: Any,
    kernel: Any = LANCZOS3,
    x_boundary: Any = REJECT,
    y_boundary: Any = REJECT,
    *,
    source_region: Optional[Sequence[int]] = None,
) -> PixelBuffer:
    """Resize ``source`` to ``target_size`` and wait for the result.

    Defaults to the Lanczos-3 kernel with the reject boundary policy on
    both axes.

    Parameters
    ----------
    target_size : Tuple[int, int]
        Target ``(width, height)``.
    source : PixelSource or np.ndarray
        Source image.
    kernel : FilterKernel or str
        Default :data:`~sepresample.kernels.LANCZOS3`.
    x_boundary, y_boundary : BoundaryPolicy, callable or str
        Default :data:`~sepresample.boundary.REJECT`.
    source_region : Sequence[int], optional
        Half-open ``(x0, y0, x1, y1)`` source rectangle.

    Returns
    -------
    PixelBuffer
        The resized image.

    Raises
    ------
    ValidationError
        For invalid requests (see :func:`resize_progressive`).
    ProcessorError
        If the convolution passes failed.

    Examples
    --------
    >>> out = resize((200, 100), image)
    >>> out.size
    (200, 100)
    """
    with resize_progressive(target_size, source, kernel, x_boundary,
                            y_boundary, source_region=source_region) as stream:
        for step in stream:
            if step.done:
                return step.image
            if step.terminal:
                raise ProcessorError(
                    f"{stream.name} failed: {step.error}"
                ) from step.error
    raise ProcessorError("resize ended without a result")


def run_resize(
    target_size: Size,
    source: Any,
    kernel: Any = LANCZOS3,
    x_boundary: Any = REJECT,
    y_boundary: Any = REJECT,
    *,
    source_region: Optional[Sequence[int]] = None,
    progress_quantum: int = DEFAULT_QUANTUM,
    progress_callback: Optional[Callable[[Step], None]] = None,
) -> PixelBuffer:
    """Resize in the calling thread.

    Performs exactly the work of :func:`resize_progressive`, calling
    ``progress_callback`` with each continuing step and finally the done
    step. Exceptions raised by the callback propagate and abandon the
    resize.

    Returns
    -------
    PixelBuffer
        The resized image.
    """
    request = _Request(target_size, source, kernel, x_boundary, y_boundary,
                       source_region, progress_quantum)
    emit = progress_callback if progress_callback is not None else _ignore
    if request.empty:
        step = request.empty_step()
    else:
        step = request.execute(emit)
    emit(step)
    return step.image


def _ignore(step: Step) -> None:
    pass
