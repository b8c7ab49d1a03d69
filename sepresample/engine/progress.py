# -*- coding: utf-8 -*-
"""
Progress Protocol - Steps, quantized progress tracking, and the step stream.

A resize request produces a stream of ``Step`` values: zero or more
*continuing* steps with non-decreasing operation counts, then exactly one
terminal step, either *done* (carrying the image) or *failed* (carrying
the exception).

``ResizeStream`` runs the work on a worker thread that hands steps to
the consumer through a one-slot ``queue.Queue``: the worker blocks until
the previous step has been taken. Closing the stream sets a cancel flag
which the worker notices the next time it tries to emit, abandoning the
request without ever delivering a *done* step.

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
import queue
import threading
from typing import Any, Callable, Iterator, Optional

# sepresample internal
from sepresample.buffer import PixelBuffer
from sepresample.exceptions import ResizeCancelled
from sepresample.vocabulary import StepKind

logger = logging.getLogger(__name__)

#: Default number of accumulation operations between continuing steps.
DEFAULT_QUANTUM = 200_000

#: Seconds a blocked producer waits before re-checking for cancellation.
_POLL_INTERVAL = 0.05


class Step:
    """One element of a resize step stream.

    Use the ``continuing``, ``finished`` and ``failure`` constructors.

    Attributes
    ----------
    kind : StepKind
        Step kind.
    completed : int
        Cumulative accumulation operations performed so far.
    total : int
        Estimated total operations for the request.
    image : PixelBuffer or None
        Result image, only on a *done* step.
    error : BaseException or None
        Failure cause, only on a *failed* step.
    """

    __slots__ = ('kind', 'completed', 'total', 'image', 'error')

    def __init__(
        self,
        kind: StepKind,
        completed: int,
        total: int,
        image: Optional[PixelBuffer] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.completed = completed
        self.total = total
        self.image = image
        self.error = error

    @classmethod
    def continuing(cls, completed: int, total: int) -> 'Step':
        return cls(StepKind.CONTINUING, completed, total)

    @classmethod
    def finished(cls, image: PixelBuffer, completed: int, total: int) -> 'Step':
        return cls(StepKind.DONE, completed, total, image=image)

    @classmethod
    def failure(cls, error: BaseException, completed: int, total: int) -> 'Step':
        return cls(StepKind.FAILED, completed, total, error=error)

    @property
    def done(self) -> bool:
        """True for the successful terminal step."""
        return self.kind is StepKind.DONE

    @property
    def terminal(self) -> bool:
        """True for *done* and *failed* steps."""
        return self.kind is not StepKind.CONTINUING

    @property
    def percent(self) -> int:
        """Integer progress in ``[0, 100]``; 100 once done."""
        if self.kind is StepKind.DONE:
            return 100
        if self.total <= 0:
            return 0
        return min(100, (100 * self.completed) // self.total)

    def __repr__(self) -> str:
        if self.kind is StepKind.DONE:
            return f"Step(done, image={self.image!r})"
        if self.kind is StepKind.FAILED:
            return f"Step(failed, error={self.error!r})"
        return f"Step(continuing, {self.completed}/{self.total})"


class ProgressTracker:
    """Count operations and emit a continuing step every ``quantum`` ops.

    The first call to :meth:`start` emits a step at 0 before any work.
    Afterwards :meth:`advance` is called once per finished line and emits
    whenever the running count has passed the next quantum boundary.

    Parameters
    ----------
    emit : Callable[[Step], None]
        Receives each step. May raise ``ResizeCancelled``.
    total : int
        Estimated total operations.
    quantum : int
        Operations between steps, >= 1.
    """

    def __init__(self, emit: Callable[[Step], None], total: int,
                 quantum: int = DEFAULT_QUANTUM) -> None:
        if quantum < 1:
            raise ValueError(f"quantum must be >= 1, got {quantum}")
        self._emit = emit
        self.total = total
        self.quantum = quantum
        self.completed = 0
        self._next = 0

    def start(self) -> None:
        self._send()

    def advance(self, ops: int) -> None:
        self.completed += ops
        if self.completed >= self._next:
            self._send()

    def _send(self) -> None:
        self._emit(Step.continuing(self.completed, self.total))
        # Skip boundaries already passed in one large line.
        self._next = (self.completed // self.quantum + 1) * self.quantum


class _StepChannel:
    """Producer side of a step stream: one-slot queue plus cancel flag."""

    def __init__(self) -> None:
        self.queue: 'queue.Queue[Step]' = queue.Queue(maxsize=1)
        self.cancel = threading.Event()
        self.last_completed = 0

    def emit(self, step: Step) -> None:
        """Hand ``step`` to the consumer, blocking until there is room.

        Raises
        ------
        ResizeCancelled
            If the consumer has closed the stream.
        """
        while True:
            if self.cancel.is_set():
                raise ResizeCancelled()
            try:
                self.queue.put(step, timeout=_POLL_INTERVAL)
            except queue.Full:
                continue
            logger.debug("Emitted %r", step)
            self.last_completed = step.completed
            return


def _run_worker(channel: _StepChannel, work: Callable, total: int) -> None:
    name = threading.current_thread().name
    try:
        step = work(channel.emit)
    except ResizeCancelled:
        logger.debug("%s cancelled by consumer", name)
        return
    except Exception as exc:
        logger.exception("%s failed", name)
        step = Step.failure(exc, channel.last_completed, total)
    try:
        channel.emit(step)
    except ResizeCancelled:
        logger.debug("%s cancelled before delivery", name)


class ResizeStream:
    """Iterator over the steps of one background resize.

    The worker is started by the constructor. Iterate the stream (or call
    :meth:`next_step`) to drive it; iteration stops after the terminal
    step. Call :meth:`close`, or use the stream as a context manager, to
    cancel an unfinished request. A stream that is garbage collected
    before finishing cancels its worker as well.

    Parameters
    ----------
    work : Callable[[Callable[[Step], None]], Step]
        Runs the resize, emitting continuing steps through the supplied
        callable, and returns the *done* step. Must not reference the
        stream itself.
    name : str
        Worker thread name.
    total : int
        Estimated total operations, reported on a *failed* step.
    plan : Any, optional
        Planning information exposed as :attr:`plan`.

    Examples
    --------
    >>> with resize_progressive((64, 64), image) as stream:
    ...     for step in stream:
    ...         if step.done:
    ...             result = step.image
    """

    def __init__(
        self,
        work: Callable[[Callable[[Step], None]], Step],
        name: str = 'resize',
        total: int = 0,
        plan: Any = None,
    ) -> None:
        self.plan = plan
        self._name = name
        self._channel = _StepChannel()
        self._finished = False
        self._thread: Optional[threading.Thread] = threading.Thread(
            target=_run_worker, args=(self._channel, work, total),
            name=name, daemon=True,
        )
        self._thread.start()

    @classmethod
    def immediate(cls, step: Step, name: str = 'resize',
                  plan: Any = None) -> 'ResizeStream':
        """A stream that yields only ``step`` and runs no worker."""
        stream = cls.__new__(cls)
        stream.plan = plan
        stream._name = name
        stream._channel = _StepChannel()
        stream._channel.queue.put_nowait(step)
        stream._finished = False
        stream._thread = None
        return stream

    @property
    def name(self) -> str:
        """Request label, also the worker thread name."""
        return self._name

    @property
    def cancelled(self) -> bool:
        """True once the stream was closed before its terminal step."""
        return self._channel.cancel.is_set()

    @property
    def finished(self) -> bool:
        """True once the terminal step has been taken."""
        return self._finished

    def next_step(self, timeout: Optional[float] = None) -> Optional[Step]:
        """Take the next step, blocking until the worker produces one.

        Parameters
        ----------
        timeout : float, optional
            Seconds to wait. ``None`` waits indefinitely.

        Returns
        -------
        Step or None
            The step, or ``None`` once the stream is finished or closed.

        Raises
        ------
        TimeoutError
            If ``timeout`` elapsed with no step available.
        """
        if self._finished or self.cancelled:
            return None
        try:
            step = self._channel.queue.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError(
                f"no step from {self._name} within {timeout}s"
            ) from None
        if step.terminal:
            self._finished = True
        return step

    def __iter__(self) -> Iterator[Step]:
        return self

    def __next__(self) -> Step:
        step = self.next_step()
        if step is None:
            raise StopIteration
        return step

    def close(self, timeout: Optional[float] = None) -> None:
        """Cancel the request (if unfinished) and wait for the worker.

        Any step already queued is discarded, never delivered.
        """
        if not self._finished:
            self._channel.cancel.set()
        while True:
            try:
                self._channel.queue.get_nowait()
            except queue.Empty:
                break
        if self._thread is not None:
            self._thread.join(timeout)

    def __enter__(self) -> 'ResizeStream':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        channel = getattr(self, '_channel', None)
        if channel is not None and not self._finished:
            channel.cancel.set()

    def __repr__(self) -> str:
        state = ('finished' if self._finished
                 else 'cancelled' if self.cancelled else 'running')
        return f"ResizeStream({self._name!r}, {state})"
