"""
Dial Gauge - Frame-Paced Animation
==================================

A small animation runner that interpolates between two numbers over a fixed
number of ~60 Hz frames and hands each eased intermediate value to a step
callback.

Components:
    AnimationJob: What to animate (start, end, duration, step, easing)
    AnimationHandle: A running job; can be cancelled
    animate(): Start a job on a frame scheduler

    QtFrameScheduler: Production scheduler (single-shot QTimer per frame)
    ManualFrameScheduler: Deterministic scheduler for tests/headless use

Frame Model:
    iteration_count = round(60 * duration), halves rounded up
    frame i (1-indexed):
        progress = i / iteration_count
        value    = (end - start) * easing(progress) + start
        step(value)
        progress < 1  -> request next frame
        otherwise     -> finished

    Duration is a frame count, not wall-clock time. If frames arrive slower
    or faster than 60 Hz the animation simply takes longer or shorter.

Usage:
    Inside a Qt application:
        handle = animate(AnimationJob(0, 80, 1.0, gauge_step), QtFrameScheduler())

    In tests:
        frames = ManualFrameScheduler()
        handle = animate(AnimationJob(0, 80, 1.0, values.append), frames)
        frames.run_until_idle()

Author: Dyumna137
Date: 2025-11-06
Version: 2.0
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Dict, Optional, Protocol, Tuple
import itertools
import math

from PyQt6.QtCore import QTimer, Qt

from geometry import round_half_up
from options import ConfigurationError

# ============================================================================
# === FRAME CONSTANTS ===
# ============================================================================

FRAME_RATE = 60                           # Frames per second
FRAME_INTERVAL_MS = int(1000 / FRAME_RATE)  # 16 ms timer fallback cadence


# ============================================================================
# === EASING ===
# ============================================================================

def ease_in_out_cubic(progress: float) -> float:
    """
    Cubic ease-in/ease-out.

    Slow start, fast middle, slow finish. Returns exactly 0 at 0, 0.5 at 0.5
    and 1 at 1.
    """
    p2 = progress / 0.5
    if p2 < 1:
        return 0.5 * p2 ** 3
    return 0.5 * ((p2 - 2) ** 3 + 2)


def linear(progress: float) -> float:
    return progress


# ============================================================================
# === FRAME SCHEDULERS ===
# ============================================================================

class FrameScheduler(Protocol):
    """Anything that can call back on the next frame."""

    def request_frame(self, callback: Callable[[], None]) -> object: ...

    def cancel_frame(self, token: object) -> None: ...


class QtFrameScheduler:
    """
    Frame scheduler backed by single-shot precise QTimers.

    Each requested frame gets its own timer firing after FRAME_INTERVAL_MS.
    Frames are only delivered while the Qt event loop is running, on the
    thread that owns the scheduler.

    Args:
        interval_ms: Delay between frames (default: FRAME_INTERVAL_MS)
        parent: Optional QObject to own the timers
    """

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS, parent=None):
        self._interval_ms = max(1, int(interval_ms))
        self._parent = parent
        self._pending: Dict[int, QTimer] = {}
        self._ids = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: Callable[[], None]) -> int:
        token = next(self._ids)
        timer = QTimer(self._parent) if self._parent is not None else QTimer()
        timer.setTimerType(Qt.TimerType.PreciseTimer)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(token, callback))
        # Keep a reference until the timer fires or is cancelled
        self._pending[token] = timer
        timer.start(self._interval_ms)
        return token

    def cancel_frame(self, token: int) -> None:
        timer = self._pending.pop(token, None)
        if timer is not None:
            timer.stop()
            timer.deleteLater()

    def _fire(self, token: int, callback: Callable[[], None]) -> None:
        timer = self._pending.pop(token, None)
        if timer is None:
            return
        timer.deleteLater()
        callback()


class ManualFrameScheduler:
    """
    Deterministic frame scheduler driven by explicit step() calls.

    Callbacks requested while a frame is running are deferred to the next
    frame, exactly like a display refresh.

    Example:
        >>> frames = ManualFrameScheduler()
        >>> token = frames.request_frame(lambda: print("tick"))
        >>> frames.step()
        tick
        1
    """

    def __init__(self):
        self._queue: Deque[Tuple[int, Callable[[], None]]] = deque()
        self._ids = itertools.count(1)
        self.frames_run = 0

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_frame(self, callback: Callable[[], None]) -> int:
        token = next(self._ids)
        self._queue.append((token, callback))
        return token

    def cancel_frame(self, token: int) -> None:
        self._queue = deque(item for item in self._queue if item[0] != token)

    def step(self) -> int:
        """Run one frame. Returns the number of callbacks invoked."""
        batch = list(self._queue)
        self._queue.clear()
        if batch:
            self.frames_run += 1
        for _, callback in batch:
            callback()
        return len(batch)

    def run_until_idle(self, max_frames: int = 10000) -> int:
        """Step until nothing is pending. Returns the number of frames run."""
        frames = 0
        while self._queue:
            if frames >= max_frames:
                raise RuntimeError(f"animation still pending after {max_frames} frames")
            self.step()
            frames += 1
        return frames


# ============================================================================
# === ANIMATION JOB AND HANDLE ===
# ============================================================================

@dataclass(frozen=True)
class AnimationJob:
    """
    One interpolation from start to end.

    Attributes:
        start (float): First value (not clamped)
        end (float): Final value (not clamped)
        duration (float): Seconds at 60 Hz; 0 gives a single frame
        step (Callable): Receives each interpolated value
        easing (Callable): progress -> eased progress
    """

    start: float
    end: float
    duration: float
    step: Callable[[float], None]
    easing: Callable[[float], float] = ease_in_out_cubic

    @property
    def iteration_count(self) -> int:
        return max(1, int(round_half_up(FRAME_RATE * self.duration)))

    def value_at(self, iteration: int) -> Tuple[float, float]:
        """(progress, interpolated value) for a 1-indexed iteration."""
        progress = iteration / self.iteration_count
        return progress, (self.end - self.start) * self.easing(progress) + self.start


class AnimationState(Enum):
    RUNNING = 'running'
    FINISHED = 'finished'
    CANCELLED = 'cancelled'
    FAILED = 'failed'


class AnimationHandle:
    """
    A running AnimationJob.

    The handle owns the pending frame token so the job can be withdrawn.
    After cancel() the step callback is never invoked again. A step that
    raises leaves the handle FAILED and the exception propagates.
    """

    def __init__(self, job: AnimationJob, scheduler: FrameScheduler,
                 on_finish: Optional[Callable[["AnimationHandle"], None]] = None):
        self.job = job
        self.iteration = 0
        self.state = AnimationState.RUNNING
        self._scheduler = scheduler
        self._on_finish = on_finish
        self._token: Optional[object] = None

    @property
    def is_active(self) -> bool:
        return self.state is AnimationState.RUNNING

    def cancel(self) -> None:
        if self.state is not AnimationState.RUNNING:
            return
        self.state = AnimationState.CANCELLED
        if self._token is not None:
            self._scheduler.cancel_frame(self._token)
            self._token = None

    def _schedule(self) -> None:
        self._token = self._scheduler.request_frame(self._on_frame)

    def _on_frame(self) -> None:
        self._token = None
        if self.state is not AnimationState.RUNNING:
            return
        self.iteration += 1
        progress, value = self.job.value_at(self.iteration)
        try:
            self.job.step(value)
        except Exception:
            self.state = AnimationState.FAILED
            raise
        # step() may have cancelled us
        if self.state is not AnimationState.RUNNING:
            return
        if progress < 1:
            self._schedule()
            return
        self.state = AnimationState.FINISHED
        if self._on_finish is not None:
            self._on_finish(self)


def animate(job: AnimationJob, scheduler: FrameScheduler,
            on_finish: Optional[Callable[[AnimationHandle], None]] = None) -> AnimationHandle:
    """
    Start a job: the first frame is requested immediately.

    Raises:
        ConfigurationError: If the duration is negative or not finite
    """
    if not math.isfinite(job.duration) or job.duration < 0:
        raise ConfigurationError(f"duration must be a non-negative number (got {job.duration})")
    handle = AnimationHandle(job, scheduler, on_finish)
    handle._schedule()
    return handle
