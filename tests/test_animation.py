"""Easing, frame schedulers and the animation runner."""
import pytest

from animation import (
    AnimationJob, AnimationState, FRAME_INTERVAL_MS, ManualFrameScheduler,
    QtFrameScheduler, animate, ease_in_out_cubic, linear,
)
from options import ConfigurationError


def test_ease_in_out_cubic_fixed_points():
    assert ease_in_out_cubic(0) == 0
    assert ease_in_out_cubic(0.5) == 0.5
    assert ease_in_out_cubic(1) == 1


def test_ease_in_out_cubic_is_monotonic_and_symmetric():
    samples = [ease_in_out_cubic(i / 100) for i in range(101)]
    assert samples == sorted(samples)
    for i in range(51):
        p = i / 100
        assert ease_in_out_cubic(p) + ease_in_out_cubic(1 - p) == pytest.approx(1)


@pytest.mark.parametrize("duration, count", [(1, 60), (0.5, 30), (2.5, 150), (0, 1), (0.001, 1),
                                             (0.375, 23)])  # 22.5 frames rounds up
def test_iteration_count(duration, count):
    assert AnimationJob(0, 1, duration, lambda v: None).iteration_count == count


def test_animation_steps_through_every_frame(frames):
    values = []
    handle = animate(AnimationJob(0, 60, 1, values.append, easing=linear), frames)

    assert frames.pending == 1
    assert values == []
    assert frames.run_until_idle() == 60
    assert values == pytest.approx([float(i) for i in range(1, 61)])
    assert values[-1] == 60
    assert handle.state is AnimationState.FINISHED
    assert handle.iteration == 60
    assert frames.pending == 0


def test_default_easing_ends_exactly_on_target(frames):
    values = []
    animate(AnimationJob(10, 90, 0.5, values.append), frames)
    frames.run_until_idle()
    assert len(values) == 30
    assert values[-1] == 90
    assert values[14] == pytest.approx(50)  # progress 0.5
    assert all(10 <= v <= 90 for v in values)


def test_one_frame_per_step(frames):
    values = []
    animate(AnimationJob(0, 1, 1, values.append), frames)
    frames.step()
    frames.step()
    assert len(values) == 2
    assert frames.pending == 1


def test_cancel_stops_further_steps(frames):
    values = []
    handle = animate(AnimationJob(0, 100, 1, values.append), frames)
    for _ in range(3):
        frames.step()
    handle.cancel()

    assert handle.state is AnimationState.CANCELLED
    assert not handle.is_active
    assert frames.pending == 0
    assert frames.run_until_idle() == 0
    assert len(values) == 3
    handle.cancel()  # idempotent


def test_on_finish_called_once_and_not_on_cancel(frames):
    finished = []
    done = animate(AnimationJob(0, 1, 0.1, lambda v: None), frames, on_finish=finished.append)
    cancelled = animate(AnimationJob(0, 1, 0.1, lambda v: None), frames, on_finish=finished.append)
    cancelled.cancel()
    frames.run_until_idle()
    assert finished == [done]


def test_independent_jobs_interleave(frames):
    a, b = [], []
    animate(AnimationJob(0, 1, 0.05, a.append, easing=linear), frames)
    animate(AnimationJob(0, 1, 0.1, b.append, easing=linear), frames)
    frames.run_until_idle()
    assert len(a) == 3
    assert len(b) == 6


@pytest.mark.parametrize("duration", [-1, float("nan"), float("inf")])
def test_invalid_duration_rejected(frames, duration):
    with pytest.raises(ConfigurationError):
        animate(AnimationJob(0, 1, duration, lambda v: None), frames)
    assert frames.pending == 0


def test_failing_step_ends_the_animation(frames):
    seen = []

    def step(value):
        seen.append(value)
        if len(seen) == 3:
            raise ValueError("bad frame")

    handle = animate(AnimationJob(0, 100, 1, step, easing=linear), frames)
    frames.step()
    frames.step()
    with pytest.raises(ValueError):
        frames.run_until_idle()

    assert handle.state is AnimationState.FAILED
    assert not handle.is_active
    assert frames.pending == 0
    assert len(seen) == 3
    handle.cancel()
    assert handle.state is AnimationState.FAILED


def test_manual_scheduler_defers_frames_requested_during_a_frame():
    frames = ManualFrameScheduler()
    order = []

    def first():
        order.append("first")
        frames.request_frame(lambda: order.append("second"))

    frames.request_frame(first)
    assert frames.step() == 1
    assert order == ["first"]
    assert frames.step() == 1
    assert order == ["first", "second"]
    assert frames.frames_run == 2


def test_manual_scheduler_cancel_and_runaway_guard():
    frames = ManualFrameScheduler()
    token = frames.request_frame(lambda: None)
    frames.cancel_frame(token)
    assert frames.pending == 0

    def forever():
        frames.request_frame(forever)

    frames.request_frame(forever)
    with pytest.raises(RuntimeError):
        frames.run_until_idle(max_frames=5)


def test_qt_scheduler_cancel(qapp):
    scheduler = QtFrameScheduler()
    token = scheduler.request_frame(lambda: None)
    assert scheduler.pending == 1
    scheduler.cancel_frame(token)
    assert scheduler.pending == 0


def test_qt_scheduler_delivers_frames(qapp):
    from PyQt6.QtTest import QTest

    scheduler = QtFrameScheduler()
    values = []
    handle = animate(AnimationJob(0, 1, 0.05, values.append, easing=linear), scheduler)
    for _ in range(100):
        if not handle.is_active:
            break
        QTest.qWait(FRAME_INTERVAL_MS)
    assert handle.state is AnimationState.FINISHED
    assert values[-1] == 1
    assert scheduler.pending == 0
