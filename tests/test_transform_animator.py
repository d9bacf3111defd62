"""Tests for the linear transform animation."""

import pytest

from ScaleAnimationViewer.core.transform_animator import TransformAnimator
from ScaleAnimationViewer.core.transform_state import TransformState


def make_animator(clock, duration_ms=150):
    state = TransformState()
    state.on_content_size_changed(1000, 2000)
    state.on_viewport_size_changed(500, 500)
    refreshes = []
    animator = TransformAnimator(state, duration_ms=duration_ms, clock=clock, request_refresh=lambda: refreshes.append(1))
    return state, animator, refreshes


def test_start_animation_records_job(clock):
    state, animator, refreshes = make_animator(clock)
    assert animator.start_animation(1.0, -250.0, -750.0)
    assert animator.is_running
    job = animator.job
    assert (job.start_scale, job.start_x, job.start_y) == (0.25, 125.0, 0.0)
    assert (job.delta_scale, job.delta_x, job.delta_y) == (0.75, -375.0, -750.0)
    assert job.start_time == clock.now
    # Starting does not move the state yet
    assert state.scale == 0.25
    assert len(refreshes) == 1


def test_start_animation_to_current_state_is_noop(clock):
    state, animator, refreshes = make_animator(clock)
    assert not animator.start_animation(state.scale, state.offset_x, state.offset_y)
    assert not animator.is_running
    assert refreshes == []


def test_running_animation_is_not_overridden(clock):
    state, animator, _ = make_animator(clock)
    animator.start_animation(1.0, -250.0, -750.0)
    job = animator.job
    clock.tick_ms(50)
    before = state.snapshot()

    assert not animator.start_animation(2.0, 0.0, 0.0)
    assert not animator.start_scale_animation(2.0, 0.0, 0.0)
    assert animator.job is job
    assert state.snapshot() == before


def test_advance_interpolates_linearly(clock):
    state, animator, _ = make_animator(clock)
    animator.start_animation(1.0, -250.0, -750.0)
    clock.tick_ms(75)
    assert animator.advance()
    assert state.scale == pytest.approx(0.625)
    assert state.offset_x == pytest.approx(-62.5)
    assert state.offset_y == pytest.approx(-375.0)


@pytest.mark.parametrize("elapsed_ms", [150, 151, 10000])
def test_advance_snaps_exactly_to_target(clock, elapsed_ms):
    state, animator, _ = make_animator(clock)
    animator.start_animation(1.0, -250.0, -750.0)
    clock.tick_ms(40)
    animator.advance()
    clock.tick_ms(elapsed_ms - 40)
    assert not animator.advance()
    assert not animator.is_running
    assert (state.scale, state.offset_x, state.offset_y) == (1.0, -250.0, -750.0)


def test_advance_when_idle_is_noop(clock):
    state, animator, refreshes = make_animator(clock)
    before = state.snapshot()
    assert not animator.advance()
    assert state.snapshot() == before
    assert refreshes == []


def test_advance_requests_refresh_every_frame(clock):
    _, animator, refreshes = make_animator(clock)
    animator.start_animation(1.0, -250.0, -750.0)
    for _ in range(3):
        clock.tick_ms(30)
        animator.advance()
    clock.tick_ms(100)
    animator.advance()
    # One for the start, one per advance including the final frame
    assert len(refreshes) == 5


def test_zero_duration_completes_on_first_advance(clock):
    state, animator, _ = make_animator(clock, duration_ms=0)
    animator.start_animation(1.0, -250.0, -750.0)
    assert not animator.advance()
    assert state.scale == 1.0


def test_start_scale_animation_keeps_pivot_and_clamps(clock):
    state, animator, _ = make_animator(clock)
    # Pivot at view center: content center stays under it
    animator.start_scale_animation(1.0, 250.0, 250.0)
    job = animator.job
    assert (job.target_scale, job.target_x, job.target_y) == (1.0, -250.0, -750.0)


def test_start_scale_animation_clamps_target_offsets(clock):
    state, animator, _ = make_animator(clock)
    # Pivot at the top-left corner would leave empty space on the left; clamped to 0
    animator.start_scale_animation(1.0, 0.0, 0.0)
    job = animator.job
    # x: 125 + 125 * 3 = 500 -> clamped to 0; y: 0 stays 0
    assert (job.target_x, job.target_y) == (0.0, 0.0)


def test_stop_drops_job_without_moving_state(clock):
    state, animator, _ = make_animator(clock)
    animator.start_animation(1.0, -250.0, -750.0)
    clock.tick_ms(75)
    animator.advance()
    snapshot = state.snapshot()
    animator.stop()
    clock.tick_ms(500)
    assert not animator.advance()
    assert state.snapshot() == snapshot
