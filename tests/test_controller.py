"""Tests for the ViewTransformController facade and its configuration."""

import pytest

from ScaleAnimationViewer.core import ViewTransformConfig, ViewTransformController
from ScaleAnimationViewer.core.transform_state import FIT_START, FIT_END


def test_worked_example_double_tap_recenters(make_controller, clock):
    """1000x2000 content in a 500x500 view, double tap at the view center."""
    ctrl = make_controller(viewport=(500, 500), content=(1000, 2000))
    state = ctrl.state
    assert (state.fit_scale, state.min_scale, state.max_scale) == (0.25, 0.25, 2.0)

    ctrl.on_double_tap(250.0, 250.0)
    while ctrl.advance():
        clock.tick_ms(16)

    t = ctrl.current_transform()
    assert t.scale == 1.0
    # The content center (500, 1000) is under the view center again
    assert t.map_to_content(250.0, 250.0) == (500.0, 1000.0)


def test_animation_frames_stay_between_start_and_target(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(250.0, 250.0)
    scales = []
    while ctrl.advance():
        scales.append(ctrl.current_transform().scale)
        clock.tick_ms(16)
    scales.append(ctrl.current_transform().scale)

    assert scales == sorted(scales)
    assert all(0.25 <= s <= 1.0 for s in scales)
    assert scales[-1] == 1.0
    assert not ctrl.is_animating


def test_refresh_requested_while_animating(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(250.0, 250.0)
    assert len(ctrl.refreshes) == 1
    clock.tick_ms(16)
    ctrl.advance()
    assert len(ctrl.refreshes) == 2


def test_gestures_ignored_before_any_size(clock):
    ctrl = ViewTransformController(clock=clock)
    ctrl.on_double_tap(10.0, 10.0)
    ctrl.on_scale_gesture_begin(10.0, 10.0)
    assert ctrl.on_scale_gesture_sample(2.0, 10.0, 10.0) == 1.0
    ctrl.on_scale_gesture_end()
    ctrl.zoom_by(2.0, 10.0, 10.0)
    assert not ctrl.is_animating
    assert not ctrl.is_scaling
    assert ctrl.current_transform().scale == 0.0


def test_load_content_restarts_at_fit_scale(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(250.0, 250.0)
    clock.tick_ms(50)
    ctrl.advance()

    ctrl.load_content(100, 100)
    assert not ctrl.is_animating
    t = ctrl.current_transform()
    assert (t.scale, t.offset_x, t.offset_y) == (5.0, 0.0, 0.0)


def test_load_content_after_empty_view(clock):
    ctrl = ViewTransformController(clock=clock)
    ctrl.on_viewport_size_changed(500, 500)
    assert ctrl.state.scale == 1.0
    ctrl.load_content(1000, 2000)
    assert ctrl.state.scale == 0.25


def test_zoom_by_inside_range_applies_immediately(make_controller):
    ctrl = make_controller()
    ctrl.state.set(1.0, -250.0, -750.0)
    ctrl.zoom_by(1.5, 250.0, 250.0)
    assert not ctrl.is_scaling
    assert ctrl.state.scale == pytest.approx(1.5)
    # The point under the focus stays put
    assert ctrl.current_transform().map_to_content(250.0, 250.0) == pytest.approx((500.0, 1000.0))


def test_zoom_by_past_max_snaps_back(make_controller, clock):
    ctrl = make_controller(viewport=(100, 100), content=(100, 100))
    ctrl.state.set(2.0, -50.0, -50.0)
    ctrl.zoom_by(2.0, 50.0, 50.0)
    assert ctrl.is_animating
    clock.tick_ms(150)
    ctrl.advance()
    assert ctrl.state.scale == 2.0
    assert ctrl.state.is_at_rest()


def test_fit_to_view(make_controller, clock):
    ctrl = make_controller()
    ctrl.state.set(2.0, -300.0, -1000.0)
    ctrl.fit_to_view()
    clock.tick_ms(150)
    ctrl.advance()
    t = ctrl.current_transform()
    assert (t.scale, t.offset_x, t.offset_y) == (0.25, 125.0, 0.0)


def test_rest_state_invariant_after_mixed_input(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(100.0, 400.0)
    clock.tick_ms(150)
    ctrl.advance()
    ctrl.on_pan(-40.0, 300.0)
    ctrl.on_scale_gesture_begin(200.0, 200.0)
    for _ in range(10):
        ctrl.on_scale_gesture_sample(1.3, 220.0, 180.0)
    ctrl.on_scale_gesture_end()
    while ctrl.advance():
        clock.tick_ms(16)
    ctrl.on_viewport_size_changed(320, 480)

    state = ctrl.state
    assert state.min_scale <= state.fit_scale <= state.max_scale
    assert state.is_at_rest()


def test_viewport_resize_during_animation_comes_to_rest(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(250.0, 250.0)
    clock.tick_ms(50)
    ctrl.advance()

    ctrl.on_viewport_size_changed(2000, 3000)
    clock.tick_ms(200)
    assert not ctrl.advance()

    assert ctrl.state.is_at_rest()
    t = ctrl.current_transform()
    # 1000x2000 content at scale 1.0 is centered in the larger view
    assert (t.scale, t.offset_x, t.offset_y) == (1.0, 500.0, 500.0)


def test_content_resize_during_animation_keeps_end_time(make_controller, clock):
    ctrl = make_controller()
    ctrl.on_double_tap(250.0, 250.0)
    clock.tick_ms(50)
    ctrl.advance()

    ctrl.on_content_size_changed(100, 100)
    assert ctrl.is_animating
    before = ctrl.current_transform()
    ctrl.advance()
    assert ctrl.current_transform() == before

    clock.tick_ms(50)
    assert ctrl.advance()
    clock.tick_ms(100)
    assert not ctrl.advance()
    assert ctrl.state.is_at_rest()
    t = ctrl.current_transform()
    assert (t.scale, t.offset_x, t.offset_y) == (1.0, 200.0, 200.0)


def test_fit_policies_from_config(make_controller):
    ctrl = make_controller(horizontal_fit_policy=FIT_END, vertical_fit_policy="START")
    assert ctrl.state.horizontal_policy == FIT_END
    assert ctrl.state.vertical_policy == FIT_START
    assert ctrl.state.offset_x == 250.0


def test_config_defaults():
    config = ViewTransformConfig()
    assert config.min_scale_floor == 1.0
    assert config.max_scale_ceiling == 2.0
    assert config.animation_duration_ms == 150
    assert config.horizontal_fit_policy == config.vertical_fit_policy == "center"
    assert config.scale_restrict_factor == 0.3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_scale_floor": 0.0},
        {"max_scale_ceiling": -1.0},
        {"min_scale_floor": 3.0, "max_scale_ceiling": 2.0},
        {"animation_duration_ms": -1},
        {"scale_restrict_factor": 0.0},
        {"scale_restrict_factor": 1.5},
        {"horizontal_fit_policy": "middle"},
        {"vertical_fit_policy": None},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        ViewTransformConfig(**kwargs)


def test_custom_duration(make_controller, clock):
    ctrl = make_controller(animation_duration_ms=300)
    ctrl.on_double_tap(250.0, 250.0)
    clock.tick_ms(150)
    assert ctrl.advance()
    clock.tick_ms(150)
    assert not ctrl.advance()
    assert ctrl.state.scale == 1.0
