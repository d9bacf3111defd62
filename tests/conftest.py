"""Shared fixtures for ScaleAnimationViewer tests."""

import os
import sys
from pathlib import Path

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add parent directory to path to import ScaleAnimationViewer module
sys.path.insert(0, str(Path(__file__).parent.parent))

from ScaleAnimationViewer.core import ViewTransformConfig, ViewTransformController


class FakeClock:
    """Manually advanced clock returning seconds.

    Time is kept in whole milliseconds so elapsed times compare exactly.
    """

    def __init__(self):
        self.now_ms = 0

    @property
    def now(self) -> float:
        return self.now_ms / 1000.0

    def __call__(self) -> float:
        return self.now

    def tick_ms(self, ms: int):
        self.now_ms += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_controller(clock):
    """Build a controller on the fake clock with the given viewport/content sizes."""

    def _make(viewport=(500, 500), content=(1000, 2000), **config_kwargs):
        refreshes = []
        ctrl = ViewTransformController(
            ViewTransformConfig(**config_kwargs),
            clock=clock,
            request_refresh=lambda: refreshes.append(clock.now),
        )
        ctrl.refreshes = refreshes
        ctrl.on_content_size_changed(*content)
        ctrl.on_viewport_size_changed(*viewport)
        return ctrl

    return _make
