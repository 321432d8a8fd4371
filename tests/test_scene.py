import numpy as np
import pytest

from gui.constants import BACKGROUND_RGB
from scene.core import ButtonScene
from ui.input import ButtonState, Cursor

INSIDE = (450, 300)
OUTSIDE = (10, 10)


class ClickRecorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def tones():
    return ClickRecorder()


@pytest.fixture
def scene(tones):
    return ButtonScene(900, 600, on_click=tones, rng=np.random.default_rng(1234))


def test_initial_layout(scene):
    assert scene.button.rect == (350, 270, 200, 60)
    assert scene.background == BACKGROUND_RGB


def test_click_randomizes_background_and_plays_tone(scene, tones):
    scene.mouse_press(*INSIDE)
    assert scene.snapshot()["pressed"]
    assert scene.mouse_release(*INSIDE)

    assert all(40 <= c <= 220 for c in scene.background)
    assert tones.calls == 1
    assert not scene.snapshot()["pressed"]


def test_press_inside_release_outside_is_not_click(scene, tones):
    scene.mouse_press(*INSIDE)
    scene.mouse_motion(*OUTSIDE)
    assert not scene.snapshot()["pressed"]
    assert scene.button.active_press
    assert not scene.mouse_release(*OUTSIDE)

    assert scene.background == BACKGROUND_RGB
    assert tones.calls == 0
    assert not scene.button.active_press


def test_press_outside_release_inside_is_not_click(scene, tones):
    scene.mouse_press(*OUTSIDE)
    scene.mouse_motion(*INSIDE)
    assert scene.snapshot()["hovered"]
    assert not scene.snapshot()["pressed"]
    assert not scene.mouse_release(*INSIDE)

    assert scene.background == BACKGROUND_RGB
    assert tones.calls == 0


def test_drag_out_and_back_still_clicks(scene, tones):
    scene.mouse_press(*INSIDE)
    scene.mouse_motion(*OUTSIDE)
    scene.mouse_motion(*INSIDE)
    assert scene.snapshot()["pressed"]
    assert scene.mouse_release(*INSIDE)
    assert tones.calls == 1


def test_poll_updates_hover_without_events(scene):
    cursor = Cursor()
    cursor.move(*INSIDE)
    scene.poll(cursor)
    assert scene.snapshot()["hovered"]
    cursor.move(*OUTSIDE)
    scene.poll(cursor)
    assert not scene.snapshot()["hovered"]


def test_poll_keeps_hover_across_frames_without_events(scene):
    # focus can come and go; only pointer events move the tracked cursor
    cursor = Cursor()
    cursor.move(*INSIDE)
    scene.poll(cursor)
    scene.button.state = ButtonState.IDLE
    scene.poll(cursor)
    assert scene.snapshot()["hovered"]


def test_poll_after_cursor_left_window(scene):
    cursor = Cursor()
    cursor.move(*INSIDE)
    scene.poll(cursor)
    cursor.leave()
    scene.poll(cursor)
    assert not scene.snapshot()["hovered"]
    assert scene.button.state is ButtonState.IDLE


def test_leaving_window_mid_press_keeps_active_press(scene, tones):
    cursor = Cursor()
    scene.mouse_press(*INSIDE)
    cursor.move(*INSIDE)
    cursor.leave()
    scene.poll(cursor)
    assert scene.button.state is ButtonState.PRESSED_OUTSIDE
    assert not scene.snapshot()["pressed"]
    cursor.move(*INSIDE)
    scene.poll(cursor)
    assert scene.mouse_release(*INSIDE)
    assert tones.calls == 1


def test_resize_recenters_button(scene):
    scene.layout(1280, 720)
    assert scene.button.rect == (540, 330, 200, 60)


def test_channels_cover_full_range():
    scene = ButtonScene(900, 600, rng=np.random.default_rng(7))
    seen = set()
    for _ in range(3000):
        scene.click()
        seen.update(scene.background)
    assert min(seen) == 40
    assert max(seen) == 220
    assert scene.clicks == 3000


def test_click_without_callback(scene):
    scene.on_click = None
    scene.mouse_press(*INSIDE)
    assert scene.mouse_release(*INSIDE)
    assert scene.clicks == 1
