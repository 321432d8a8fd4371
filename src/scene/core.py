# -------------------------------------------------
# File: src/scene/core.py
#
# Scene state, decoupled from any GUI framework.
# Owns the button, the background colour and the random
# generator, and turns pointer input into button transitions.
# -------------------------------------------------

from typing import Callable, Dict, Any, Optional, Tuple

import numpy as np

from gui.constants import (
    BACKGROUND_MAX,
    BACKGROUND_MIN,
    BACKGROUND_RGB,
    BUTTON_H,
    BUTTON_LABEL,
    BUTTON_W,
)
from gui.layout import centered_rect
from ui.input import Button, Cursor

RGB = Tuple[int, int, int]


class ButtonScene:
    def __init__(
        self,
        window_width: int,
        window_height: int,
        on_click: Optional[Callable[[], Any]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Parameters
        ----------
        window_width, window_height : int
            Initial window size, used to centre the button.
        on_click : callable, optional
            Side effect run after the background changes on a confirmed
            click (the window wires this to tone playback).
        rng : numpy.random.Generator, optional
            Source for background colours. Seeded from OS entropy when omitted.
        """
        self.button = Button(0, 0, BUTTON_W, BUTTON_H, BUTTON_LABEL)
        self.background: RGB = BACKGROUND_RGB
        self.rng = rng if rng is not None else np.random.default_rng()
        self.on_click = on_click

        self.clicks: int = 0

        self.layout(window_width, window_height)

    # -------------------------------------------------
    # LAYOUT
    # -------------------------------------------------

    def layout(self, window_width: int, window_height: int) -> None:
        self.button.rect = centered_rect(window_width, window_height, BUTTON_W, BUTTON_H)

    # -------------------------------------------------
    # INPUT
    # -------------------------------------------------

    def poll(self, cursor: Cursor) -> None:
        """Per-frame hover refresh from the tracked cursor position."""
        if cursor.inside:
            self.button.hover(*cursor.position)
        else:
            self.button.unhover()

    def mouse_press(self, x: float, y: float) -> None:
        self.button.press(x, y)

    def mouse_motion(self, x: float, y: float) -> None:
        self.button.hover(x, y)

    def mouse_release(self, x: float, y: float) -> bool:
        """Returns True when the release confirmed a click."""
        if not self.button.release(x, y):
            return False
        self.click()
        return True

    # -------------------------------------------------
    # CLICK ACTION
    # -------------------------------------------------

    def click(self) -> None:
        r, g, b = self.rng.integers(BACKGROUND_MIN, BACKGROUND_MAX + 1, size=3)
        self.background = (int(r), int(g), int(b))
        self.clicks += 1
        if self.on_click is not None:
            self.on_click()

    # -------------------------------------------------
    # SNAPSHOT FOR RENDERERS
    # -------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Read-only view of what a frame needs."""
        return {
            "background": self.background,
            "rect": self.button.rect,
            "hovered": self.button.hovered,
            "pressed": self.button.pressed,
        }
