#
# Layout helpers for the single-window GUI.
# Provides:
#   - the centred button rectangle
#   - the origin that centres a measured label inside a rectangle
# --------------------------------------------------------

from typing import Tuple

from gui.constants import BUTTON_W, BUTTON_H
from ui.input import Rect


def centered_rect(
    window_width: int,
    window_height: int,
    width: int = BUTTON_W,
    height: int = BUTTON_H,
) -> Rect:
    """
    Returns (x, y, w, h) of a width x height box centred in the window.
    Integer division, so a 900x600 window gives (350, 270, 200, 60).
    """
    return ((window_width - width) // 2, (window_height - height) // 2, width, height)


def centered_origin(rect: Rect, content_width: int, content_height: int) -> Tuple[int, int]:
    rx, ry, rw, rh = rect
    return rx + (rw - content_width) // 2, ry + (rh - content_height) // 2
