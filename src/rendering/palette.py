"""
Button colours per visual state.
"""
from typing import Tuple

RGB = Tuple[int, int, int]

FILL_PRESSED: RGB = (30, 30, 30)
FILL_HOVERED: RGB = (70, 70, 70)
FILL_IDLE: RGB = (40, 40, 40)

BORDER_PRESSED: RGB = (235, 235, 235)
BORDER_HOVERED: RGB = (215, 215, 215)
BORDER_IDLE: RGB = (200, 200, 200)


def button_colors(hovered: bool, pressed: bool) -> Tuple[RGB, RGB]:
    """Return (fill, border). Pressed wins over hovered."""
    if pressed:
        return FILL_PRESSED, BORDER_PRESSED
    if hovered:
        return FILL_HOVERED, BORDER_HOVERED
    return FILL_IDLE, BORDER_IDLE
