"""
Input helpers & the clickable button.

The button keeps a single enumerated state; the hovered / pressed flags the
renderer needs are derived from it, so a "pressed but not active" button
cannot exist.
"""
from enum import Enum
from typing import Optional, Tuple

Rect = Tuple[int, int, int, int]


def point_in_rect(x: float, y: float, rect: Rect) -> bool:
    """Half-open containment: the right and top edges are outside."""
    rx, ry, rw, rh = rect
    return rx <= x < rx + rw and ry <= y < ry + rh


class ButtonState(Enum):
    IDLE = "idle"
    HOVERED = "hovered"
    PRESSED = "pressed"                  # press began inside, cursor inside
    PRESSED_OUTSIDE = "pressed_outside"  # press began inside, cursor left


class Button:
    def __init__(self, x: int, y: int, w: int, h: int, label: str):
        self.rect: Rect = (x, y, w, h)
        self.label = label
        self.state = ButtonState.IDLE

    def contains(self, sx: float, sy: float) -> bool:
        return point_in_rect(sx, sy, self.rect)

    # -------------------------------------------------
    # DERIVED FLAGS
    # -------------------------------------------------

    @property
    def hovered(self) -> bool:
        return self.state in (ButtonState.HOVERED, ButtonState.PRESSED)

    @property
    def active_press(self) -> bool:
        return self.state in (ButtonState.PRESSED, ButtonState.PRESSED_OUTSIDE)

    @property
    def pressed(self) -> bool:
        return self.state is ButtonState.PRESSED

    # -------------------------------------------------
    # TRANSITIONS
    # -------------------------------------------------

    def hover(self, sx: float, sy: float) -> None:
        """Recompute hover from a cursor position, keeping any active press."""
        inside = self.contains(sx, sy)
        if self.active_press:
            self.state = ButtonState.PRESSED if inside else ButtonState.PRESSED_OUTSIDE
        else:
            self.state = ButtonState.HOVERED if inside else ButtonState.IDLE

    def press(self, sx: float, sy: float) -> bool:
        """Start an active press if (sx, sy) is inside. Returns True if it did."""
        if self.contains(sx, sy):
            self.state = ButtonState.PRESSED
            return True
        self.hover(sx, sy)
        return False

    def release(self, sx: float, sy: float) -> bool:
        """End any active press. Returns True when this completes a click."""
        inside = self.contains(sx, sy)
        clicked = self.active_press and inside
        self.state = ButtonState.HOVERED if inside else ButtonState.IDLE
        return clicked

    def unhover(self) -> None:
        """The cursor is not over the window: drop hover, keep any active press."""
        self.state = ButtonState.PRESSED_OUTSIDE if self.active_press else ButtonState.IDLE


class Cursor:
    """Last known cursor position inside the window, or None once it has left.

    Focus changes do not touch it: a window regaining focus with the cursor
    still over it keeps reporting that position.
    """

    def __init__(self):
        self.position: Optional[Tuple[float, float]] = None

    @property
    def inside(self) -> bool:
        return self.position is not None

    def move(self, x: float, y: float) -> None:
        self.position = (x, y)

    def leave(self) -> None:
        self.position = None
