"""
Pyglet renderer for the button.

One bordered rectangle plus one label, both in a single batch. The label
is optional: if it cannot be built the button is drawn without it.
"""
import sys
from typing import Optional

import pyglet
from pyglet import shapes

from gui.constants import FONT_SIZE, LABEL_COLOR
from gui.layout import centered_origin
from rendering.palette import button_colors
from rendering.renderer import Renderer


class ButtonRenderer(Renderer):
    def __init__(self):
        self.scene = None
        self.batch = pyglet.graphics.Batch()
        self._shape_group = pyglet.graphics.Group(order=0)
        self._label_group = pyglet.graphics.Group(order=1)

        fill, border = button_colors(hovered=False, pressed=False)
        self._box = shapes.BorderedRectangle(
            0, 0, 1, 1,
            border=1,
            color=fill,
            border_color=border,
            batch=self.batch,
            group=self._shape_group,
        )
        self._label: Optional[pyglet.text.Label] = None

    def attach(self, scene):
        self.scene = scene

    def set_label(self, text: str, font_name: Optional[str], font_size: int = FONT_SIZE) -> bool:
        """Build the caption label. Returns False (and draws no label) on failure."""
        if self._label is not None:
            self._label.delete()
            self._label = None
        try:
            self._label = pyglet.text.Label(
                text,
                font_name=font_name,
                font_size=font_size,
                color=LABEL_COLOR,
                anchor_x="left",
                anchor_y="bottom",
                batch=self.batch,
                group=self._label_group,
            )
        except Exception as e:
            print(f"[render] pyglet.text.Label failed, drawing button without label: {e}",
                  file=sys.stderr)
            return False
        return True

    # -------------------------------------------------
    # DRAW
    # -------------------------------------------------

    def draw(self):
        if self.scene is None:
            return
        snap = self.scene.snapshot()
        x, y, w, h = snap["rect"]

        fill, border = button_colors(snap["hovered"], snap["pressed"])
        self._box.position = (x, y)
        self._box.width = w
        self._box.height = h
        self._box.color = fill
        self._box.border_color = border

        if self._label is not None:
            lx, ly = centered_origin(
                snap["rect"], self._label.content_width, self._label.content_height
            )
            self._label.x = lx
            self._label.y = ly

        self.batch.draw()

    def delete(self):
        if self._label is not None:
            self._label.delete()
            self._label = None
        self._box.delete()
