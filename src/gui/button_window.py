"""
Pyglet window hosting the button scene.

Input events update the scene and the tracked cursor; every frame the
cursor is polled so hover stays correct even when no events arrive (e.g.
the window just regained focus).
"""
import pyglet

from gui.constants import WINDOW_H, WINDOW_TITLE, WINDOW_W
from rendering.renderer import Renderer
from scene.core import ButtonScene
from ui.input import Cursor


class ButtonWindow(pyglet.window.Window):
    def __init__(self, width: int = WINDOW_W, height: int = WINDOW_H, caption: str = WINDOW_TITLE):
        super().__init__(
            width=width,
            height=height,
            caption=caption,
            resizable=True,
            vsync=True,
            visible=False,
        )
        self.scene = None
        self.renderer = None

        # cursor position, updated from pointer events and polled once per frame
        self.cursor = Cursor()

        self._center_on_screen()

    def _center_on_screen(self):
        screen = self.screen
        self.set_location(
            screen.x + (screen.width - self.width) // 2,
            screen.y + (screen.height - self.height) // 2,
        )

    def attach(self, scene: ButtonScene, renderer: Renderer):
        self.scene = scene
        self.renderer = renderer
        renderer.attach(scene)
        scene.layout(self.width, self.height)

    # -------------------------------------------------
    # DRAW
    # -------------------------------------------------

    def on_draw(self):
        if self.scene is None:
            return
        self.scene.poll(self.cursor)

        r, g, b = self.scene.snapshot()["background"]
        pyglet.gl.glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)
        self.clear()
        self.renderer.draw()

    # -------------------------------------------------
    # INPUT
    # -------------------------------------------------

    def on_resize(self, width, height):
        super().on_resize(width, height)
        if self.scene is not None:
            self.scene.layout(width, height)

    def on_mouse_press(self, x, y, button, modifiers):
        self.cursor.move(x, y)
        if button == pyglet.window.mouse.LEFT and self.scene is not None:
            self.scene.mouse_press(x, y)

    def on_mouse_release(self, x, y, button, modifiers):
        self.cursor.move(x, y)
        if button == pyglet.window.mouse.LEFT and self.scene is not None:
            self.scene.mouse_release(x, y)

    def on_mouse_motion(self, x, y, dx, dy):
        self.cursor.move(x, y)
        if self.scene is not None:
            self.scene.mouse_motion(x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.cursor.move(x, y)
        if self.scene is not None:
            self.scene.mouse_motion(x, y)

    def on_mouse_enter(self, x, y):
        self.cursor.move(x, y)

    def on_mouse_leave(self, x, y):
        self.cursor.leave()
