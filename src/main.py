# File: src/main.py
"""
Entry point for the click-tone button demo.
Run this file from the repository root (the font is looked up under
`assets/fonts/` relative to the working directory):

    python src/main.py

It will:
  - check the font system and open the window
  - build the button renderer and load the label font
  - open the audio output (optional; without it clicks are silent)
  - run the pyglet event loop until the window is closed

Every start-up step releases what was already acquired, in reverse order,
before exiting with status 1.
"""
import os
import sys
from contextlib import ExitStack

# ensure src/ is on sys.path when running main from the repository root
HERE = os.path.dirname(os.path.abspath(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

import numpy as np
import pyglet

from audio.output import AudioOutput
from gui.button_window import ButtonWindow
from gui.constants import BUTTON_LABEL, FONT_NAME, FONT_PATH, FONT_SIZE
from rendering.button_renderer import ButtonRenderer
from scene.core import ButtonScene


class StartupError(Exception):
    """A start-up step failed; the message names the library call."""

    def __init__(self, call: str, cause: BaseException):
        super().__init__(f"{call} failed: {cause}")


def _step(call: str, fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        raise StartupError(call, e) from e


def _close_window(window):
    # the user may already have closed it to end the event loop
    if window.context is not None:
        window.close()


def load_font(path: str = FONT_PATH, name: str = FONT_NAME, size: int = FONT_SIZE):
    if not os.path.isfile(path):
        raise FileNotFoundError(f"font file not found: {path}")
    pyglet.font.add_file(path)
    return pyglet.font.load(name, size)


def main() -> int:
    with ExitStack() as stack:
        try:
            print("[main] Checking font system")
            _step("pyglet.font.load", pyglet.font.load, None, FONT_SIZE)

            print("[main] Creating window")
            window = _step("pyglet.window.Window", ButtonWindow)
            stack.callback(_close_window, window)

            print("[main] Creating renderer")
            renderer = _step("ButtonRenderer", ButtonRenderer)
            stack.callback(renderer.delete)

            print(f"[main] Loading font {FONT_PATH}")
            _step("pyglet.font.add_file", load_font)
        except StartupError as e:
            print(f"[main] {e}", file=sys.stderr)
            return 1

        audio = AudioOutput.open()
        stack.callback(audio.close)

        renderer.set_label(BUTTON_LABEL, FONT_NAME, FONT_SIZE)

        # seeded once per process
        rng = np.random.default_rng()
        scene = ButtonScene(window.width, window.height, on_click=audio.play_tone, rng=rng)
        window.attach(scene, renderer)
        window.set_visible(True)

        print("[main] Running")
        pyglet.app.run()

    print("[main] Bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
