"""
Shared constants for the button window.
Keeping them in a tiny module avoids circular imports between the window,
the renderer and the scene.
"""
import os

WINDOW_W = 900
WINDOW_H = 600
WINDOW_TITLE = "SDL2 Button"

BUTTON_W = 200
BUTTON_H = 60
BUTTON_LABEL = "Click me!"

# font path is resolved against the working directory, like the other assets
FONT_DIR = os.path.join("assets", "fonts")
FONT_PATH = os.path.join(FONT_DIR, "MotivaSansBold.woff.ttf")
FONT_NAME = "Motiva Sans"
FONT_SIZE = 28

LABEL_COLOR = (255, 255, 255, 255)

# starting background (dark slate) before the first click
BACKGROUND_RGB = (20, 24, 28)

# inclusive range for each random background channel
BACKGROUND_MIN = 40
BACKGROUND_MAX = 220
