"""
Abstract renderer interface.

A renderer is attached to a scene once, then asked to draw it every frame.
It reads the scene only through `scene.snapshot()` and never mutates it.
"""
from abc import ABC, abstractmethod


class Renderer(ABC):
    @abstractmethod
    def attach(self, scene):
        """Bind the scene whose snapshot `draw` renders."""

    @abstractmethod
    def draw(self):
        """Draw the attached scene's current snapshot; no-op before `attach`."""
