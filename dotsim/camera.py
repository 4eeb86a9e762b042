#!/usr/bin/env python3
"""
Camera utilities for canvas-to-screen transforms.

The canvas origin sits at the centre of the viewport and y points up; screen
pixels have their origin top-left with y pointing down.
"""
from typing import Tuple

from .constants import VIEW_HEIGHT, VIEW_WIDTH
from .vector_utils import Vec2


class Camera2D:
    """
    Maps canvas coordinates to screen pixels at a fixed scale.
    """

    def __init__(self, units_per_pixel: float = 1.0):
        self.upp = float(units_per_pixel)
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def canvas_size(self) -> Tuple[float, float]:
        """Viewport size in canvas units."""
        return (self.viewport_size[0] * self.upp, self.viewport_size[1] * self.upp)

    def world_to_screen(self, pos: Vec2) -> Tuple[int, int]:
        px = pos[0] / self.upp + self.viewport_size[0] / 2
        py = self.viewport_size[1] / 2 - pos[1] / self.upp
        return (int(round(px)), int(round(py)))

    def screen_to_world(self, screen: Tuple[int, int]) -> Vec2:
        wx = (screen[0] - self.viewport_size[0] / 2) * self.upp
        wy = (self.viewport_size[1] / 2 - screen[1]) * self.upp
        return (wx, wy)
