"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]


@dataclass
class Viewport:
    """Uniform scale + offset mapping canvas pixels to window pixels.

    The canvas keeps the geometry's own orientation (``y`` grows south),
    so no axis flip is needed, unlike a world-metre camera.
    """
    screen_w: int
    screen_h: int
    canvas_w: float
    canvas_h: float
    zoom: float = 1.0

    @property
    def scale(self) -> float:
        fit = min(self.screen_w / self.canvas_w, self.screen_h / self.canvas_h)
        return fit * self.zoom

    def canvas_to_screen(self, cx: float, cy: float) -> Tuple[float, float]:
        s = self.scale
        ox = (self.screen_w - self.canvas_w * s) / 2.0
        oy = (self.screen_h - self.canvas_h * s) / 2.0
        return ox + cx * s, oy + cy * s

    def screen_to_canvas(self, sx: float, sy: float) -> Tuple[float, float]:
        s = self.scale
        ox = (self.screen_w - self.canvas_w * s) / 2.0
        oy = (self.screen_h - self.canvas_h * s) / 2.0
        return (sx - ox) / s, (sy - oy) / s


@dataclass
class VehicleRenderState:
    """Last drawn position and heading of one feed vehicle."""
    x: float
    y: float
    heading_x: float = 1.0
    heading_y: float = 0.0
