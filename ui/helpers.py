"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
dashed lines, alpha-surface drawing and text rendering.
"""

from __future__ import annotations

import math
from typing import Tuple

import pygame


class ViewHelpers:
    """Mixin exposing the module helpers as static methods."""

    @staticmethod
    def _i2(pair: Tuple[float, float]) -> Tuple[int, int]:
        return int(round(pair[0])), int(round(pair[1]))


# ── Line helpers ─────────────────────────────────────────────────────────────

def draw_dashed_line(
    target: pygame.Surface,
    color: Tuple[int, ...],
    start: Tuple[float, float],
    end: Tuple[float, float],
    dash: float,
    gap: float,
    width: int = 1,
) -> None:
    """Draw a dashed straight line from *start* to *end*."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)
    if length < 1e-9 or dash <= 0:
        return
    ux, uy = dx / length, dy / length
    pos = 0.0
    while pos < length:
        seg_end = min(pos + dash, length)
        a = (start[0] + ux * pos, start[1] + uy * pos)
        b = (start[0] + ux * seg_end, start[1] + uy * seg_end)
        pygame.draw.line(target, color, a, b, width)
        pos = seg_end + gap


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_lines(
    target: pygame.Surface,
    color: Tuple[int, ...],
    points,
    width: int = 1,
) -> None:
    """Draw a semi-transparent open polyline (colour tuple with 4 channels)."""
    if len(points) < 2:
        return
    tmp = pygame.Surface(target.get_size(), pygame.SRCALPHA)
    pygame.draw.lines(tmp, color, False, points, width)
    target.blit(tmp, (0, 0))


# ── Text helper ──────────────────────────────────────────────────────────────

def blit_label(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (200, 200, 200),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Blit a HUD label with its *anchor* corner at *pos* and return its rect."""
    label = font.render(text, True, color)
    rect = label.get_rect(**{anchor: pos})
    surface.blit(label, rect)
    return rect
