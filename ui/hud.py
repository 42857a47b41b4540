#!/usr/bin/env python3
"""Legend, debug overlay and pause banner (mixin)."""

from __future__ import annotations

from typing import Any, Sequence

import pygame

from .helpers import blit_label


class HudRenderer:
    """Mixin that draws screen-space overlays on top of the map."""

    # ------------------------------------------------------------------ #
    #  Legend                                                               #
    # ------------------------------------------------------------------ #

    def _draw_legend(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        x = self.width - 120
        y = self.height - 16 - len(self.LEGEND_ITEMS) * 18 - 8
        box_w, box_h = 112, len(self.LEGEND_ITEMS) * 18 + 10
        pygame.draw.rect(
            surface, self.HUD_BG_COLOR, (x - 6, y - 4, box_w, box_h), border_radius=4
        )
        pygame.draw.rect(
            surface, self.HUD_BORDER_COLOR, (x - 6, y - 4, box_w, box_h), width=1, border_radius=4
        )
        for label, color in self.LEGEND_ITEMS:
            pygame.draw.circle(surface, color, (x + 4, y + 6), 4)
            blit_label(surface, self.font_tiny, label, (x + 14, y))
            y += 18

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(
        self, surface: pygame.Surface, vehicles: Sequence[Any], dt: float
    ) -> None:
        if self.font_tiny is None:
            return
        g = self.facade.geometry
        fps = self.clock.get_fps() if self.clock else 0.0
        occupied = sum(
            1 for v in vehicles if self.facade.contains_point(v["x"], v["y"])
        )
        lines = [
            f"FPS  {fps:.1f}",
            f"DT   {dt * 1000:.1f} ms",
            f"VEH  {len(vehicles)}  IN BOX {occupied}",
            f"ZOOM {self.viewport.zoom:.1f}x",
            f"CTR  {g.center.x:.0f},{g.center.y:.0f}",
            f"ROAD {g.road_width:.0f}  LANE {g.lane_width:.0f}",
        ]
        x, y = 16, 16
        for line in lines:
            blit_label(surface, self.font_tiny, line, (x, y), (0, 255, 127))
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 100))
        surface.blit(overlay, (0, 0))
        if self.font_title:
            blit_label(
                surface, self.font_title, "PAUSED",
                (self.width // 2, self.height // 2), (220, 220, 220), anchor="center",
            )
