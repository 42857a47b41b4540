#!/usr/bin/env python3
"""
Main view class — combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, Viewport, VehicleRenderState
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – ViewHelpers mixin + dashed / alpha line helpers
    ├── draw_road.py       – RoadRenderer mixin (roads, stop lines, lights, paths)
    ├── draw_vehicles.py   – VehicleRenderer mixin (feed vehicle sprites)
    ├── hud.py             – HudRenderer mixin  (legend, debug, pause)
    └── pygame_view.py     – PygameIntersectionView (this file – main loop)

The view holds a reference to the geometry facade and to an optional
vehicle *feed* (anything with ``get_vehicles()``, and optionally
``update(dt)`` and ``reset()``).  Neither ever references the view.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import pygame

import config
from intersection import IntersectionFacade

from .constants import ViewConstants
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .helpers import ViewHelpers
from .hud import HudRenderer
from .types import VehicleRenderState, Viewport

log = logging.getLogger("ui")


class PygameIntersectionView(
    ViewConstants,
    ViewHelpers,
    RoadRenderer,
    VehicleRenderer,
    HudRenderer,
):
    """Debug visualiser for intersection geometry and trajectories."""

    def __init__(
        self,
        facade: IntersectionFacade,
        feed: Any = None,
        width: int = config.WINDOW_WIDTH,
        height: int = config.WINDOW_HEIGHT,
        fps: int = config.TARGET_FPS,
    ):
        self.facade = facade
        self.feed = feed
        self.width = width
        self.height = height
        self.fps = fps

        g = facade.geometry
        self.viewport = Viewport(width, height, g.canvas_width, g.canvas_height)

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.vehicle_states: Dict[str, VehicleRenderState] = {}
        self.paused = False
        self.show_debug = False
        self.show_legend = True
        self.show_trajectories = True

    # ------------------------------------------------------------------ #
    #  Frame                                                               #
    # ------------------------------------------------------------------ #
    def render_frame(self, surface: pygame.Surface, vehicles: Sequence[Any] = ()) -> None:
        """Draw one full frame of map + vehicles onto *surface*."""
        surface.fill(self.BG_COLOR)
        self.draw_road(surface)
        self.draw_lane_markings(surface)
        self.draw_stop_lines(surface)
        self.draw_lights(surface)
        if self.show_trajectories:
            self.draw_trajectories(surface)
        self._sync_vehicle_states(vehicles)
        for vehicle in vehicles:
            self.draw_vehicle(surface, vehicle)

    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(300, new_w)
        self.height = max(300, new_h)
        self.viewport.screen_w = self.width
        self.viewport.screen_h = self.height
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"intersection_{stamp}.png")
        pygame.image.save(self.screen, path)
        log.info("Screenshot saved to %s", path)

    def _poll_feed(self, dt: float) -> List[Any]:
        if self.feed is None:
            return []
        if not self.paused and hasattr(self.feed, "update"):
            self.feed.update(dt)
        return list(self.feed.get_vehicles() or [])

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("INTERSECTION GEOMETRY")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_tiny = pygame.font.SysFont("monospace", 11)
        self.font_title = pygame.font.SysFont("monospace", 28, bold=True)

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_SPACE:
                        self.paused = not self.paused
                    elif event.key == pygame.K_F3:
                        self.show_debug = not self.show_debug
                    elif event.key == pygame.K_l:
                        self.show_legend = not self.show_legend
                    elif event.key == pygame.K_t:
                        self.show_trajectories = not self.show_trajectories
                    elif event.key == pygame.K_r:
                        self.viewport.zoom = 1.0
                        self.vehicle_states.clear()
                        if hasattr(self.feed, "reset"):
                            self.feed.reset()
                    elif event.key == pygame.K_F12:
                        self._take_screenshot()
                    elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                        self.viewport.zoom = min(3.0, self.viewport.zoom + 0.1)
                    elif event.key == pygame.K_MINUS:
                        self.viewport.zoom = max(0.3, self.viewport.zoom - 0.1)

            vehicles = self._poll_feed(delta_time)
            self.render_frame(self.screen, vehicles)

            if self.show_legend:
                self._draw_legend(self.screen)
            if self.show_debug:
                self._draw_debug_overlay(self.screen, vehicles, delta_time)
            if self.paused:
                self._draw_pause_banner(self.screen)

            pygame.display.flip()

        pygame.quit()


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    facade: IntersectionFacade,
    feed: Any = None,
    width: int = config.WINDOW_WIDTH,
    height: int = config.WINDOW_HEIGHT,
    fps: int = config.TARGET_FPS,
) -> None:
    view = PygameIntersectionView(facade, feed=feed, width=width, height=height, fps=fps)
    view.run()
