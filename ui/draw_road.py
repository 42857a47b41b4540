"""
ui/draw_road.py
===============
Renders the intersection background from facade geometry:
road surfaces, the footprint box, centre-line dashes, stop lines,
signal anchors and (optionally) every precomputed trajectory.

All methods are *pure renderers* — they read facade data and draw to a
surface.  No coordinate here is computed independently of the facade.
"""

from __future__ import annotations

from typing import Optional

import pygame

from intersection import Direction, IntersectionFacade
from ui.helpers import draw_alpha_lines, draw_dashed_line


class RoadRenderer:
    """Mixin that draws static intersection geometry.

    Expects ``self.facade`` (:class:`IntersectionFacade`) and
    ``self.viewport`` (:class:`ui.types.Viewport`) on the host class.
    """

    facade: IntersectionFacade

    def draw_road(self, surface: pygame.Surface) -> None:
        g = self.facade.geometry
        c = g.center
        hr = g.half_road
        hs = g.half_size
        # Vertical (north-south) and horizontal (east-west) road bands
        self._fill_canvas_rect(surface, self.ROAD_COLOR,
                               c.x - hr, 0.0, c.x + hr, g.canvas_height)
        self._fill_canvas_rect(surface, self.ROAD_COLOR,
                               0.0, c.y - hr, g.canvas_width, c.y + hr)
        self._fill_canvas_rect(surface, self.INTERSECTION_COLOR,
                               c.x - hs, c.y - hr, c.x + hs, c.y + hr)
        self._fill_canvas_rect(surface, self.INTERSECTION_COLOR,
                               c.x - hr, c.y - hs, c.x + hr, c.y + hs)

    def draw_lane_markings(self, surface: pygame.Surface) -> None:
        """Dashed centre line on every arm, from the footprint edge outward."""
        g = self.facade.geometry
        c = g.center
        vp = self.viewport
        far = {
            Direction.NORTH: (c.x, 0.0),
            Direction.SOUTH: (c.x, g.canvas_height),
            Direction.EAST: (g.canvas_width, c.y),
            Direction.WEST: (0.0, c.y),
        }
        for d in Direction:
            stop = self.facade.stop_line(d)
            # The stop-line midpoint lies on the arm axis.
            start = vp.canvas_to_screen(*stop.midpoint)
            end = vp.canvas_to_screen(*far[d])
            draw_dashed_line(surface, self.LANE_DASH_COLOR, start, end,
                             self.DASH_LEN * vp.scale, self.DASH_GAP * vp.scale,
                             max(1, int(2 * vp.scale)))

    def draw_stop_lines(self, surface: pygame.Surface) -> None:
        vp = self.viewport
        width = max(1, int(self.STOP_LINE_WIDTH * vp.scale))
        for d in Direction:
            line = self.facade.stop_line(d)
            pygame.draw.line(
                surface, self.STOP_LINE_COLOR,
                self._i2(vp.canvas_to_screen(*line.start)),
                self._i2(vp.canvas_to_screen(*line.end)),
                width,
            )

    def draw_lights(self, surface: pygame.Surface, colors: Optional[dict] = None) -> None:
        """Signal housings at each light anchor.

        *colors* maps a direction value to an RGB tuple; missing entries
        use :attr:`LIGHT_COLOR`.
        """
        colors = colors or {}
        vp = self.viewport
        size = max(2, int(self.LIGHT_SIZE * vp.scale))
        for d in Direction:
            sx, sy = self._i2(vp.canvas_to_screen(*self.facade.light_anchor(d)))
            housing = pygame.Rect(0, 0, size + 4, size + 4)
            housing.center = (sx, sy)
            pygame.draw.rect(surface, self.LIGHT_HOUSING_COLOR, housing, border_radius=2)
            pygame.draw.circle(surface, colors.get(d.value, self.LIGHT_COLOR),
                               (sx, sy), size // 2)

    def draw_trajectories(self, surface: pygame.Surface) -> None:
        """Overlay every cached trajectory, coloured by turn type."""
        vp = self.viewport
        width = max(1, int(2 * vp.scale))
        for src, dst in self.facade.routes():
            path = self.facade.trajectory(src, dst)
            turn = self.facade.turn_type(src, dst)
            if path is None or turn is None:
                continue
            r, g, b = self.TURN_COLORS[turn.value]
            pts = [vp.canvas_to_screen(*p) for p in path]
            draw_alpha_lines(surface, (r, g, b, self.TRAJECTORY_ALPHA), pts, width)

    # ── internal ──────────────────────────────────────────────────────────

    def _fill_canvas_rect(self, surface: pygame.Surface, color,
                          x1: float, y1: float, x2: float, y2: float) -> None:
        sx1, sy1 = self.viewport.canvas_to_screen(x1, y1)
        sx2, sy2 = self.viewport.canvas_to_screen(x2, y2)
        rect = pygame.Rect(int(sx1), int(sy1),
                           max(1, int(round(sx2 - sx1))), max(1, int(round(sy2 - sy1))))
        pygame.draw.rect(surface, color, rect)
