#!/usr/bin/env python3
"""
intersection/geometry.py
========================
Value types for intersection geometry: :class:`Point` and the frozen
:class:`GeometryConfig` every other component derives from.

Coordinates are canvas pixels with ``x`` growing east and ``y`` growing
south.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple

import config


class Point(NamedTuple):
    """Immutable 2-D coordinate."""
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def along(self, axis: "Point", distance: float) -> "Point":
        """Point *distance* units from here along unit vector *axis*."""
        return Point(self.x + axis.x * distance, self.y + axis.y * distance)

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class GeometryConfig:
    """Immutable parameters of a single four-way intersection.

    Parameters
    ----------
    center : Point
        Intersection centre in canvas pixels.
    intersection_size : float
        Side length of the square controlled footprint.
    road_width : float
        Full width of each road (two lanes).
    lane_width : float
        Width of one lane.
    canvas_width, canvas_height : float
        Drawing surface bounds; the centre must lie inside them.
    steps : int
        Sampling resolution shared by every turning trajectory.
    spawn_distance : float
        Distance from the centre to the far-field spawn / exit points.
    stop_line_margin : float
        Gap between the footprint edge and each stop line.
    light_margin : float
        Clearance between a signal anchor and the road / footprint edges.
    """

    center: Point = field(
        default_factory=lambda: Point(config.CENTER_X, config.CENTER_Y)
    )
    intersection_size: float = config.INTERSECTION_SIZE
    road_width: float = config.ROAD_WIDTH
    lane_width: float = config.LANE_WIDTH
    canvas_width: float = config.CANVAS_WIDTH
    canvas_height: float = config.CANVAS_HEIGHT
    steps: int = config.TRAJECTORY_STEPS
    spawn_distance: float = config.SPAWN_DISTANCE
    stop_line_margin: float = config.STOP_LINE_MARGIN
    light_margin: float = config.LIGHT_MARGIN

    def __post_init__(self) -> None:
        # Accept plain (x, y) tuples for convenience.
        object.__setattr__(self, "center", Point(*self.center))

        for name in ("intersection_size", "road_width", "lane_width",
                     "canvas_width", "canvas_height", "spawn_distance"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("stop_line_margin", "light_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if not isinstance(self.steps, int) or self.steps < 1:
            raise ValueError(f"steps must be a positive integer, got {self.steps!r}")
        if 2 * self.lane_width > self.road_width:
            raise ValueError(
                f"two lanes of {self.lane_width} do not fit in road_width ({self.road_width})"
            )
        if self.road_width > self.intersection_size:
            raise ValueError(
                f"road_width ({self.road_width}) cannot exceed "
                f"intersection_size ({self.intersection_size})"
            )
        if self.spawn_distance <= self.half_size + self.stop_line_margin:
            raise ValueError(
                f"spawn_distance ({self.spawn_distance}) must lie beyond the stop lines"
            )
        cx, cy = self.center
        if not (0 <= cx <= self.canvas_width and 0 <= cy <= self.canvas_height):
            raise ValueError(f"center {tuple(self.center)} lies outside the canvas")

    # ── derived half-widths ───────────────────────────────────────────────

    @property
    def half_size(self) -> float:
        return self.intersection_size / 2.0

    @property
    def half_road(self) -> float:
        return self.road_width / 2.0

    @property
    def lane_offset(self) -> float:
        """Lateral distance from the road axis to a lane centreline."""
        return self.lane_width / 2.0

    def translated(self, dx: float, dy: float) -> "GeometryConfig":
        """Copy of this config with only the centre moved by ``(dx, dy)``."""
        return replace(self, center=self.center.offset(dx, dy))
