#!/usr/bin/env python3
"""
intersection/facade.py
======================
:class:`IntersectionFacade` — the single read-only surface consumed by
vehicle managers, signal controllers and renderers.

The facade owns the reference-point calculator and the trajectory
cache and only delegates to them.  Consumers hold a reference to the
facade; the facade never holds a reference back.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from intersection.directions import (
    Direction,
    TurnType,
    classify,
    target_direction,
    valid_pairs,
)
from intersection.geometry import GeometryConfig, Point
from intersection.reference_points import ReferencePointCalculator, StopLine
from intersection.trajectory import (
    PairKey,
    Trajectory,
    TrajectoryCache,
    TrajectorySynthesizer,
)

log = logging.getLogger("facade")


class IntersectionFacade:
    """Direction-keyed geometry of one four-way intersection.

    Parameters
    ----------
    geometry : GeometryConfig or None
        Immutable configuration.  ``None`` uses the defaults from
        :mod:`config`.

    Every accessor is a pure read.  Invalid directions and same-direction
    pairs yield ``None``; callers must check before use.
    """

    def __init__(self, geometry: Optional[GeometryConfig] = None) -> None:
        self.geometry = geometry if geometry is not None else GeometryConfig()
        self._points = ReferencePointCalculator(self.geometry)
        self._synthesizer = TrajectorySynthesizer(self._points)
        self._cache = TrajectoryCache(self._synthesizer)
        log.info(
            "Intersection ready: centre=%s size=%.1f road=%.1f lane=%.1f",
            tuple(self.geometry.center),
            self.geometry.intersection_size,
            self.geometry.road_width,
            self.geometry.lane_width,
        )

    # ── reference points ──────────────────────────────────────────────────

    def spawn_point(self, direction: Any) -> Optional[Point]:
        return self._points.spawn_point(direction)

    def exit_point(self, direction: Any) -> Optional[Point]:
        return self._points.exit_point(direction)

    def exit_boundary_point(self, direction: Any) -> Optional[Point]:
        return self._points.exit_boundary_point(direction)

    def path_entry_point(self, direction: Any) -> Optional[Point]:
        return self._points.path_entry_point(direction)

    def stop_line(self, direction: Any) -> Optional[StopLine]:
        return self._points.stop_line(direction)

    def light_anchor(self, direction: Any) -> Optional[Point]:
        return self._points.light_anchor(direction)

    def lane_centers(self, direction: Any) -> Optional[Tuple[float, float]]:
        return self._points.lane_centers(direction)

    def heading(self, direction: Any) -> Optional[Point]:
        return self._points.heading(direction)

    # ── movements ─────────────────────────────────────────────────────────

    def trajectory(self, from_dir: Any, to_dir: Any) -> Optional[Trajectory]:
        return self._cache.lookup(from_dir, to_dir)

    def turn_type(self, from_dir: Any, to_dir: Any) -> Optional[TurnType]:
        return classify(from_dir, to_dir)

    def target_direction(self, from_dir: Any, turn: Any) -> Optional[Direction]:
        return target_direction(from_dir, turn)

    def routes(self) -> List[PairKey]:
        return list(valid_pairs())

    # ── occupancy ─────────────────────────────────────────────────────────

    def contains_point(self, x: float, y: float) -> bool:
        """True if ``(x, y)`` lies inside the footprint (edges inclusive)."""
        c = self.geometry.center
        hs = self.geometry.half_size
        return c.x - hs <= x <= c.x + hs and c.y - hs <= y <= c.y + hs

    # ── export ────────────────────────────────────────────────────────────

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict export of every reference point and trajectory."""
        g = self.geometry
        directions = {}
        for d in Direction:
            inbound, outbound = self.lane_centers(d)
            directions[d.value] = {
                "spawn_point": self.spawn_point(d).as_dict(),
                "exit_point": self.exit_point(d).as_dict(),
                "exit_boundary_point": self.exit_boundary_point(d).as_dict(),
                "path_entry_point": self.path_entry_point(d).as_dict(),
                "stop_line": self.stop_line(d).as_dict(),
                "light_anchor": self.light_anchor(d).as_dict(),
                "lane_centers": {"inbound": inbound, "outbound": outbound},
            }
        trajectories = []
        for src, dst in self.routes():
            trajectories.append({
                "from": src.value,
                "to": dst.value,
                "turn": self.turn_type(src, dst).value,
                "points": [p.as_dict() for p in self.trajectory(src, dst)],
            })
        return {
            "center": g.center.as_dict(),
            "intersection_size": g.intersection_size,
            "road_width": g.road_width,
            "lane_width": g.lane_width,
            "canvas": {"width": g.canvas_width, "height": g.canvas_height},
            "directions": directions,
            "trajectories": trajectories,
        }
