#!/usr/bin/env python3
"""
intersection/reference_points.py
================================
Fixed reference geometry of the intersection, derived from a
:class:`~intersection.geometry.GeometryConfig`.

Every point is an offset from the configured centre along two unit
vectors per approach:

* the **outward axis** ``a`` pointing from the centre up the arm, and
* the **lateral axis** ``l = (a.y, -a.x)``, which is always the same
  rotational side of the arm.

Inbound lanes sit at ``+l * lane_offset`` and outbound lanes at
``-l * lane_offset`` (mirrored offsets, right-hand traffic).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from intersection.directions import Direction
from intersection.geometry import GeometryConfig, Point

log = logging.getLogger("geometry")

# Outward unit vector of each arm (screen coordinates, y grows south).
_OUTWARD: Dict[Direction, Point] = {
    Direction.NORTH: Point(0.0, -1.0),
    Direction.EAST: Point(1.0, 0.0),
    Direction.SOUTH: Point(0.0, 1.0),
    Direction.WEST: Point(-1.0, 0.0),
}


def outward_axis(direction: Direction) -> Point:
    return _OUTWARD[direction]


def lateral_axis(direction: Direction) -> Point:
    a = _OUTWARD[direction]
    return Point(a.y, -a.x)


class StopLine(NamedTuple):
    """Stop-line segment spanning the full road width."""
    start: Point
    end: Point

    @property
    def midpoint(self) -> Point:
        return Point((self.start.x + self.end.x) / 2.0,
                     (self.start.y + self.end.y) / 2.0)

    def as_dict(self) -> dict:
        return {"start": self.start.as_dict(), "end": self.end.as_dict()}


class ReferencePointCalculator:
    """Eagerly computes every per-direction reference point.

    All tables are built in ``__init__`` and exposed through read-only
    mappings; accessors return ``None`` for anything that is not a
    valid direction.
    """

    def __init__(self, geometry: GeometryConfig) -> None:
        self.geometry = geometry

        spawn: Dict[Direction, Point] = {}
        entry: Dict[Direction, Point] = {}
        exit_: Dict[Direction, Point] = {}
        boundary: Dict[Direction, Point] = {}
        stop: Dict[Direction, StopLine] = {}
        light: Dict[Direction, Point] = {}
        lanes: Dict[Direction, Tuple[float, float]] = {}

        c = geometry.center
        hr = geometry.half_road
        hs = geometry.half_size
        lo = geometry.lane_offset
        stop_dist = hs + geometry.stop_line_margin

        for d in Direction:
            a = outward_axis(d)
            lat = lateral_axis(d)
            edge = c.along(a, hr)

            entry[d] = edge.along(lat, lo)
            exit_[d] = edge.along(lat, -lo)

            stop_mid = c.along(a, stop_dist)
            stop[d] = StopLine(stop_mid.along(lat, -hr), stop_mid.along(lat, hr))

            light[d] = c.along(a, hs + geometry.light_margin).along(
                lat, hr + geometry.light_margin
            )

            spawn[d] = c.along(a, geometry.spawn_distance)
            boundary[d] = c.along(a, geometry.spawn_distance)

            # lane centrelines are vertical for N/S arms, horizontal for E/W
            if a.x == 0.0:
                lanes[d] = (entry[d].x, exit_[d].x)
            else:
                lanes[d] = (entry[d].y, exit_[d].y)

        self._spawn = MappingProxyType(spawn)
        self._entry = MappingProxyType(entry)
        self._exit = MappingProxyType(exit_)
        self._boundary = MappingProxyType(boundary)
        self._stop = MappingProxyType(stop)
        self._light = MappingProxyType(light)
        self._lanes = MappingProxyType(lanes)

        log.debug("Reference points computed for centre %s", tuple(c))

    # ── accessors ─────────────────────────────────────────────────────────

    @staticmethod
    def _get(table: Mapping[Direction, Any], direction: Any, what: str) -> Optional[Any]:
        d = Direction.parse(direction)
        if d is None:
            log.warning("Invalid direction for %s: %r", what, direction)
            return None
        return table[d]

    def spawn_point(self, direction: Any) -> Optional[Point]:
        return self._get(self._spawn, direction, "spawn_point")

    def exit_boundary_point(self, direction: Any) -> Optional[Point]:
        """Far-field point where vehicles leaving via *direction* are removed."""
        return self._get(self._boundary, direction, "exit_boundary_point")

    def path_entry_point(self, direction: Any) -> Optional[Point]:
        """Where the inbound lane of *direction* meets the intersection."""
        return self._get(self._entry, direction, "path_entry_point")

    def exit_point(self, direction: Any) -> Optional[Point]:
        """Where traffic leaving via *direction* crosses the boundary."""
        return self._get(self._exit, direction, "exit_point")

    def stop_line(self, direction: Any) -> Optional[StopLine]:
        return self._get(self._stop, direction, "stop_line")

    def light_anchor(self, direction: Any) -> Optional[Point]:
        return self._get(self._light, direction, "light_anchor")

    def lane_centers(self, direction: Any) -> Optional[Tuple[float, float]]:
        """``(inbound, outbound)`` lane-centre coordinates across the arm."""
        return self._get(self._lanes, direction, "lane_centers")

    def heading(self, direction: Any) -> Optional[Point]:
        """Unit travel vector of a vehicle entering from *direction*."""
        d = Direction.parse(direction)
        if d is None:
            log.warning("Invalid direction for heading: %r", direction)
            return None
        a = outward_axis(d)
        return Point(-a.x, -a.y)
