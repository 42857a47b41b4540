#!/usr/bin/env python3
"""
Quick demo — runs the Pygame view with fake vehicles that follow the
precomputed trajectories, so you can see the geometry in motion without
any traffic-control backend.

Usage:
    python3 demo.py
"""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Dict, List, Optional, Sequence, Tuple

import config
from intersection import IntersectionFacade, Point

log = logging.getLogger("demo")


def _cumulative_lengths(path: Sequence[Point]) -> List[float]:
    out = [0.0]
    for a, b in zip(path, path[1:]):
        out.append(out[-1] + math.hypot(b.x - a.x, b.y - a.y))
    return out


def point_at_distance(path: Sequence[Point], lengths: Sequence[float], s: float) -> Point:
    """Linear interpolation along *path* at arc length *s* (clamped)."""
    if s <= 0.0:
        return path[0]
    if s >= lengths[-1]:
        return path[-1]
    for i in range(1, len(lengths)):
        if lengths[i] >= s:
            seg = lengths[i] - lengths[i - 1]
            t = 0.0 if seg <= 0.0 else (s - lengths[i - 1]) / seg
            a, b = path[i - 1], path[i]
            return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)
    return path[-1]


class DemoTraffic:
    """Fake vehicle feed driven entirely by facade geometry.

    Each vehicle drives ``spawn_point(from) → trajectory(from, to) →
    exit_boundary_point(to)`` at constant speed, then respawns on a new
    random route.
    """

    def __init__(
        self,
        facade: IntersectionFacade,
        count: int = config.DEFAULT_VEHICLE_COUNT,
        speed: float = config.DEFAULT_VEHICLE_SPEED,
        seed: Optional[int] = None,
        colors: Sequence[Tuple[int, int, int]] = (
            (255, 0, 0), (0, 255, 0), (0, 0, 255),
            (255, 255, 0), (255, 165, 0), (255, 255, 255),
        ),
    ):
        self.facade = facade
        self.count = count
        self.speed = speed
        self.colors = tuple(colors)
        self._seed = seed
        self.reset()

    def reset(self) -> None:
        """Re-initialise all vehicles so the demo can be replayed."""
        self._rng = random.Random(self._seed)
        self._next_id = 0
        self._vehicles: List[Dict[str, Any]] = []
        for i in range(self.count):
            # stagger the start so vehicles do not overlap at spawn
            self._vehicles.append(self._spawn(start_offset=i * 40.0))

    def _spawn(self, start_offset: float = 0.0) -> Dict[str, Any]:
        src, dst = self._rng.choice(self.facade.routes())
        path = (
            (self.facade.spawn_point(src),)
            + self.facade.trajectory(src, dst)
            + (self.facade.exit_boundary_point(dst),)
        )
        lengths = _cumulative_lengths(path)
        index = self._next_id
        vid = f"CAR_{index:03d}"
        self._next_id += 1
        log.debug("Spawned %s on %s → %s", vid, src.value, dst.value)
        return {
            "id": vid,
            "from": src.value,
            "to": dst.value,
            "turn": self.facade.turn_type(src, dst).value,
            "color": self.colors[index % len(self.colors)],
            "_path": path,
            "_lengths": lengths,
            "_s": -start_offset,
        }

    def update(self, dt: float) -> None:
        for i, v in enumerate(self._vehicles):
            v["_s"] += self.speed * dt
            if v["_s"] >= v["_lengths"][-1]:
                self._vehicles[i] = self._spawn()

    def get_vehicles(self) -> List[Dict[str, Any]]:
        out = []
        for v in self._vehicles:
            if v["_s"] < 0.0:
                continue
            p = point_at_distance(v["_path"], v["_lengths"], v["_s"])
            public = {k: val for k, val in v.items() if not k.startswith("_")}
            public["x"], public["y"] = p.x, p.y
            out.append(public)
        return out


if __name__ == "__main__":
    from logging_setup import setup_logging
    from ui import run_pygame_view

    setup_logging(logging.INFO)
    facade = IntersectionFacade()
    print("Starting demo with fake traffic...")
    print("Controls: SPACE=pause  +/-=zoom  T=paths  F3=debug  L=legend  F12=screenshot  R=reset")
    run_pygame_view(facade, DemoTraffic(facade))
