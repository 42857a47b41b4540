#!/usr/bin/env python3
"""
intersection/trajectory.py
==========================
Synthesis and caching of the sampled path a vehicle follows through the
intersection.

Straight movements are the two-point segment ``entry → exit``.  Turns
use one construction for every direction pair: a quarter arc around the
*corner point* where the entry boundary line meets the exit boundary
line.  With ``u = entry - k`` and ``v = exit - k`` (always orthogonal)
the curve is ``p(θ) = k + u·cos θ + v·sin θ`` for ``θ ∈ [0, π/2]``.
Under mirrored lane offsets ``|u| == |v|``, so this is a true quarter
circle.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import numpy as np

from intersection.directions import Direction, TurnType, classify, valid_pairs
from intersection.geometry import Point
from intersection.reference_points import ReferencePointCalculator, outward_axis

log = logging.getLogger("trajectory")

Trajectory = Tuple[Point, ...]
PairKey = Tuple[Direction, Direction]


def _parse_pair(from_dir: Any, to_dir: Any) -> Optional[PairKey]:
    src = Direction.parse(from_dir)
    dst = Direction.parse(to_dir)
    if src is None or dst is None:
        log.warning("Invalid direction pair (%r, %r)", from_dir, to_dir)
        return None
    if src is dst:
        log.debug("Rejected degenerate pair %s → %s", src.value, dst.value)
        return None
    return src, dst


class TrajectorySynthesizer:
    """Builds immutable trajectories from reference entry / exit points."""

    def __init__(self, points: ReferencePointCalculator) -> None:
        self.points = points
        self.steps = points.geometry.steps

    def synthesize(self, from_dir: Any, to_dir: Any) -> Optional[Trajectory]:
        """Sampled path from the entry of *from_dir* to the exit of *to_dir*.

        Returns ``None`` for invalid or same-direction pairs.
        """
        pair = _parse_pair(from_dir, to_dir)
        if pair is None:
            return None
        src, dst = pair
        entry = self.points.path_entry_point(src)
        exit_ = self.points.exit_point(dst)

        if classify(src, dst) is TurnType.STRAIGHT:
            return (entry, exit_)
        return self._quarter_arc(src, entry, exit_)

    def _quarter_arc(self, src: Direction, entry: Point, exit_: Point) -> Trajectory:
        # Entry boundary line is perpendicular to the approach axis.
        if outward_axis(src).x == 0.0:
            corner = Point(exit_.x, entry.y)
        else:
            corner = Point(entry.x, exit_.y)

        theta = np.linspace(0.0, np.pi / 2.0, self.steps + 1)
        cos_t = np.cos(theta)
        sin_t = np.sin(theta)
        xs = corner.x + (entry.x - corner.x) * cos_t + (exit_.x - corner.x) * sin_t
        ys = corner.y + (entry.y - corner.y) * cos_t + (exit_.y - corner.y) * sin_t

        # cos(π/2) is not exactly zero; pin the endpoints.
        inner = tuple(Point(float(x), float(y)) for x, y in zip(xs[1:-1], ys[1:-1]))
        return (entry,) + inner + (exit_,)


class TrajectoryCache:
    """Fixed table of trajectories for all 12 valid direction pairs.

    The table is filled once in ``__init__``.  Lookups of pairs missing
    from it fall back to on-demand synthesis without storing the result.
    """

    def __init__(self, synthesizer: TrajectorySynthesizer) -> None:
        self.synthesizer = synthesizer
        table: Dict[PairKey, Trajectory] = {}
        for src, dst in valid_pairs():
            table[(src, dst)] = synthesizer.synthesize(src, dst)
        self._table = table
        log.info("Precomputed %d trajectories (steps=%d)",
                 len(table), synthesizer.steps)

    @property
    def table(self) -> Mapping[PairKey, Trajectory]:
        return MappingProxyType(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, pair: Any) -> bool:
        try:
            from_dir, to_dir = pair
        except (TypeError, ValueError):
            return False
        key = (Direction.parse(from_dir), Direction.parse(to_dir))
        return key in self._table

    def __iter__(self) -> Iterator[PairKey]:
        return iter(self._table)

    def lookup(self, from_dir: Any, to_dir: Any) -> Optional[Trajectory]:
        pair = _parse_pair(from_dir, to_dir)
        if pair is None:
            return None
        cached = self._table.get(pair)
        if cached is not None:
            return cached
        log.warning("Trajectory %s → %s missing from cache; synthesising on demand",
                    pair[0].value, pair[1].value)
        return self.synthesizer.synthesize(*pair)
