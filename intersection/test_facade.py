#!/usr/bin/env python3
"""
Facade-level behaviour: concrete example values, translation invariance,
occupancy test and the "no result" policy for bad input.
"""

from __future__ import annotations

import unittest

from intersection import (
    Direction,
    GeometryConfig,
    IntersectionFacade,
    Point,
    TurnType,
    valid_pairs,
)

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


class ConcreteExampleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geo = IntersectionFacade(GeometryConfig(
            center=Point(600.0, 600.0), road_width=60.0, lane_width=30.0, steps=20,
        ))

    def test_reference_values(self) -> None:
        self.assertEqual(self.geo.path_entry_point("north"), Point(585.0, 570.0))
        self.assertEqual(self.geo.exit_point("north"), Point(615.0, 570.0))
        self.assertEqual(self.geo.exit_point("south"), Point(585.0, 630.0))

    def test_north_south_is_straight_segment(self) -> None:
        self.assertIs(self.geo.turn_type(N, S), TurnType.STRAIGHT)
        self.assertEqual(self.geo.trajectory(N, S),
                         (Point(585.0, 570.0), Point(585.0, 630.0)))

    def test_north_east_is_right_with_21_points(self) -> None:
        self.assertIs(self.geo.turn_type(N, E), TurnType.RIGHT)
        self.assertEqual(len(self.geo.trajectory(N, E)), 21)

    def test_default_geometry_matches_config(self) -> None:
        default = IntersectionFacade()
        self.assertEqual(default.path_entry_point(N), Point(585.0, 570.0))
        self.assertEqual(len(default.routes()), 12)


class TranslationInvarianceTests(unittest.TestCase):
    def test_every_point_shifts_by_delta(self) -> None:
        dx, dy = 37.5, -12.25
        base = IntersectionFacade(GeometryConfig())
        moved = IntersectionFacade(GeometryConfig().translated(dx, dy))

        def check(p, q):
            self.assertAlmostEqual(q.x, p.x + dx, delta=1e-9)
            self.assertAlmostEqual(q.y, p.y + dy, delta=1e-9)

        for d in Direction:
            for accessor in ("spawn_point", "exit_point", "exit_boundary_point",
                             "path_entry_point", "light_anchor"):
                check(getattr(base, accessor)(d), getattr(moved, accessor)(d))
            check(base.stop_line(d).start, moved.stop_line(d).start)
            check(base.stop_line(d).end, moved.stop_line(d).end)
        for src, dst in valid_pairs():
            a = base.trajectory(src, dst)
            b = moved.trajectory(src, dst)
            self.assertEqual(len(a), len(b))
            for p, q in zip(a, b):
                check(p, q)


class ContainsPointTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geo = IntersectionFacade()

    def test_inside_and_edges(self) -> None:
        self.assertTrue(self.geo.contains_point(600.0, 600.0))
        self.assertTrue(self.geo.contains_point(540.0, 660.0))
        self.assertTrue(self.geo.contains_point(660.0, 540.0))

    def test_outside(self) -> None:
        self.assertFalse(self.geo.contains_point(539.9, 600.0))
        self.assertFalse(self.geo.contains_point(600.0, 660.1))
        # stop lines sit outside the footprint
        for d in Direction:
            self.assertFalse(self.geo.contains_point(*self.geo.stop_line(d).midpoint))

    def test_all_trajectories_start_and_end_inside(self) -> None:
        for src, dst in self.geo.routes():
            path = self.geo.trajectory(src, dst)
            self.assertTrue(self.geo.contains_point(*path[0]))
            self.assertTrue(self.geo.contains_point(*path[-1]))


class NoResultPolicyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geo = IntersectionFacade()

    def test_invalid_direction_never_falls_back_to_center(self) -> None:
        for accessor in (self.geo.spawn_point, self.geo.exit_point,
                         self.geo.exit_boundary_point, self.geo.path_entry_point,
                         self.geo.stop_line, self.geo.light_anchor,
                         self.geo.lane_centers, self.geo.heading):
            self.assertIsNone(accessor("middle"))

    def test_degenerate_pair(self) -> None:
        self.assertIsNone(self.geo.turn_type(N, N))
        self.assertIsNone(self.geo.trajectory(N, N))
        self.assertIsNone(self.geo.trajectory("n", "north"))

    def test_determinism(self) -> None:
        other = IntersectionFacade()
        for src, dst in valid_pairs():
            self.assertEqual(self.geo.trajectory(src, dst), other.trajectory(src, dst))
            self.assertIs(self.geo.turn_type(src, dst), other.turn_type(src, dst))

    def test_target_direction(self) -> None:
        self.assertIs(self.geo.target_direction(N, TurnType.LEFT), W)
        self.assertIsNone(self.geo.target_direction(N, "backwards"))


class SnapshotTests(unittest.TestCase):
    def test_snapshot_covers_all_geometry(self) -> None:
        snap = IntersectionFacade().snapshot()
        self.assertEqual(set(snap["directions"]), {"north", "east", "south", "west"})
        self.assertEqual(len(snap["trajectories"]), 12)
        north = snap["directions"]["north"]
        self.assertEqual(north["path_entry_point"], {"x": 585.0, "y": 570.0})
        self.assertEqual(north["lane_centers"], {"inbound": 585.0, "outbound": 615.0})
        first = snap["trajectories"][0]
        self.assertEqual((first["from"], first["to"], first["turn"]),
                         ("north", "east", "right"))
        self.assertEqual(len(first["points"]), 21)


if __name__ == "__main__":
    unittest.main()
