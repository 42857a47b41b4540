#!/usr/bin/env python3
"""
Reference-point geometry tests (default 1200×1200 canvas, centre 600,600,
road 60, lane 30, footprint 120).
"""

from __future__ import annotations

import unittest

from intersection.directions import Direction
from intersection.geometry import GeometryConfig, Point
from intersection.reference_points import ReferencePointCalculator, StopLine

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def _config(**overrides) -> GeometryConfig:
    base = dict(
        center=Point(600.0, 600.0),
        intersection_size=120.0,
        road_width=60.0,
        lane_width=30.0,
        canvas_width=1200.0,
        canvas_height=1200.0,
        steps=20,
        spawn_distance=300.0,
        stop_line_margin=5.0,
        light_margin=15.0,
    )
    base.update(overrides)
    return GeometryConfig(**base)


class ReferencePointTests(unittest.TestCase):
    def setUp(self) -> None:
        self.calc = ReferencePointCalculator(_config())

    def test_entry_points(self) -> None:
        self.assertEqual(self.calc.path_entry_point(N), Point(585.0, 570.0))
        self.assertEqual(self.calc.path_entry_point(E), Point(630.0, 585.0))
        self.assertEqual(self.calc.path_entry_point(S), Point(615.0, 630.0))
        self.assertEqual(self.calc.path_entry_point(W), Point(570.0, 615.0))

    def test_exit_points_mirror_entry(self) -> None:
        self.assertEqual(self.calc.exit_point(N), Point(615.0, 570.0))
        self.assertEqual(self.calc.exit_point(E), Point(630.0, 615.0))
        self.assertEqual(self.calc.exit_point(S), Point(585.0, 630.0))
        self.assertEqual(self.calc.exit_point(W), Point(570.0, 585.0))
        for d in Direction:
            self.assertNotEqual(self.calc.path_entry_point(d), self.calc.exit_point(d))

    def test_stop_lines_span_road_outside_footprint(self) -> None:
        self.assertEqual(self.calc.stop_line(N),
                         StopLine(Point(630.0, 535.0), Point(570.0, 535.0)))
        self.assertEqual(self.calc.stop_line(E),
                         StopLine(Point(665.0, 630.0), Point(665.0, 570.0)))
        self.assertEqual(self.calc.stop_line(S),
                         StopLine(Point(570.0, 665.0), Point(630.0, 665.0)))
        self.assertEqual(self.calc.stop_line(W),
                         StopLine(Point(535.0, 570.0), Point(535.0, 630.0)))
        self.assertEqual(self.calc.stop_line(N).midpoint, Point(600.0, 535.0))

    def test_light_anchors_sit_off_the_road(self) -> None:
        self.assertEqual(self.calc.light_anchor(N), Point(555.0, 525.0))
        self.assertEqual(self.calc.light_anchor(E), Point(675.0, 555.0))
        self.assertEqual(self.calc.light_anchor(S), Point(645.0, 675.0))
        self.assertEqual(self.calc.light_anchor(W), Point(525.0, 645.0))
        for d in Direction:
            p = self.calc.light_anchor(d)
            # outside both road bands
            self.assertGreater(abs(p.x - 600.0), 30.0)
            self.assertGreater(abs(p.y - 600.0), 30.0)

    def test_spawn_and_far_exit_on_axis(self) -> None:
        self.assertEqual(self.calc.spawn_point(N), Point(600.0, 300.0))
        self.assertEqual(self.calc.spawn_point(E), Point(900.0, 600.0))
        self.assertEqual(self.calc.exit_boundary_point(S), Point(600.0, 900.0))
        self.assertEqual(self.calc.exit_boundary_point(W), Point(300.0, 600.0))

    def test_lane_centers_and_heading(self) -> None:
        self.assertEqual(self.calc.lane_centers(N), (585.0, 615.0))
        self.assertEqual(self.calc.lane_centers(E), (585.0, 615.0))
        self.assertEqual(self.calc.lane_centers(S), (615.0, 585.0))
        h = self.calc.heading(N)
        self.assertAlmostEqual(h.x, 0.0)
        self.assertAlmostEqual(h.y, 1.0)

    def test_invalid_direction_returns_none(self) -> None:
        with self.assertLogs("geometry", level="WARNING"):
            self.assertIsNone(self.calc.light_anchor("northeast"))
        for accessor in (self.calc.spawn_point, self.calc.exit_point,
                         self.calc.path_entry_point, self.calc.stop_line,
                         self.calc.exit_boundary_point, self.calc.lane_centers,
                         self.calc.heading):
            self.assertIsNone(accessor(None))

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.calc._entry[N] = Point(0.0, 0.0)


class GeometryConfigTests(unittest.TestCase):
    def test_frozen(self) -> None:
        cfg = _config()
        with self.assertRaises(Exception):
            cfg.road_width = 10.0

    def test_tuple_center_is_coerced(self) -> None:
        cfg = _config(center=(100.0, 200.0))
        self.assertIsInstance(cfg.center, Point)

    def test_rejects_inconsistent_values(self) -> None:
        bad = [
            dict(road_width=0.0),
            dict(lane_width=90.0),
            dict(lane_width=60.0),
            dict(lane_width=31.0),
            dict(road_width=200.0),
            dict(steps=0),
            dict(steps=2.5),
            dict(spawn_distance=50.0),
            dict(stop_line_margin=-1.0),
            dict(center=Point(1300.0, 10.0)),
        ]
        for overrides in bad:
            with self.assertRaises(ValueError, msg=repr(overrides)):
                _config(**overrides)

    def test_single_lane_road_is_rejected(self) -> None:
        # entry of one arm would coincide with the exit of its left neighbour
        with self.assertRaises(ValueError):
            _config(road_width=60.0, lane_width=60.0)

    def test_widest_lanes_keep_left_turn_endpoints_apart(self) -> None:
        calc = ReferencePointCalculator(_config(road_width=60.0, lane_width=30.0))
        for d, left in ((N, W), (E, N), (S, E), (W, S)):
            self.assertNotEqual(calc.path_entry_point(d), calc.exit_point(left))

    def test_translated_moves_only_center(self) -> None:
        cfg = _config()
        moved = cfg.translated(10.0, -20.0)
        self.assertEqual(moved.center, Point(610.0, 580.0))
        self.assertEqual(moved.road_width, cfg.road_width)
        self.assertEqual(moved.canvas_width, cfg.canvas_width)


if __name__ == "__main__":
    unittest.main()
