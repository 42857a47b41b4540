#!/usr/bin/env python3
"""
REST surface tests (FastAPI TestClient, no server process).
"""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from intersection import GeometryConfig, IntersectionFacade, Point
from intersection.api import create_app


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        facade = IntersectionFacade(GeometryConfig(center=Point(600.0, 600.0)))
        cls.client = TestClient(create_app(facade))

    def test_health_and_directions(self) -> None:
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})
        self.assertEqual(self.client.get("/directions").json(),
                         ["north", "east", "south", "west"])

    def test_reference_points(self) -> None:
        resp = self.client.get("/reference-points/N")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["direction"], "north")
        self.assertEqual(body["path_entry_point"], {"x": 585.0, "y": 570.0})
        self.assertEqual(body["exit_point"], {"x": 615.0, "y": 570.0})
        self.assertEqual(body["stop_line"]["start"], {"x": 630.0, "y": 535.0})

    def test_turn_type(self) -> None:
        body = self.client.get("/turn-type/north/west").json()
        self.assertEqual(body["turn"], "left")

    def test_trajectory(self) -> None:
        body = self.client.get("/trajectory/north/south").json()
        self.assertEqual(body["turn"], "straight")
        self.assertEqual(body["points"], [{"x": 585.0, "y": 570.0},
                                          {"x": 585.0, "y": 630.0}])
        body = self.client.get("/trajectory/east/south").json()
        self.assertEqual(len(body["points"]), 21)

    def test_no_result_maps_to_404(self) -> None:
        for url in ("/reference-points/up",
                    "/turn-type/north/north",
                    "/trajectory/south/south",
                    "/trajectory/north/nowhere"):
            resp = self.client.get(url)
            self.assertEqual(resp.status_code, 404, msg=url)
            self.assertIn("detail", resp.json())

    def test_contains(self) -> None:
        self.assertTrue(self.client.get("/contains", params={"x": 600, "y": 600}).json()["inside"])
        self.assertFalse(self.client.get("/contains", params={"x": 0, "y": 0}).json()["inside"])
        self.assertEqual(self.client.get("/contains", params={"x": "a", "y": 0}).status_code, 422)


if __name__ == "__main__":
    unittest.main()
