#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via ``INTERSECTION_*`` environment variables
(see :mod:`main`).  This module is a thin, import-safe leaf — it never
imports from other project packages.
"""

# ── Canvas ───────────────────────────────────────────────────────────────────
CANVAS_WIDTH: int = 1200
CANVAS_HEIGHT: int = 1200

# ── Intersection geometry (pixels) ───────────────────────────────────────────
CENTER_X: float = 600.0
CENTER_Y: float = 600.0
INTERSECTION_SIZE: float = 120.0
ROAD_WIDTH: float = 60.0
LANE_WIDTH: float = 30.0

# ── Derived-geometry tunables ────────────────────────────────────────────────
TRAJECTORY_STEPS: int = 20        # samples per turning path (steps + 1 points)
SPAWN_DISTANCE: float = 300.0     # centre → far-field spawn / exit points
STOP_LINE_MARGIN: float = 5.0     # footprint edge → stop line
LIGHT_MARGIN: float = 15.0        # road / footprint edge → signal anchor

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 900
WINDOW_HEIGHT: int = 900
TARGET_FPS: int = 60

# ── Demo traffic ─────────────────────────────────────────────────────────────
DEFAULT_VEHICLE_COUNT: int = 6
DEFAULT_VEHICLE_SPEED: float = 60.0   # pixels per second

# ── REST surface ─────────────────────────────────────────────────────────────
API_HOST: str = "0.0.0.0"
API_PORT: int = 8000
