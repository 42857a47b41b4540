#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (34, 92, 44)
    ROAD_COLOR: ColorRGB = (68, 68, 68)
    INTERSECTION_COLOR: ColorRGB = (102, 102, 102)
    LANE_DASH_COLOR: ColorRGB = (255, 255, 255)
    STOP_LINE_COLOR: ColorRGB = (255, 255, 255)
    LIGHT_HOUSING_COLOR: ColorRGB = (25, 25, 25)
    LIGHT_COLOR: ColorRGB = (255, 200, 0)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)

    TURN_COLORS = {
        "straight": (86, 168, 255),
        "left": (255, 136, 0),
        "right": (0, 255, 127),
    }

    DASH_LEN = 10
    DASH_GAP = 10
    STOP_LINE_WIDTH = 4
    LIGHT_SIZE = 12
    TRAJECTORY_ALPHA = 160
    VEHICLE_LENGTH = 16
    VEHICLE_WIDTH = 8

    DEFAULT_VEHICLE_COLORS: Sequence[ColorRGB] = (
        (255, 0, 0),
        (0, 255, 0),
        (0, 0, 255),
        (255, 255, 0),
        (255, 165, 0),
        (255, 255, 255),
        (0, 0, 0),
        (136, 136, 136),
    )

    LEGEND_ITEMS: Sequence[Tuple[str, ColorRGB]] = (
        ("STRAIGHT", (86, 168, 255)),
        ("LEFT", (255, 136, 0)),
        ("RIGHT", (0, 255, 127)),
    )

    SCREENSHOT_DIR = "screenshots"
