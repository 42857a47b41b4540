#!/usr/bin/env python3

from .types import ColorRGB, VehicleRenderState, Viewport
from .constants import ViewConstants
from .helpers import ViewHelpers
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer
from .pygame_view import PygameIntersectionView, run_pygame_view

__all__ = [
    "ColorRGB",
    "VehicleRenderState",
    "Viewport",
    "ViewConstants",
    "ViewHelpers",
    "RoadRenderer",
    "VehicleRenderer",
    "HudRenderer",
    "PygameIntersectionView",
    "run_pygame_view",
]
