#!/usr/bin/env python3
"""Vehicle sprite rendering and state sync (mixin)."""

from __future__ import annotations

import math
from typing import Any, Dict, Sequence, Tuple

import pygame

from .types import VehicleRenderState


class VehicleRenderer:
    """Mixin that draws feed vehicles as oriented rectangles."""

    vehicle_states: Dict[str, VehicleRenderState]

    def draw_vehicle(self, surface: pygame.Surface, vehicle: Any) -> None:
        state = self.vehicle_states.get(str(vehicle.get("id")))
        if state is None:
            return
        vp = self.viewport
        w = max(2, int(self.VEHICLE_LENGTH * vp.scale))
        h = max(2, int(self.VEHICLE_WIDTH * vp.scale))
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)
        color = tuple(vehicle.get("color", self.DEFAULT_VEHICLE_COLORS[0]))
        pygame.draw.rect(sprite, color, (0, 0, w, h), border_radius=2)
        pygame.draw.rect(sprite, (235, 235, 235), (0, 0, w, h), width=1, border_radius=2)

        # Screen y grows downward like the canvas, so negate for pygame's CCW rotation.
        angle = -math.degrees(math.atan2(state.heading_y, state.heading_x))
        rotated = pygame.transform.rotate(sprite, angle)
        dest = rotated.get_rect(center=self._i2(vp.canvas_to_screen(state.x, state.y)))
        surface.blit(rotated, dest)

    def _approach_heading(self, vehicle: Any) -> Tuple[float, float]:
        """Travel direction of a vehicle's approach arm, east if unknown."""
        src = vehicle.get("from")
        heading = self.facade.heading(src) if src is not None else None
        if heading is None:
            return 1.0, 0.0
        return heading.x, heading.y

    def _sync_vehicle_states(self, vehicles: Sequence[Any]) -> None:
        """Track positions, deriving heading from successive frames."""
        seen = set()
        for vehicle in vehicles:
            vid = str(vehicle.get("id"))
            seen.add(vid)
            x, y = float(vehicle["x"]), float(vehicle["y"])
            state = self.vehicle_states.get(vid)
            if state is None:
                hx, hy = vehicle.get("heading") or self._approach_heading(vehicle)
                self.vehicle_states[vid] = VehicleRenderState(x, y, hx, hy)
                continue
            dx, dy = x - state.x, y - state.y
            d = math.hypot(dx, dy)
            if d > 1e-6:
                state.heading_x, state.heading_y = dx / d, dy / d
            state.x, state.y = x, y
        for vid in list(self.vehicle_states):
            if vid not in seen:
                del self.vehicle_states[vid]
