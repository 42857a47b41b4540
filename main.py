#!/usr/bin/env python3
"""
main.py
=======
Entry point.  Builds the intersection geometry from :mod:`config`
(overridable through ``INTERSECTION_*`` environment variables) and runs
one of three modes::

    python main.py            # log a geometry summary and print JSON
    python main.py view       # Pygame debug view with demo traffic
    python main.py serve      # REST API on config.API_HOST:API_PORT
"""

import json
import logging
import os
import sys
from typing import Mapping, Optional

import config
from intersection import GeometryConfig, IntersectionFacade, Point
from logging_setup import setup_logging

log = logging.getLogger("main")

# env var suffix → (GeometryConfig field, type)
_ENV_FIELDS = {
    "INTERSECTION_SIZE": ("intersection_size", float),
    "INTERSECTION_ROAD_WIDTH": ("road_width", float),
    "INTERSECTION_LANE_WIDTH": ("lane_width", float),
    "INTERSECTION_CANVAS_WIDTH": ("canvas_width", float),
    "INTERSECTION_CANVAS_HEIGHT": ("canvas_height", float),
    "INTERSECTION_STEPS": ("steps", int),
    "INTERSECTION_SPAWN_DISTANCE": ("spawn_distance", float),
    "INTERSECTION_STOP_LINE_MARGIN": ("stop_line_margin", float),
    "INTERSECTION_LIGHT_MARGIN": ("light_margin", float),
}


def load_geometry(environ: Optional[Mapping[str, str]] = None) -> GeometryConfig:
    """Build a :class:`GeometryConfig` from defaults plus env overrides.

    Raises ``ValueError`` for unparsable or inconsistent values.
    """
    env = os.environ if environ is None else environ
    kwargs = {}
    for var, (name, cast) in _ENV_FIELDS.items():
        raw = env.get(var)
        if raw is not None:
            try:
                kwargs[name] = cast(raw)
            except ValueError as exc:
                raise ValueError(f"{var}={raw!r} is not a valid {cast.__name__}") from exc
    cx = float(env.get("INTERSECTION_CENTER_X", config.CENTER_X))
    cy = float(env.get("INTERSECTION_CENTER_Y", config.CENTER_Y))
    return GeometryConfig(center=Point(cx, cy), **kwargs)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if argv else "dump"
    level = logging.DEBUG if os.environ.get("INTERSECTION_DEBUG") else logging.INFO
    setup_logging(level)

    try:
        geometry = load_geometry()
    except ValueError as exc:
        log.error("Invalid geometry configuration: %s", exc)
        return 2

    facade = IntersectionFacade(geometry)

    if mode == "dump":
        for src, dst in facade.routes():
            path = facade.trajectory(src, dst)
            log.info("%-5s → %-5s %-8s %2d points", src.value, dst.value,
                     facade.turn_type(src, dst).value, len(path))
        print(json.dumps(facade.snapshot(), indent=2))
    elif mode == "view":
        from demo import DemoTraffic
        from ui import run_pygame_view
        run_pygame_view(facade, DemoTraffic(facade))
    elif mode == "serve":
        import uvicorn
        from intersection.api import create_app
        uvicorn.run(create_app(facade), host=config.API_HOST, port=config.API_PORT)
    else:
        log.error("Unknown mode %r (expected dump, view or serve)", mode)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
