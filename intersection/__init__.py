"""
intersection — Geometry & trajectory engine
===========================================

Modules
-------
directions
    :class:`Direction`, :class:`TurnType` and the :func:`classify` turn classifier.
geometry
    :class:`Point` and the frozen :class:`GeometryConfig`.
reference_points
    :class:`ReferencePointCalculator` — spawn, entry, exit, stop-line and light anchors.
trajectory
    :class:`TrajectorySynthesizer` and the fixed :class:`TrajectoryCache`.
facade
    :class:`IntersectionFacade` public read-only surface.
api
    Optional FastAPI app exposing the facade over HTTP.
"""

from .directions import Direction, TurnType, classify, target_direction, valid_pairs
from .geometry import GeometryConfig, Point
from .reference_points import ReferencePointCalculator, StopLine
from .trajectory import Trajectory, TrajectoryCache, TrajectorySynthesizer
from .facade import IntersectionFacade

__all__ = [
    "Direction",
    "TurnType",
    "classify",
    "target_direction",
    "valid_pairs",
    "GeometryConfig",
    "Point",
    "ReferencePointCalculator",
    "StopLine",
    "Trajectory",
    "TrajectoryCache",
    "TrajectorySynthesizer",
    "IntersectionFacade",
]
