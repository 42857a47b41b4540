"""
intersection/api.py
===================
Optional FastAPI server that exposes the intersection geometry as REST
endpoints.

Start the server::

    python -m intersection.api          # → http://localhost:8000/trajectory/north/east

Every "no result" from the facade (invalid direction, same-direction
pair) becomes an HTTP 404 with a short ``detail`` message.

.. note::

   This server is **not** required by the Pygame view or the demo.
   It exists for external integrations and testing.
"""

import logging
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

import config
from intersection.directions import Direction
from intersection.facade import IntersectionFacade

log = logging.getLogger("api")

# ── Pydantic response schemas ────────────────────────────────────────────────


class PointModel(BaseModel):
    x: float
    y: float


class StopLineModel(BaseModel):
    start: PointModel
    end: PointModel


class LaneCentersModel(BaseModel):
    inbound: float
    outbound: float


class ReferencePointsResponse(BaseModel):
    """All fixed reference points of one approach."""
    direction: str
    spawn_point: PointModel
    path_entry_point: PointModel
    exit_point: PointModel
    exit_boundary_point: PointModel
    stop_line: StopLineModel
    light_anchor: PointModel
    lane_centers: LaneCentersModel


class TurnTypeResponse(BaseModel):
    from_direction: str
    to_direction: str
    turn: str


class TrajectoryResponse(BaseModel):
    from_direction: str
    to_direction: str
    turn: str
    points: List[PointModel]


class ContainsResponse(BaseModel):
    x: float
    y: float
    inside: bool


# ── FastAPI application ──────────────────────────────────────────────────────

def _direction_or_404(value: str) -> Direction:
    direction = Direction.parse(value)
    if direction is None:
        raise HTTPException(status_code=404, detail=f"Unknown direction: {value!r}")
    return direction


def create_app(facade: Optional[IntersectionFacade] = None) -> FastAPI:
    """Build the REST app around *facade* (default geometry if ``None``)."""
    geo = facade if facade is not None else IntersectionFacade()

    app = FastAPI(
        title="Intersection Geometry API",
        description="Reference points and vehicle trajectories of a four-way intersection.",
        version="1.0",
    )

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/directions", response_model=List[str])
    def directions():
        return [d.value for d in Direction]

    @app.get("/reference-points/{direction}", response_model=ReferencePointsResponse)
    def reference_points(direction: str):
        d = _direction_or_404(direction)
        inbound, outbound = geo.lane_centers(d)
        return ReferencePointsResponse(
            direction=d.value,
            spawn_point=PointModel(**geo.spawn_point(d).as_dict()),
            path_entry_point=PointModel(**geo.path_entry_point(d).as_dict()),
            exit_point=PointModel(**geo.exit_point(d).as_dict()),
            exit_boundary_point=PointModel(**geo.exit_boundary_point(d).as_dict()),
            stop_line=StopLineModel(**geo.stop_line(d).as_dict()),
            light_anchor=PointModel(**geo.light_anchor(d).as_dict()),
            lane_centers=LaneCentersModel(inbound=inbound, outbound=outbound),
        )

    @app.get("/turn-type/{from_direction}/{to_direction}", response_model=TurnTypeResponse)
    def turn_type(from_direction: str, to_direction: str):
        src = _direction_or_404(from_direction)
        dst = _direction_or_404(to_direction)
        turn = geo.turn_type(src, dst)
        if turn is None:
            raise HTTPException(status_code=404, detail="No movement between identical directions")
        return TurnTypeResponse(
            from_direction=src.value, to_direction=dst.value, turn=turn.value,
        )

    @app.get("/trajectory/{from_direction}/{to_direction}", response_model=TrajectoryResponse)
    def trajectory(from_direction: str, to_direction: str):
        src = _direction_or_404(from_direction)
        dst = _direction_or_404(to_direction)
        points = geo.trajectory(src, dst)
        if points is None:
            raise HTTPException(status_code=404, detail="No trajectory between identical directions")
        return TrajectoryResponse(
            from_direction=src.value,
            to_direction=dst.value,
            turn=geo.turn_type(src, dst).value,
            points=[PointModel(x=p.x, y=p.y) for p in points],
        )

    @app.get("/contains", response_model=ContainsResponse)
    def contains(x: float, y: float):
        return ContainsResponse(x=x, y=y, inside=geo.contains_point(x, y))

    return app


app = create_app()


# ── Standalone entry point ───────────────────────────────────────────────────

if __name__ == "__main__":
    print(f"Starting intersection geometry server on http://{config.API_HOST}:{config.API_PORT} …")
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
