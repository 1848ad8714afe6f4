"""POST /api/measure — polygon geometry and width schedule, no text."""

from __future__ import annotations

from fastapi import APIRouter

from polyspiral.engine import measure_geometry, outer_width_profile
from polyspiral.models.requests import MeasureRequest
from polyspiral.models.responses import ContractionOut, MeasureResponse, ShapeOut

router = APIRouter()


@router.post("/measure", response_model=MeasureResponse)
async def measure(req: MeasureRequest) -> MeasureResponse:
    shape, contraction = measure_geometry(req.size, req.font_size, req.sides, req.spacing)
    widths = outer_width_profile(shape, contraction, req.count)
    return MeasureResponse(
        shape=ShapeOut.from_shape(shape),
        contraction=ContractionOut.from_contraction(contraction),
        widths=[round(float(w), 4) for w in widths],
    )
