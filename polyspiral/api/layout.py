"""POST /api/layout — full spiral layout."""

from __future__ import annotations

import json
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from polyspiral.dependencies import get_engine_config
from polyspiral.engine import EngineConfig, LayoutError, iter_segments, layout as run_layout
from polyspiral.engine.context import SpiralConfig
from polyspiral.models.requests import LayoutRequest
from polyspiral.models.responses import LayoutResponse, SegmentOut

router = APIRouter()


def _event(name: str, payload: dict) -> str:
    return f"event: {name}\ndata: {json.dumps(payload)}\n\n"


async def _stream_layout(config: SpiralConfig, engine: EngineConfig) -> AsyncGenerator[str, None]:
    """Yield one SSE event per side, then a summary once the spiral is full."""
    start = time.perf_counter()
    count = 0
    try:
        for segment in iter_segments(config, engine):
            count += 1
            yield _event("segment", SegmentOut.from_segment(segment).model_dump())
    except LayoutError as e:
        yield _event("error", {"type": "error", "error": type(e).__name__, "detail": str(e)})
        return

    elapsed = (time.perf_counter() - start) * 1000
    yield _event("result", {"segments": count, "processing_time_ms": round(elapsed, 1)})
    yield _event("done", {"type": "done"})


@router.post("/layout/stream")
async def layout_stream(
    req: LayoutRequest,
    engine: EngineConfig = Depends(get_engine_config),
) -> StreamingResponse:
    return StreamingResponse(
        _stream_layout(req.to_config(), engine),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/layout", response_model=LayoutResponse)
async def layout(
    req: LayoutRequest,
    engine: EngineConfig = Depends(get_engine_config),
) -> LayoutResponse:
    start = time.perf_counter()
    result = run_layout(req.to_config(), engine)
    elapsed = (time.perf_counter() - start) * 1000
    return LayoutResponse.from_layout(result, processing_time_ms=round(elapsed, 1))
