"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polyspiral import __version__
from polyspiral.config import settings
from polyspiral.engine import LayoutError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.polyspiral_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _layout_error_handler(request: Request, exc: LayoutError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="polyspiral",
        description="Polygon spiral text layout — segment widths and text for each side",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LayoutError, _layout_error_handler)

    from polyspiral.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
