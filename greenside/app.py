from __future__ import annotations

import logging
import os
import platform
import time
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from greenside import __version__
from greenside.api.routers import clubs, courses, profile, scorecards, sessions, shots
from greenside.errors import GreensideError
from greenside.metrics import BUILD_VERSION, MetricsMiddleware, metrics_app

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[str, int] = {
    "not_authenticated": 401,
    "external_service_failure": 502,
    "invalid_input": 422,
    "invalid_index": 404,
    "not_found": 404,
    "out_of_range": 200,
}

app = FastAPI(title="greenside", version=__version__)

allow = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost,http://127.0.0.1").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in allow if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)


@app.exception_handler(GreensideError)
async def _greenside_error(request: Request, exc: GreensideError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, 400)
    if status_code >= 500:
        logger.warning(
            "request failed on external service",
            extra={"path": request.url.path, "kind": exc.kind},
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "kind": exc.kind},
    )


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"detail": "internal error"})


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": BUILD_VERSION,
        "ts": time.time(),
        "runtime": {"python": platform.python_version()},
    }


@app.get("/metrics", include_in_schema=False)
async def metrics(request: Request):
    return await metrics_app(request)

app.include_router(courses.router)
app.include_router(clubs.router)
app.include_router(shots.router)
app.include_router(scorecards.router)
app.include_router(sessions.router)
app.include_router(profile.router)


__all__ = ["STATUS_BY_KIND", "app"]
