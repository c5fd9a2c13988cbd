"""FastAPI app for cross-frame runs, treatment application and plan files.

``CORS_ORIGINS`` (comma separated) enables CORS for those origins.
"""

import logging
import os
import time
from typing import Iterable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from crossframe.api import __version__

from .routers.crossframe import router as crossframe_router
from .routers.health import router as health_router
from .routers.plans import router as plans_router
from .routers.progress import router as progress_router
from .routers.treatments import router as treatments_router

API_PREFIX = "/api/v1"

logger = logging.getLogger("crossframe.backend")


class QuietPathsFilter(logging.Filter):
    """Drop access-log lines for polled paths."""

    def __init__(self, prefixes: Iterable[str]):
        super().__init__()
        self.prefixes = tuple(prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(p in msg for p in self.prefixes)


def _quiet_progress_polls() -> None:
    access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, QuietPathsFilter) for f in access.filters):
        access.addFilter(QuietPathsFilter([f"{API_PREFIX}/progress/"]))


def create_app() -> FastAPI:
    _quiet_progress_polls()
    application = FastAPI(
        title="crossframe Local API",
        version=__version__,
        description="Cross-frame variable treatment over HTTP",
    )

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
    if origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @application.middleware("http")
    async def time_runs(request: Request, call_next):
        t0 = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "%s %s failed after %.1fms: %s: %s",
                request.method, request.url.path, (time.perf_counter() - t0) * 1000, type(e).__name__, e,
            )
            raise
        if request.url.path.startswith(f"{API_PREFIX}/crossframe"):
            logger.info("cross frame %s in %.1fms", response.status_code, (time.perf_counter() - t0) * 1000)
        return response

    for router, tag in (
        (health_router, "health"),
        (crossframe_router, "crossframe"),
        (treatments_router, "treatments"),
        (progress_router, "progress"),
        (plans_router, "plans"),
    ):
        application.include_router(router, prefix=API_PREFIX, tags=[tag])

    @application.get("/healthz")
    def healthz():
        return {"ok": True}

    return application


app = create_app()
