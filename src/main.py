from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.alerts import router as alerts_router
from src.adapters.api.controllers.catalog import router as catalog_router
from src.adapters.api.controllers.chat import router as chat_router
from src.adapters.api.controllers.fleet import router as fleet_router
from src.adapters.api.dependencies import get_fleet_service
from src.adapters.settings import env_bool, tick_interval_from_env
from src.app.services.fleet_ticker import FleetTicker

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Build the fleet eagerly so broken configuration aborts startup.
    service = get_fleet_service()

    task: asyncio.Task[int] | None = None
    ticker: FleetTicker | None = None
    if env_bool("FLEET_AUTOTICK", False):
        ticker = FleetTicker(service=service, interval_s=tick_interval_from_env())
        task = asyncio.create_task(ticker.run())

    yield

    if ticker is not None and task is not None:
        ticker.stop()
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass


app = FastAPI(title="Godavari Transit", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)
app.include_router(fleet_router)
app.include_router(catalog_router)
app.include_router(alerts_router)
app.include_router(chat_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so the dashboard can display them.

    Starlette's default 500 handler may return plain text/HTML, which the
    dashboard parses as JSON and displays as `{}`.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("TRANSIT_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
