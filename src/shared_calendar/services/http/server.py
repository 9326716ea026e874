from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from hypercorn.asyncio import serve
from hypercorn.config import Config

from ...api import router
from ..calendar import CalendarService, EventNotFoundError, EventValidationError
from ..context import ServiceContext

logger = logging.getLogger(__name__)


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    """Build the API around ``context``; a fresh one is created when omitted."""

    context = context or ServiceContext()
    app = FastAPI(title="Shared Calendar API", version="1.0.0")
    app.state.context = context
    app.state.calendar = CalendarService(context)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(context.settings.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EventNotFoundError)
    async def _not_found(request: Request, exc: EventNotFoundError) -> JSONResponse:
        logger.warning("Event not found: %s", exc.event_id)
        return JSONResponse(status_code=404, content={"message": str(exc)})

    @app.exception_handler(EventValidationError)
    async def _invalid(request: Request, exc: EventValidationError) -> JSONResponse:
        logger.warning("Event payload rejected on %s: %s", request.url.path, exc.errors)
        return JSONResponse(status_code=400, content={"message": "Validation failed", "errors": exc.errors})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    app.include_router(router)
    logger.info("API ready using the %s event store", context.store.name)
    return app


def run_local_server(host: str = "127.0.0.1", port: int = 8000, *, context: Optional[ServiceContext] = None) -> None:
    app = create_app(context)
    config = Config()
    config.bind = [f"{host}:{port}"]
    asyncio.run(serve(app, config))
