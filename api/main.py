"""
Restaurant service entrypoint.

`create_app()` wires routers and error handlers around a `Database`.
`main()` opens the pool, waits for the database, then serves with uvicorn;
it exits with status 1 if the database never becomes reachable.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core import config, startup
from core.db import Database
from core.errors import ConnectivityError
from menu import router as menu_router
from restaurants import router as restaurants_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed client input never reaches the database; report it as a 400.
    errors = [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request.", "errors": errors},
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error."},
    )


def create_app(database: Database) -> FastAPI:
    app = FastAPI(title="restaurant-service")
    app.state.database = database

    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(restaurants_router.router, tags=["restaurants"])
    app.include_router(menu_router.router, tags=["menu"])

    @app.get("/healthz")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "restaurant service api"}

    return app


async def serve(settings: config.Settings) -> None:
    database = Database.from_settings(settings)
    await database.open()
    try:
        await startup.wait_for_ready(
            database,
            max_attempts=settings.connect_attempts,
            delay_ms=settings.connect_delay_ms,
        )
        server = uvicorn.Server(
            uvicorn.Config(
                create_app(database),
                host=settings.host,
                port=settings.port,
                log_level=settings.log_level.lower(),
            )
        )
        logger.info("Database ready, starting restaurant service on port %s", settings.port)
        await server.serve()
        logger.info("Restaurant service stopped")
    finally:
        await database.close()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)


def main() -> None:
    settings = config.load_settings()
    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings))
    except ConnectivityError:
        logger.exception("Failed to start restaurant service")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
