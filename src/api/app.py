"""
FastAPI application factory.

* Registers routes for backload matching, route optimisation, estimates
  and admin.
* Maps engine errors (e.g. invalid coordinates) to HTTP 422.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, backload, estimates, routing
from src.config import settings
from src.domain.entities import EngineError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


async def _engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Backload Matching & Route Optimization API",
        description=(
            "Finds backload cargo along a trucker's return trip, orders the "
            "resulting pickups and drop-offs into a shorter route, and "
            "estimates fuel cost, drive time and route efficiency."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(EngineError, _engine_error_handler)

    # Routers
    app.include_router(backload.router, prefix="/api/v1")
    app.include_router(routing.router, prefix="/api/v1")
    app.include_router(estimates.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
