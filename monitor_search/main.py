"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, rate limiter, routers.
No business logic here. See monitor_search.core.lifespan and
monitor_search.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI

from monitor_search.api.v1 import api_router
from monitor_search.core.config import get_settings
from monitor_search.core.exception_handlers import register_exception_handlers
from monitor_search.core.lifespan import create_lifespan
from monitor_search.core.limiter import limiter


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()
