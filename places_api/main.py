from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from places_api.api.metrics import router as metrics_router
from places_api.api.pages import router as pages_router
from places_api.api.places import router as places_router
from places_api.api.users import router as users_router
from places_api.config import Settings, get_settings
from places_api.observability.logging import configure_logging
from places_api.observability.middleware import RequestContextMiddleware
from places_api.services.place_store import SAMPLE_PLACES, PlaceStore
from places_api.services.user_store import SAMPLE_USERS, UserStore


async def _render_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own, freshly seeded stores."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        servers=[{"url": settings.public_url, "description": "Local server"}],
        docs_url=settings.docs_url,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.user_store = UserStore(SAMPLE_USERS if settings.seed_sample_data else ())
    app.state.place_store = PlaceStore(SAMPLE_PLACES if settings.seed_sample_data else ())

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(StarletteHTTPException, _render_http_error)

    app.include_router(pages_router)
    app.include_router(users_router)
    app.include_router(places_router)
    app.include_router(metrics_router)
    return app


app = create_app()
