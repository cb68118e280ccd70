"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bread_order.api import pages
from bread_order.api import router as api_router
from bread_order.core.config import Settings, get_settings
from bread_order.core.errors import BreadOrderError
from bread_order.core.sessions import SessionStore
from bread_order.services.datastore import DataStore

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten FastAPI's validation errors into the single `error` string clients show."""
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return "Invalid JSON"
    parts = []
    for e in errors:
        loc = [str(p) for p in e.get("loc", ()) if p != "body"]
        parts.append(f"{'.'.join(loc) or 'body'}: {e.get('msg')}")
    return "Invalid request: " + "; ".join(parts)


async def handle_app_error(request: Request, exc: BreadOrderError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Data files are seeded and sessions created at startup."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        datastore = DataStore.from_settings(settings)
        datastore.seed(
            settings.DEFAULT_ADMIN_USERNAME,
            settings.DEFAULT_ADMIN_PASSWORD.get_secret_value(),
        )
        app.state.datastore = datastore
        app.state.sessions = SessionStore()
        logger.info(
            "Bread order service started",
            extra={"data_dir": str(settings.DATA_DIR), "environment": settings.APP_ENV},
        )
        try:
            yield
        finally:
            # Sessions are never persisted; shutting down logs everyone out.
            app.state.sessions.clear()

    app = FastAPI(
        title="Bread Order API",
        version="0.1.0",
        docs_url="/docs" if settings.APP_ENV == "dev" else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(BreadOrderError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(api_router, prefix=settings.API_PREFIX)
    # Catch-all page route; must be registered last.
    app.include_router(pages.router)
    return app


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


app = create_app()
