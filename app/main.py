"""FastAPI application factory. No business logic; only wiring, middleware and error rendering."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.orm import Session, sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import router
from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    """First validation problem as one line, e.g. 'body.location.x: Field required'."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(400, _validation_message(exc))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "Internal server error")


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    """
    Build the API. The app owns its database handle: pass session_factory to
    reuse an existing one (tests), otherwise an engine is built from settings
    and disposed on shutdown.
    """
    settings = settings or get_settings()
    engine = None
    if session_factory is None:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if engine is not None:
            engine.dispose()

    app = FastAPI(
        title="Geolib API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
        allow_credentials=settings.APP_ENV != "dev",
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _install_error_handlers(app)
    app.include_router(router)

    dist = Path(settings.FRONTEND_DIST_DIR) if settings.FRONTEND_DIST_DIR else None
    if dist is not None and dist.is_dir():
        _install_frontend(app, dist.resolve())
    else:
        if dist is not None:
            logger.warning("FRONTEND_DIST_DIR %s does not exist; not serving frontend", dist)

        @app.get("/")
        def root() -> dict[str, str]:
            """Root route; minimal payload for discovery."""
            return {"message": "Geolib API"}

    return app


def _install_frontend(app: FastAPI, dist: Path) -> None:
    """
    Serve the built SPA. Registered after the API routers so they match first.
    Real files under dist are returned as-is; any other GET path gets
    index.html so client-side routes (/dash, /admindash) survive a reload.
    """
    index = dist / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    def frontend(full_path: str) -> FileResponse:
        candidate = (dist / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(dist):
            return FileResponse(candidate)
        return FileResponse(index)
