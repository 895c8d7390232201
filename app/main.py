"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.application.services import AppSettingsService
from app.domain.exceptions import StorageError
from app.infrastructure.database.session import async_session_factory, create_tables_if_absent
from app.infrastructure.database.repositories import SQLAlchemyAppSettingsRepository
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)

_API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


async def _seed_app_settings() -> None:
    """Insert the settings singleton with configured defaults when missing.

    Idempotent, safe to call on every startup.
    """
    settings = get_settings()
    async with async_session_factory() as session:
        service = AppSettingsService(
            SQLAlchemyAppSettingsRepository(session),
            default_company_name=settings.default_company_name,
            default_percentage=settings.default_percentage,
        )
        await service.ensure_defaults()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed settings."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    await create_tables_if_absent()
    logger.info("Database ready at %s", settings.database_path)

    # 2. Seed the settings singleton
    await _seed_app_settings()

    yield


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"query" marker from the location
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _register_exception_handlers(app: FastAPI) -> None:
    """Every error response carries a single ``error`` string."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_errors(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(getattr(exc, "orig", None) or exc)},
        )


def _register_fallback_routes(app: FastAPI) -> None:
    """Unmatched /api paths get a JSON 404; everything else gets the SPA."""
    settings = get_settings()

    @app.api_route("/api/{path:path}", methods=_API_METHODS, include_in_schema=False)
    async def api_not_found(path: str) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "API endpoint not found"},
        )

    @app.get("/{path:path}", include_in_schema=False)
    async def serve_client(path: str):
        static_dir = Path(settings.static_dir)
        if path:
            candidate = (static_dir / path).resolve()
            # Only serve real files that live inside the static directory
            if candidate.is_file() and static_dir.resolve() in candidate.parents:
                return FileResponse(candidate)
        index = static_dir / "index.html"
        if index.is_file():
            return FileResponse(index)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Client build not found"},
        )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Mount API routes, then the catch-alls
    app.include_router(api_router)
    _register_fallback_routes(app)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
    )
