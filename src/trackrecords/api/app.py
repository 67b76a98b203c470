"""FastAPI application serving world record progressions.

Run locally with:
    uvicorn trackrecords.api.app:app --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from trackrecords import __version__, configure_logging, get_logger
from trackrecords.api.routes import health_router, records_router
from trackrecords.config import get_settings
from trackrecords.errors import SourceUnavailable

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "app_starting",
        environment=settings.environment.value,
        data_file=str(settings.data_file),
        pace_unit=settings.default_pace_unit.value,
    )
    yield
    logger.info("app_shutdown")


async def source_unavailable_handler(request: Request, exc: SourceUnavailable) -> JSONResponse:
    """An unreadable source fails the whole request, there is no partial result."""
    logger.error("request_failed", path=request.url.path, source=exc.source, reason=exc.reason)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Failed to load records"},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    docs_enabled = not settings.is_production

    app = FastAPI(
        title="Track Records API",
        description="World record progressions for track and field running events",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )
    app.add_exception_handler(SourceUnavailable, source_unavailable_handler)

    app.include_router(health_router)
    app.include_router(records_router, prefix="/api/v1")

    return app


app = create_app()
