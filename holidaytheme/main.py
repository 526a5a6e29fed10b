"""
holidaytheme - holiday date and theme resolution service for check-in kiosks.
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from holidaytheme.config import get_settings
from holidaytheme.api.health import VERSION
from holidaytheme.api.router import api_router
from holidaytheme.services.registry import DEFAULT_REGISTRY
from holidaytheme.utils.logging import (
    configure_structured_logging,
    generate_correlation_id,
    set_correlation_id,
)
from holidaytheme.utils.timezone import DEFAULT_TIMEZONE, is_valid_timezone
from holidaytheme.workers.midnight_refresh import MidnightRefresher

logger = logging.getLogger("holidaytheme")


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Injects a correlation ID into every request context and response header."""

    async def dispatch(self, request: Request, call_next) -> Response:
        cid = request.headers.get("X-Correlation-ID") or generate_correlation_id()
        set_correlation_id(cid)
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = cid
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the display session's midnight refresher; stop it on shutdown."""
    settings = get_settings()
    logger.info("holidaytheme starting up (env=%s)", settings.app_env)

    config = settings.holiday_config()
    if not is_valid_timezone(config.timezone):
        logger.warning(
            "HOLIDAY_TIMEZONE %s is not a valid IANA zone - falling back to %s",
            config.timezone, DEFAULT_TIMEZONE,
        )
    if config.preview_holiday:
        logger.warning(
            "Preview mode active: %s day %d", config.preview_holiday, config.preview_day,
            extra={"holiday_id": config.preview_holiday},
        )

    refresher = MidnightRefresher(
        config,
        registry=DEFAULT_REGISTRY,
        buffer_ms=settings.midnight_buffer_ms,
    )
    refresher.start()
    app.state.holiday_refresher = refresher
    logger.info("Midnight refresher started", extra={"timezone": config.timezone})

    yield

    await refresher.stop()
    logger.info("holidaytheme shutdown complete")


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    configure_structured_logging(settings.log_level)

    application = FastAPI(
        title="holidaytheme",
        description="Holiday date and theme resolution for check-in kiosks",
        version=VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[*settings.cors_origins, settings.app_base_url],
        allow_credentials=True,
        allow_methods=["GET", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "X-Correlation-ID", "Accept", "Origin"],
    )

    # Added after CORS so it runs on every request
    application.add_middleware(CorrelationIdMiddleware)

    application.include_router(api_router)

    return application


app = create_app()
