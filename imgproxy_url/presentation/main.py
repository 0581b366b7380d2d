import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, APIRouter
import uvicorn
from contextlib import asynccontextmanager

from imgproxy_url.core.config import Settings, settings
from imgproxy_url.core.exceptions import ImgproxyUrlError, InvalidParameterError
from imgproxy_url.core.middleware import RateLimitMiddleware, RequestLoggingMiddleware
from imgproxy_url.presentation.exception_handlers import (
    imgproxy_url_exception_handler,
    invalid_parameter_exception_handler,
)
from imgproxy_url.presentation.api.v1.routers import health, urls

logger = logging.getLogger(__name__)


def configure_logging(config: Settings = settings) -> None:
    """Configure logging: console always, rotating file when ``log_file`` is set"""
    log_handlers = [logging.StreamHandler()]
    if config.log_file:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_handlers.append(
            RotatingFileHandler(
                config.log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
            )
        )
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=config.log_format,
        datefmt=config.log_date_format,
        handlers=log_handlers,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    config: Settings = app.state.settings
    logger.info(
        "Starting imgproxy URL API (signing %s)",
        "enabled" if config.signing_enabled else "disabled",
    )
    if config.signing_enabled and not config.api_key:
        logger.warning("Signing is enabled without API_KEY; /urls accepts any caller")
    yield
    logger.info("Shutting down imgproxy URL API...")


def create_application(config: Settings = settings) -> FastAPI:
    """Create and configure FastAPI application"""

    configure_logging(config)

    app = FastAPI(
        title=config.api_title,
        description=config.api_description,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.settings = config

    # Add custom middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        calls=config.max_requests_per_minute,
        period=config.rate_limit_period,
    )

    # Add exception handlers
    app.add_exception_handler(InvalidParameterError, invalid_parameter_exception_handler)
    app.add_exception_handler(ImgproxyUrlError, imgproxy_url_exception_handler)

    # Include API routers under versioned prefix
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(urls.router, tags=["urls"])
    api_v1.include_router(health.router)
    app.include_router(api_v1)

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    dev_mode = os.getenv("DEV_MODE", "true").lower() == "true"
    uvicorn.run(
        "imgproxy_url.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=dev_mode,
    )
