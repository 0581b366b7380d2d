"""
FastAPI exception handlers for URL generation errors
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from imgproxy_url.core.exceptions import ImgproxyUrlError, InvalidParameterError

logger = logging.getLogger(__name__)


async def invalid_parameter_exception_handler(
    request: Request, exc: InvalidParameterError
):
    """Handle modifier validation errors"""
    logger.warning(f"Invalid parameter: {exc.message} (modifier: {exc.modifier})")
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "error": "Invalid modifier parameter",
                "details": exc.message,
                "error_code": exc.error_code,
                "modifier": exc.modifier,
            }
        },
    )


async def imgproxy_url_exception_handler(request: Request, exc: ImgproxyUrlError):
    """Handle signing and configuration errors"""
    logger.error(f"URL generation error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "error": "URL generation failed",
                "details": exc.message,
                "error_code": exc.error_code,
            }
        },
    )
