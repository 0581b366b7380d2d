import hmac
import logging
from typing import Optional

from fastapi import Header, HTTPException, Request

from imgproxy_url.application.use_cases.url_generate import GenerateUrlUseCase
from imgproxy_url.core.config import Settings

logger = logging.getLogger(__name__)


def build_generate_url_use_case(config: Settings) -> GenerateUrlUseCase:
    """Compose the GenerateUrlUseCase from the given settings."""
    return GenerateUrlUseCase(
        base_url=config.imgproxy_base_url,
        plain=config.imgproxy_plain_path,
        signature=config.signature_options,
    )


def get_generate_url_use_case(request: Request) -> GenerateUrlUseCase:
    """FastAPI dependency bound to the settings the app was created with."""
    return build_generate_url_use_case(request.app.state.settings)


def verify_api_key(
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
) -> None:
    """Require the configured API key before the server signs anything."""
    expected = request.app.state.settings.api_key
    if not expected:
        return
    if x_api_key is None or not hmac.compare_digest(x_api_key, expected):
        logger.warning("Rejected URL request with missing or invalid API key")
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
