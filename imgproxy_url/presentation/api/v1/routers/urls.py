import logging

from fastapi import APIRouter, Depends

from imgproxy_url.application.use_cases.url_generate import GenerateUrlUseCase
from imgproxy_url.presentation.api.v1.dependencies.urls import (
    get_generate_url_use_case,
    verify_api_key,
)
from imgproxy_url.presentation.api.v1.schemas.urls import (
    ChainRequest,
    UrlRequest,
    UrlResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/urls", dependencies=[Depends(verify_api_key)])


@router.post("", response_model=UrlResponse)
def generate_url(
    request: UrlRequest,
    use_case: GenerateUrlUseCase = Depends(get_generate_url_use_case),
):
    """Build (and sign, when configured) a single-pipeline imgproxy URL."""
    return use_case.execute(request.model_dump())


@router.post("/chain", response_model=UrlResponse)
def generate_chained_url(
    request: ChainRequest,
    use_case: GenerateUrlUseCase = Depends(get_generate_url_use_case),
):
    """Build a multi-pipeline URL; the whole chain is signed once."""
    return use_case.execute_chain(request.model_dump())
