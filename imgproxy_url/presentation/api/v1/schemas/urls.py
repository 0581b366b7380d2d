from typing import List, Optional

from pydantic import BaseModel, conlist, constr

from imgproxy_url.core.pyd_schemas import ModifierCall, Pipeline


class UrlRequest(BaseModel):
    modifiers: List[ModifierCall] = []
    path: Optional[constr(min_length=1)] = None
    base_url: Optional[str] = None
    plain: Optional[bool] = None
    sign: Optional[bool] = None


class ChainRequest(BaseModel):
    pipelines: conlist(Pipeline, min_length=1)
    path: Optional[constr(min_length=1)] = None
    base_url: Optional[str] = None
    plain: Optional[bool] = None
    sign: Optional[bool] = None


class UrlResponse(BaseModel):
    url: str
