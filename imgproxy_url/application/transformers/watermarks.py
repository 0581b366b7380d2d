"""Watermark modifiers."""

from __future__ import annotations

from typing import Any, Optional, Union

from imgproxy_url.application.transformers.common import (
    Number,
    choice,
    join,
    model,
    number,
    optional_number,
    text,
)
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import Offset, WatermarkPosition
from imgproxy_url.utils.encoding_utils import encode_base64_url


def watermark(
    opacity: Number,
    position: Optional[Union[WatermarkPosition, str]] = None,
    offset: Any = None,
    scale: Optional[Number] = None,
) -> str:
    """Place the configured watermark.

    Offsets are not valid for the ``re`` (replicate) position, imgproxy would
    treat them as spacing in that case.
    """
    opacity = number("watermark", "opacity", opacity, minimum=0, maximum=1)
    position = choice("watermark", "position", position, WatermarkPosition) if position is not None else None
    x = y = None
    if offset is not None:
        if position == WatermarkPosition.replicate:
            raise InvalidParameterError("offset is not supported with the replicate position", "watermark")
        if isinstance(offset, (tuple, list)):
            offset = dict(zip("xy", offset))
        point = model("watermark", offset, Offset)
        x, y = point.x, point.y
    return join(
        "wm",
        opacity,
        position,
        x,
        y,
        optional_number("watermark", "scale", scale, minimum=0),
    )


def watermark_shadow(sigma: Number) -> str:
    return join("wmsh", number("watermark_shadow", "sigma", sigma, minimum=0, exclusive_minimum=True))


def watermark_size(width: int, height: int) -> str:
    return join(
        "wms",
        number("watermark_size", "width", width, minimum=0, integer=True),
        number("watermark_size", "height", height, minimum=0, integer=True),
    )


def watermark_text(value: str) -> str:
    return join("wmt", encode_base64_url(text("watermark_text", "text", value)))


def watermark_url(url: str) -> str:
    return join("wmu", encode_base64_url(text("watermark_url", "url", url)))
