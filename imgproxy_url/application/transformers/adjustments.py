"""Color adjustments, filters and background modifiers."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from imgproxy_url.application.transformers.common import (
    Number,
    choice,
    color_args,
    hex_color,
    join,
    names,
    number,
    optional_number,
)
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import GradientDirection, UnsharpeningMode


def adjust(
    brightness: Optional[int] = None,
    contrast: Optional[Number] = None,
    saturation: Optional[Number] = None,
) -> str:
    if brightness is None and contrast is None and saturation is None:
        raise InvalidParameterError("adjust requires at least one option", "adjust")
    return join(
        "a",
        optional_number("adjust", "brightness", brightness, minimum=-255, maximum=255, integer=True),
        optional_number("adjust", "contrast", contrast, minimum=0),
        optional_number("adjust", "saturation", saturation, minimum=0),
    )


def brightness(value: int) -> str:
    return join("br", number("brightness", "brightness", value, minimum=-255, maximum=255, integer=True))


def contrast(value: Number) -> str:
    return join("co", number("contrast", "contrast", value, minimum=0))


def saturation(value: Number) -> str:
    return join("sa", number("saturation", "saturation", value, minimum=0))


def blur(sigma: Number) -> str:
    return join("bl", number("blur", "sigma", sigma, minimum=0, exclusive_minimum=True))


def sharpen(sigma: Number) -> str:
    return join("sh", number("sharpen", "sigma", sigma, minimum=0, exclusive_minimum=True))


def pixelate(size: int) -> str:
    return join("pix", number("pixelate", "size", size, minimum=1, integer=True))


def unsharpen(
    mode: Optional[Union[UnsharpeningMode, str]] = None,
    weight: Optional[Number] = None,
    divider: Optional[Number] = None,
) -> str:
    """Unsharp masking; every field is optional and keeps imgproxy's default when omitted."""
    return join(
        "ush",
        choice("unsharpen", "mode", mode, UnsharpeningMode) if mode is not None else None,
        optional_number("unsharpen", "weight", weight, minimum=0, exclusive_minimum=True),
        optional_number("unsharpen", "divider", divider, minimum=0, exclusive_minimum=True),
    )


def blur_detections(sigma: Number, class_names: Union[str, Sequence[str]]) -> str:
    return join(
        "bd",
        number("blur_detections", "sigma", sigma, minimum=0, exclusive_minimum=True),
        *names("blur_detections", "class_names", class_names),
    )


def draw_detections(class_names: Union[str, Sequence[str], None] = None) -> str:
    """Draw bounding boxes of detected objects; all classes when none are given."""
    return join("dd", True, *names("draw_detections", "class_names", class_names, required=False))


def background(color: Any) -> str:
    """Fill the background with a hex color (``"ff0000"``) or an RGB triple."""
    return join("bg", *color_args("background", color))


def background_alpha(alpha: Number) -> str:
    return join("bga", number("background_alpha", "alpha", alpha, minimum=0, maximum=1))


def gradient(
    opacity: Number,
    color: Optional[str] = None,
    direction: Optional[Union[GradientDirection, str]] = None,
    start: Optional[Number] = None,
    stop: Optional[Number] = None,
) -> str:
    start = optional_number("gradient", "start", start, minimum=0, maximum=1)
    stop = optional_number("gradient", "stop", stop, minimum=0, maximum=1)
    if start is not None and stop is not None and start > stop:
        raise InvalidParameterError("start must not be greater than stop", "gradient")
    return join(
        "gr",
        number("gradient", "opacity", opacity, minimum=0, maximum=1),
        hex_color("gradient", "color", color) if color is not None else None,
        choice("gradient", "direction", direction, GradientDirection) if direction is not None else None,
        start,
        stop,
    )
