"""Sizing, cropping, placement and orientation modifiers."""

from __future__ import annotations

from typing import Any, Optional, Union

from imgproxy_url.application.transformers.common import (
    Number,
    choice,
    flag,
    gravity_args,
    hex_color,
    join,
    number,
    optional_number,
)
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import GravityType, ResizeType, ResizingAlgorithm

_EXTEND_UNSUPPORTED = (GravityType.smart, GravityType.object)


def resize(
    resizing_type: Optional[Union[ResizeType, str]] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> str:
    return join(
        "rs",
        choice("resize", "resizing_type", resizing_type, ResizeType) if resizing_type is not None else None,
        optional_number("resize", "width", width, minimum=0, integer=True),
        optional_number("resize", "height", height, minimum=0, integer=True),
    )


def resizing_algorithm(algorithm: Union[ResizingAlgorithm, str]) -> str:
    return join("ra", choice("resizing_algorithm", "algorithm", algorithm, ResizingAlgorithm))


def crop(
    width: Optional[Number] = None,
    height: Optional[Number] = None,
    gravity: Any = None,
) -> str:
    """Crop to ``width`` x ``height``; 0 or None keeps the full source dimension."""
    return join(
        "c",
        optional_number("crop", "width", width, minimum=0) or 0,
        optional_number("crop", "height", height, minimum=0) or 0,
        *(gravity_args("crop", gravity) if gravity is not None else ()),
    )


def gravity(value: Any) -> str:
    return join("g", *gravity_args("gravity", value))


def extend(gravity: Any = None) -> str:
    return join(
        "ex",
        True,
        *(gravity_args("extend", gravity, disallow=_EXTEND_UNSUPPORTED) if gravity is not None else ()),
    )


def extend_aspect_ratio(gravity: Any = None) -> str:
    return join(
        "exar",
        True,
        *(
            gravity_args("extend_aspect_ratio", gravity, disallow=_EXTEND_UNSUPPORTED)
            if gravity is not None
            else ()
        ),
    )


def pad(
    top: Optional[int] = None,
    right: Optional[int] = None,
    bottom: Optional[int] = None,
    left: Optional[int] = None,
) -> str:
    """Padding with CSS shorthand semantics for omitted sides.

    right defaults to top, bottom to top, left to right.
    """
    sides = {"top": top, "right": right, "bottom": bottom, "left": left}
    if all(v is None for v in sides.values()):
        raise InvalidParameterError("pad requires at least one side", "pad")
    for name, value in sides.items():
        optional_number("pad", name, value, minimum=0, integer=True)
    if top is None:
        top = 0
    if right is None:
        right = top
    if bottom is None:
        bottom = top
    if left is None:
        left = right
    return join("pd", int(top), int(right), int(bottom), int(left))


def dpr(value: Number) -> str:
    return join("dpr", number("dpr", "dpr", value, minimum=0, exclusive_minimum=True))


def zoom(x: Number, y: Optional[Number] = None) -> str:
    return join(
        "z",
        number("zoom", "x", x, minimum=0, exclusive_minimum=True),
        optional_number("zoom", "y", y, minimum=0, exclusive_minimum=True),
    )


def min_width(value: int) -> str:
    return join("mw", number("min_width", "width", value, minimum=0, integer=True))


def min_height(value: int) -> str:
    return join("mh", number("min_height", "height", value, minimum=0, integer=True))


def enlarge() -> str:
    return join("el", True)


def rotate(angle: int) -> str:
    angle = number("rotate", "angle", angle, integer=True)
    if angle % 90:
        raise InvalidParameterError(f"angle must be a multiple of 90, got {angle}", "rotate")
    return join("rot", angle)


def auto_rotate() -> str:
    return join("ar", True)


def trim(
    threshold: Number,
    color: Optional[str] = None,
    equal_horizontal: Optional[bool] = None,
    equal_vertical: Optional[bool] = None,
) -> str:
    return join(
        "t",
        number("trim", "threshold", threshold, minimum=0),
        hex_color("trim", "color", color) if color is not None else None,
        flag("trim", "equal_horizontal", equal_horizontal),
        flag("trim", "equal_vertical", equal_vertical),
    )
