from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, conint, conlist, constr, model_validator


class GravityType(str, Enum):
    north = "no"
    south = "so"
    east = "ea"
    west = "we"
    north_east = "noea"
    north_west = "nowe"
    south_east = "soea"
    south_west = "sowe"
    center = "ce"
    smart = "sm"
    focus_point = "fp"
    object = "obj"


class ResizeType(str, Enum):
    fit = "fit"
    fill = "fill"
    fill_down = "fill-down"
    force = "force"
    auto = "auto"


class ResizingAlgorithm(str, Enum):
    nearest = "nearest"
    linear = "linear"
    cubic = "cubic"
    lanczos2 = "lanczos2"
    lanczos3 = "lanczos3"


class UnsharpeningMode(str, Enum):
    auto = "auto"
    none = "none"
    always = "always"


class WatermarkPosition(str, Enum):
    center = "ce"
    north = "no"
    south = "so"
    east = "ea"
    west = "we"
    north_east = "noea"
    north_west = "nowe"
    south_east = "soea"
    south_west = "sowe"
    replicate = "re"


class GradientDirection(str, Enum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"


class Offset(BaseModel):
    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class RGBColor(BaseModel):
    r: conint(ge=0, le=255)
    g: conint(ge=0, le=255)
    b: conint(ge=0, le=255)

    model_config = ConfigDict(frozen=True)


class Gravity(BaseModel):
    """Gravity shared by ``gravity``, ``crop``, ``extend`` and ``extend_aspect_ratio``.

    - fp: focus point, offset coordinates are fractions in [0, 1]
    - sm: smart gravity, no offset
    - obj: object-oriented gravity, requires class names instead of an offset
    """

    type: GravityType
    offset: Optional[Offset] = None
    class_names: Optional[conlist(constr(strip_whitespace=True, min_length=1), min_length=1)] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_type_specific_fields(self) -> "Gravity":
        if self.type == GravityType.focus_point:
            if self.offset is None:
                raise ValueError("focus point gravity requires an offset")
            if not (0 <= self.offset.x <= 1 and 0 <= self.offset.y <= 1):
                raise ValueError("focus point offset must be within [0, 1]")
        if self.type == GravityType.smart and self.offset is not None:
            raise ValueError("smart gravity does not accept an offset")
        if self.type == GravityType.object:
            if not self.class_names:
                raise ValueError("object gravity requires class names")
            if self.offset is not None:
                raise ValueError("object gravity does not accept an offset")
        elif self.class_names:
            raise ValueError("class names are only valid for object gravity")
        return self


class ModifierCall(BaseModel):
    """Declarative modifier invocation: transformer name plus its arguments."""

    name: constr(strip_whitespace=True, min_length=1)
    args: List[Any] = []
    options: dict[str, Any] = {}


class Pipeline(BaseModel):
    modifiers: List[ModifierCall] = []
