"""
Shared formatting and validation helpers for modifier transformers.

Every transformer returns a single path segment of the form
``<short-name>:<arg>:<arg>...`` and raises ``InvalidParameterError`` when
its options violate imgproxy's documented constraints.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import Gravity, GravityType, RGBColor

Number = Union[int, float]
E = TypeVar("E", bound=Enum)
M = TypeVar("M", bound=BaseModel)

_HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def fmt(value: Any) -> str:
    """Render a single argument the way imgproxy parses it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def join(short_name: str, *args: Any) -> str:
    """Join a modifier short name with its arguments, dropping trailing blanks."""
    parts = [fmt(a) for a in args]
    while parts and parts[-1] == "":
        parts.pop()
    return ":".join([short_name, *parts])


def number(
    modifier: str,
    field: str,
    value: Any,
    *,
    minimum: Optional[Number] = None,
    maximum: Optional[Number] = None,
    exclusive_minimum: bool = False,
    integer: bool = False,
) -> Number:
    """Validate a numeric argument and return it unchanged."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{field} must be a number, got {value!r}", modifier)
    if integer and not (isinstance(value, int) or float(value).is_integer()):
        raise InvalidParameterError(f"{field} must be an integer, got {value!r}", modifier)
    if value != value:  # NaN
        raise InvalidParameterError(f"{field} must not be NaN", modifier)
    if minimum is not None:
        if exclusive_minimum and value <= minimum:
            raise InvalidParameterError(f"{field} must be greater than {minimum}", modifier)
        if not exclusive_minimum and value < minimum:
            raise InvalidParameterError(f"{field} must be at least {minimum}", modifier)
    if maximum is not None and value > maximum:
        raise InvalidParameterError(f"{field} must be at most {maximum}", modifier)
    return int(value) if integer else value


def optional_number(modifier: str, field: str, value: Any, **limits: Any) -> Optional[Number]:
    if value is None:
        return None
    return number(modifier, field, value, **limits)


def flag(modifier: str, field: str, value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise InvalidParameterError(f"{field} must be a boolean, got {value!r}", modifier)


def text(modifier: str, field: str, value: Any, *, allow_slash: bool = True) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidParameterError(f"{field} must be a non-empty string", modifier)
    if not allow_slash and "/" in value:
        raise InvalidParameterError(f"{field} must not contain '/'", modifier)
    return value


def names(modifier: str, field: str, values: Any, *, required: bool = True) -> Tuple[str, ...]:
    """Normalize a string or a sequence of strings into a tuple of names."""
    if values is None:
        values = ()
    elif isinstance(values, str):
        values = (values,)
    if not isinstance(values, Iterable):
        raise InvalidParameterError(f"{field} must be a string or a list of strings", modifier)
    result = tuple(values)
    if required and not result:
        raise InvalidParameterError(f"{field} must not be empty", modifier)
    for item in result:
        text(modifier, field, item, allow_slash=False)
        if ":" in item:
            raise InvalidParameterError(f"{field} entries must not contain ':'", modifier)
    return result


def choice(modifier: str, field: str, value: Any, enum_type: Type[E]) -> E:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_type)
        raise InvalidParameterError(
            f"{field} must be one of {allowed}, got {value!r}", modifier
        ) from None


def model(modifier: str, value: Any, model_type: Type[M]) -> M:
    """Coerce a model instance or a plain mapping into ``model_type``."""
    if isinstance(value, model_type):
        return value
    try:
        return model_type.model_validate(value)
    except ValidationError as exc:
        details = "; ".join(err["msg"] for err in exc.errors())
        raise InvalidParameterError(
            f"Invalid {model_type.__name__}: {details}", modifier
        ) from exc


def hex_color(modifier: str, field: str, value: Any) -> str:
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise InvalidParameterError(f"{field} must be a 6 digit hex color, got {value!r}", modifier)
    return value.lower()


def color_args(modifier: str, value: Any) -> Sequence[Any]:
    """A hex string becomes one argument, an RGB triple three arguments."""
    if isinstance(value, str):
        return (hex_color(modifier, "color", value),)
    if isinstance(value, (tuple, list)):
        if len(value) != 3:
            raise InvalidParameterError("RGB color needs exactly 3 components", modifier)
        value = dict(zip("rgb", value))
    rgb = model(modifier, value, RGBColor)
    return (rgb.r, rgb.g, rgb.b)


def gravity_args(
    modifier: str,
    value: Any,
    *,
    disallow: Iterable[GravityType] = (),
) -> Sequence[Any]:
    """Serialize a gravity into ``type[:x:y]`` or ``obj:class...`` arguments."""
    if isinstance(value, (str, GravityType)):
        value = {"type": value}
    gravity = model(modifier, value, Gravity)
    if gravity.type in tuple(disallow):
        raise InvalidParameterError(
            f"gravity type {gravity.type.value} is not supported here", modifier
        )
    if gravity.type == GravityType.object:
        return (gravity.type, *names(modifier, "class_names", gravity.class_names))
    if gravity.offset is not None:
        return (gravity.type, gravity.offset.x, gravity.offset.y)
    return (gravity.type,)
