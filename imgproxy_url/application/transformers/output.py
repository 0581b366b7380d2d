"""Output format, encoder, metadata, source selection and request-level modifiers."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Mapping, Optional, Sequence, Union

from imgproxy_url.application.transformers.common import (
    Number,
    flag,
    join,
    names,
    number,
    optional_number,
    text,
)
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.utils.encoding_utils import encode_base64_url

_EXTENSION = re.compile(r"^[A-Za-z0-9]+$")


def _extension(modifier: str, value: str) -> str:
    if not isinstance(value, str) or not _EXTENSION.match(value):
        raise InvalidParameterError(f"Invalid format extension: {value!r}", modifier)
    return value.lower()


def format(extension: str) -> str:  # noqa: A001 - mirrors the imgproxy option name
    return join("f", _extension("format", extension))


def quality(value: int) -> str:
    return join("q", number("quality", "quality", value, minimum=0, maximum=100, integer=True))


def format_quality(qualities: Mapping[str, int]) -> str:
    """Per-format quality, e.g. ``{"jpeg": 80, "webp": 70}`` -> ``fq:jpeg:80:webp:70``."""
    if not isinstance(qualities, Mapping) or not qualities:
        raise InvalidParameterError("qualities must be a non-empty mapping", "format_quality")
    args = []
    for ext, q in qualities.items():
        args.append(_extension("format_quality", ext))
        args.append(number("format_quality", f"quality of {ext}", q, minimum=0, maximum=100, integer=True))
    return join("fq", *args)


def max_bytes(value: int) -> str:
    return join("mb", number("max_bytes", "bytes", value, minimum=0, integer=True))


def jpeg_options(
    progressive: Optional[bool] = None,
    no_subsample: Optional[bool] = None,
    trellis_quant: Optional[bool] = None,
    overshoot_deringing: Optional[bool] = None,
    optimize_scans: Optional[bool] = None,
    quantization_table: Optional[int] = None,
) -> str:
    return join(
        "jpgo",
        flag("jpeg_options", "progressive", progressive),
        flag("jpeg_options", "no_subsample", no_subsample),
        flag("jpeg_options", "trellis_quant", trellis_quant),
        flag("jpeg_options", "overshoot_deringing", overshoot_deringing),
        flag("jpeg_options", "optimize_scans", optimize_scans),
        optional_number(
            "jpeg_options", "quantization_table", quantization_table, minimum=0, maximum=8, integer=True
        ),
    )


def png_options(
    interlaced: Optional[bool] = None,
    quantize: Optional[bool] = None,
    quantization_colors: Optional[int] = None,
) -> str:
    return join(
        "pngo",
        flag("png_options", "interlaced", interlaced),
        flag("png_options", "quantize", quantize),
        optional_number(
            "png_options", "quantization_colors", quantization_colors, minimum=2, maximum=256, integer=True
        ),
    )


def gif_options(
    optimize_frames: Optional[bool] = None,
    optimize_transparency: Optional[bool] = None,
) -> str:
    """Deprecated upstream (applied automatically since imgproxy 3) but still accepted."""
    if optimize_frames is None and optimize_transparency is None:
        raise InvalidParameterError("gif_options requires at least one option", "gif_options")
    return join(
        "gifo",
        flag("gif_options", "optimize_frames", optimize_frames),
        flag("gif_options", "optimize_transparency", optimize_transparency),
    )


def strip_metadata() -> str:
    return join("sm", True)


def strip_color_profile() -> str:
    return join("scp", True)


def keep_copyright() -> str:
    return join("kcr", True)


def file_name(name: str, encoded: bool = False) -> str:
    """Content-Disposition filename; pass ``encoded=True`` for a base64url name."""
    name = text("file_name", "name", name, allow_slash=False)
    if ":" in name:
        raise InvalidParameterError("name must not contain ':'", "file_name")
    return join("fn", name, True if flag("file_name", "encoded", encoded) else None)


def return_attachment() -> str:
    return join("att", True)


def skip_processing(extensions: Union[str, Sequence[str]]) -> str:
    return join(
        "skp",
        *(_extension("skip_processing", ext) for ext in names("skip_processing", "extensions", extensions)),
    )


def raw() -> str:
    return join("raw", True)


def cache_buster(value: str) -> str:
    value = text("cache_buster", "value", value, allow_slash=False)
    if ":" in value:
        raise InvalidParameterError("value must not contain ':'", "cache_buster")
    return join("cb", value)


def expires(when: Union[datetime, int]) -> str:
    """Expiration as a ``datetime`` or a unix timestamp in seconds."""
    if isinstance(when, datetime):
        return join("exp", int(when.timestamp()))
    return join("exp", number("expires", "timestamp", when, minimum=0, integer=True))


def page(value: int) -> str:
    return join("pg", number("page", "page", value, minimum=0, integer=True))


def disable_animation() -> str:
    return join("da", True)


def video_thumbnail_second(second: Number) -> str:
    return join("vts", number("video_thumbnail_second", "second", second, minimum=0))


def enforce_thumbnail() -> str:
    return join("eth", True)


def preset(presets: Union[str, Sequence[str]]) -> str:
    return join("pr", *names("preset", "presets", presets))


def fallback_image_url(url: str) -> str:
    return join("fiu", encode_base64_url(text("fallback_image_url", "url", url)))


def style(css: Union[str, Mapping[str, str]]) -> str:
    """Prepend a ``<style>`` node to SVG sources; a mapping renders as ``key:value;`` pairs."""
    if isinstance(css, Mapping):
        if not css:
            raise InvalidParameterError("style mapping must not be empty", "style")
        css = "".join(f"{key}:{value};" for key, value in css.items())
    return join("st", encode_base64_url(text("style", "css", css)))
