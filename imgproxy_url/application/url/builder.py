from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from imgproxy_url.application import transformers as tf
from imgproxy_url.application.transformers import TRANSFORMERS
from imgproxy_url.application.url.modifier_set import ModifierSet, ModifierToken
from imgproxy_url.application.url.options import BuildOptions, SignatureOptions
from imgproxy_url.application.url.signature import sign
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import (
    GradientDirection,
    ResizeType,
    ResizingAlgorithm,
    UnsharpeningMode,
    WatermarkPosition,
)
from imgproxy_url.utils.encoding_utils import encode_base64_url

logger = logging.getLogger(__name__)

PLAIN_MARKER = "plain"
UNSIGNED_MARKER = "-"

Number = Union[int, float]


def assemble_url(segments: Sequence[str], options: BuildOptions) -> str:
    """Turn modifier segments into a final imgproxy URL.

    Without ``options.path`` only the joined segments are returned. Otherwise
    the locator is appended, the path is signed (or prefixed with ``-``) and
    the base URL is prepended when configured.
    """
    mods: List[str] = list(segments)
    if not options.path:
        return "/".join(mods)

    if options.plain:
        mods.extend((PLAIN_MARKER, options.path))
    else:
        mods.append(encode_base64_url(options.path))
    assembled = "/".join(mods)

    signature = options.signature
    if signature is not None:
        prefix = sign(assembled, signature.key, signature.salt, signature.size)
    else:
        prefix = UNSIGNED_MARKER
    final_path = f"{prefix}/{assembled}"

    logger.debug(
        "Assembled URL with %d segments signed=%s plain=%s",
        len(segments),
        signature is not None,
        options.plain,
    )
    return f"{options.base_url}/{final_path}" if options.base_url else f"/{final_path}"


def resolve_options(
    options: Union[BuildOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> BuildOptions:
    if overrides.get("signature") is not None:
        overrides["signature"] = SignatureOptions.coerce(overrides["signature"])
    return BuildOptions.coerce(options).merged(**overrides)


class ParamBuilder:
    """Fluent builder of imgproxy processing options.

    Every setter serializes its options through the matching transformer,
    stores the token under the modifier name and returns the same builder.
    Calling a setter again replaces the token in place, so a template builder
    can be cloned and tweaked without reshuffling the output order.

    Example:
        url = pb().resize(ResizeType.fill, 300, 200).blur(2).build(
            path="s3://bucket/image.png", base_url="https://img.example.com"
        )
    """

    def __init__(self, modifiers: Optional[ModifierSet] = None) -> None:
        self._modifiers = modifiers if modifiers is not None else ModifierSet()

    # ----- Core -----
    @property
    def modifiers(self) -> Tuple[ModifierToken, ...]:
        return self._modifiers.tokens()

    def clone(self) -> "ParamBuilder":
        return ParamBuilder(self._modifiers.copy())

    def unset(self, modifier: str) -> "ParamBuilder":
        self._modifiers.unset(modifier)
        return self

    def apply(self, modifier: str, *args: Any, **kwargs: Any) -> "ParamBuilder":
        """Set a modifier by name, e.g. ``apply("rotate", 90)``."""
        transformer = TRANSFORMERS.get(modifier)
        if transformer is None:
            raise InvalidParameterError(f"Unknown modifier: {modifier}", modifier)
        try:
            token = transformer(*args, **kwargs)
        except TypeError as exc:
            raise InvalidParameterError(f"Invalid arguments: {exc}", modifier) from exc
        return self._set(modifier, token)

    def build(
        self,
        options: Union[BuildOptions, Mapping[str, Any], None] = None,
        *,
        path: Optional[str] = None,
        base_url: Optional[str] = None,
        plain: Optional[bool] = None,
        signature: Union[SignatureOptions, Mapping[str, Any], None] = None,
    ) -> str:
        """Build the URL, or only the modifier segment when no path is given."""
        resolved = resolve_options(
            options, path=path, base_url=base_url, plain=plain, signature=signature
        )
        return assemble_url(self._modifiers.values(), resolved)

    def _set(self, modifier: str, token: str) -> "ParamBuilder":
        self._modifiers.set(modifier, token)
        return self

    def __len__(self) -> int:
        return len(self._modifiers)

    def __repr__(self) -> str:
        return f"ParamBuilder({self.build()!r})"

    # ----- Adjustments -----
    def adjust(
        self,
        brightness: Optional[int] = None,
        contrast: Optional[Number] = None,
        saturation: Optional[Number] = None,
    ) -> "ParamBuilder":
        """Brightness, contrast and saturation in one modifier."""
        return self._set("adjust", tf.adjust(brightness, contrast, saturation))

    def brightness(self, value: int) -> "ParamBuilder":
        return self._set("brightness", tf.brightness(value))

    def contrast(self, value: Number) -> "ParamBuilder":
        return self._set("contrast", tf.contrast(value))

    def saturation(self, value: Number) -> "ParamBuilder":
        return self._set("saturation", tf.saturation(value))

    def blur(self, sigma: Number) -> "ParamBuilder":
        """Gaussian blur with the given sigma."""
        return self._set("blur", tf.blur(sigma))

    def sharpen(self, sigma: Number) -> "ParamBuilder":
        return self._set("sharpen", tf.sharpen(sigma))

    def pixelate(self, size: int) -> "ParamBuilder":
        return self._set("pixelate", tf.pixelate(size))

    def unsharpen(
        self,
        mode: Optional[Union[UnsharpeningMode, str]] = None,
        weight: Optional[Number] = None,
        divider: Optional[Number] = None,
    ) -> "ParamBuilder":
        return self._set("unsharpen", tf.unsharpen(mode, weight, divider))

    def blur_detections(self, sigma: Number, class_names: Union[str, Sequence[str]]) -> "ParamBuilder":
        """Blur objects of the given classes (e.g. ``"face"``)."""
        return self._set("blur_detections", tf.blur_detections(sigma, class_names))

    def draw_detections(self, class_names: Union[str, Sequence[str], None] = None) -> "ParamBuilder":
        return self._set("draw_detections", tf.draw_detections(class_names))

    def background(self, color: Any) -> "ParamBuilder":
        """Fill transparent areas with a hex color or an ``(r, g, b)`` triple."""
        return self._set("background", tf.background(color))

    def background_alpha(self, alpha: Number) -> "ParamBuilder":
        return self._set("background_alpha", tf.background_alpha(alpha))

    def gradient(
        self,
        opacity: Number,
        color: Optional[str] = None,
        direction: Optional[Union[GradientDirection, str]] = None,
        start: Optional[Number] = None,
        stop: Optional[Number] = None,
    ) -> "ParamBuilder":
        return self._set("gradient", tf.gradient(opacity, color, direction, start, stop))

    # ----- Geometry -----
    def resize(
        self,
        resizing_type: Optional[Union[ResizeType, str]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> "ParamBuilder":
        return self._set("resize", tf.resize(resizing_type, width, height))

    def resizing_algorithm(self, algorithm: Union[ResizingAlgorithm, str]) -> "ParamBuilder":
        return self._set("resizing_algorithm", tf.resizing_algorithm(algorithm))

    def crop(
        self,
        width: Optional[Number] = None,
        height: Optional[Number] = None,
        gravity: Any = None,
    ) -> "ParamBuilder":
        """Crop before resizing; ``gravity`` accepts a Gravity, a dict or a type."""
        return self._set("crop", tf.crop(width, height, gravity))

    def gravity(self, gravity: Any) -> "ParamBuilder":
        return self._set("gravity", tf.gravity(gravity))

    def extend(self, gravity: Any = None) -> "ParamBuilder":
        return self._set("extend", tf.extend(gravity))

    def extend_aspect_ratio(self, gravity: Any = None) -> "ParamBuilder":
        return self._set("extend_aspect_ratio", tf.extend_aspect_ratio(gravity))

    def pad(
        self,
        top: Optional[int] = None,
        right: Optional[int] = None,
        bottom: Optional[int] = None,
        left: Optional[int] = None,
    ) -> "ParamBuilder":
        return self._set("pad", tf.pad(top, right, bottom, left))

    def dpr(self, value: Number) -> "ParamBuilder":
        return self._set("dpr", tf.dpr(value))

    def zoom(self, x: Number, y: Optional[Number] = None) -> "ParamBuilder":
        return self._set("zoom", tf.zoom(x, y))

    def min_width(self, value: int) -> "ParamBuilder":
        return self._set("min_width", tf.min_width(value))

    def min_height(self, value: int) -> "ParamBuilder":
        return self._set("min_height", tf.min_height(value))

    def enlarge(self) -> "ParamBuilder":
        return self._set("enlarge", tf.enlarge())

    def rotate(self, angle: int) -> "ParamBuilder":
        """Rotate by a multiple of 90 degrees."""
        return self._set("rotate", tf.rotate(angle))

    def auto_rotate(self) -> "ParamBuilder":
        """Rotate according to the EXIF orientation."""
        return self._set("auto_rotate", tf.auto_rotate())

    def trim(
        self,
        threshold: Number,
        color: Optional[str] = None,
        equal_horizontal: Optional[bool] = None,
        equal_vertical: Optional[bool] = None,
    ) -> "ParamBuilder":
        return self._set("trim", tf.trim(threshold, color, equal_horizontal, equal_vertical))

    # ----- Output -----
    def format(self, extension: str) -> "ParamBuilder":
        return self._set("format", tf.format(extension))

    def quality(self, value: int) -> "ParamBuilder":
        return self._set("quality", tf.quality(value))

    def format_quality(self, qualities: Mapping[str, int]) -> "ParamBuilder":
        return self._set("format_quality", tf.format_quality(qualities))

    def max_bytes(self, value: int) -> "ParamBuilder":
        return self._set("max_bytes", tf.max_bytes(value))

    def jpeg_options(
        self,
        progressive: Optional[bool] = None,
        no_subsample: Optional[bool] = None,
        trellis_quant: Optional[bool] = None,
        overshoot_deringing: Optional[bool] = None,
        optimize_scans: Optional[bool] = None,
        quantization_table: Optional[int] = None,
    ) -> "ParamBuilder":
        return self._set(
            "jpeg_options",
            tf.jpeg_options(
                progressive,
                no_subsample,
                trellis_quant,
                overshoot_deringing,
                optimize_scans,
                quantization_table,
            ),
        )

    def png_options(
        self,
        interlaced: Optional[bool] = None,
        quantize: Optional[bool] = None,
        quantization_colors: Optional[int] = None,
    ) -> "ParamBuilder":
        return self._set("png_options", tf.png_options(interlaced, quantize, quantization_colors))

    def gif_options(
        self,
        optimize_frames: Optional[bool] = None,
        optimize_transparency: Optional[bool] = None,
    ) -> "ParamBuilder":
        return self._set("gif_options", tf.gif_options(optimize_frames, optimize_transparency))

    def strip_metadata(self) -> "ParamBuilder":
        return self._set("strip_metadata", tf.strip_metadata())

    def strip_color_profile(self) -> "ParamBuilder":
        return self._set("strip_color_profile", tf.strip_color_profile())

    def keep_copyright(self) -> "ParamBuilder":
        return self._set("keep_copyright", tf.keep_copyright())

    def file_name(self, name: str, encoded: bool = False) -> "ParamBuilder":
        return self._set("file_name", tf.file_name(name, encoded))

    def return_attachment(self) -> "ParamBuilder":
        return self._set("return_attachment", tf.return_attachment())

    def skip_processing(self, extensions: Union[str, Sequence[str]]) -> "ParamBuilder":
        return self._set("skip_processing", tf.skip_processing(extensions))

    def raw(self) -> "ParamBuilder":
        """Serve the source unprocessed; most other modifiers are ignored by imgproxy."""
        return self._set("raw", tf.raw())

    def cache_buster(self, value: str) -> "ParamBuilder":
        return self._set("cache_buster", tf.cache_buster(value))

    def expires(self, when: Union[datetime, int]) -> "ParamBuilder":
        return self._set("expires", tf.expires(when))

    def page(self, value: int) -> "ParamBuilder":
        return self._set("page", tf.page(value))

    def disable_animation(self) -> "ParamBuilder":
        return self._set("disable_animation", tf.disable_animation())

    def video_thumbnail_second(self, second: Number) -> "ParamBuilder":
        return self._set("video_thumbnail_second", tf.video_thumbnail_second(second))

    def enforce_thumbnail(self) -> "ParamBuilder":
        return self._set("enforce_thumbnail", tf.enforce_thumbnail())

    def preset(self, presets: Union[str, Sequence[str]]) -> "ParamBuilder":
        return self._set("preset", tf.preset(presets))

    def fallback_image_url(self, url: str) -> "ParamBuilder":
        return self._set("fallback_image_url", tf.fallback_image_url(url))

    def style(self, css: Union[str, Mapping[str, str]]) -> "ParamBuilder":
        return self._set("style", tf.style(css))

    # ----- Watermark -----
    def watermark(
        self,
        opacity: Number,
        position: Optional[Union[WatermarkPosition, str]] = None,
        offset: Any = None,
        scale: Optional[Number] = None,
    ) -> "ParamBuilder":
        return self._set("watermark", tf.watermark(opacity, position, offset, scale))

    def watermark_shadow(self, sigma: Number) -> "ParamBuilder":
        return self._set("watermark_shadow", tf.watermark_shadow(sigma))

    def watermark_size(self, width: int, height: int) -> "ParamBuilder":
        return self._set("watermark_size", tf.watermark_size(width, height))

    def watermark_text(self, text: str) -> "ParamBuilder":
        return self._set("watermark_text", tf.watermark_text(text))

    def watermark_url(self, url: str) -> "ParamBuilder":
        return self._set("watermark_url", tf.watermark_url(url))


def pb() -> ParamBuilder:
    """Create an empty ParamBuilder."""
    return ParamBuilder()
