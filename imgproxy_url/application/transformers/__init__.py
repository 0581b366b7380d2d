from typing import Callable, Dict

from .adjustments import (
    adjust,
    background,
    background_alpha,
    blur,
    blur_detections,
    brightness,
    contrast,
    draw_detections,
    gradient,
    pixelate,
    saturation,
    sharpen,
    unsharpen,
)
from .geometry import (
    auto_rotate,
    crop,
    dpr,
    enlarge,
    extend,
    extend_aspect_ratio,
    gravity,
    min_height,
    min_width,
    pad,
    resize,
    resizing_algorithm,
    rotate,
    trim,
    zoom,
)
from .output import (
    cache_buster,
    disable_animation,
    enforce_thumbnail,
    expires,
    fallback_image_url,
    file_name,
    format,
    format_quality,
    gif_options,
    jpeg_options,
    keep_copyright,
    max_bytes,
    page,
    png_options,
    preset,
    quality,
    raw,
    return_attachment,
    skip_processing,
    strip_color_profile,
    strip_metadata,
    style,
    video_thumbnail_second,
)
from .watermarks import (
    watermark,
    watermark_shadow,
    watermark_size,
    watermark_text,
    watermark_url,
)

# Closed set of supported modifiers, keyed by the name stored in ModifierSet
TRANSFORMERS: Dict[str, Callable[..., str]] = {
    fn.__name__: fn
    for fn in (
        adjust,
        auto_rotate,
        background,
        background_alpha,
        blur,
        blur_detections,
        brightness,
        cache_buster,
        contrast,
        crop,
        disable_animation,
        dpr,
        draw_detections,
        enforce_thumbnail,
        enlarge,
        expires,
        extend,
        extend_aspect_ratio,
        fallback_image_url,
        file_name,
        format,
        format_quality,
        gif_options,
        gradient,
        gravity,
        jpeg_options,
        keep_copyright,
        max_bytes,
        min_height,
        min_width,
        pad,
        page,
        pixelate,
        png_options,
        preset,
        quality,
        raw,
        resize,
        resizing_algorithm,
        return_attachment,
        rotate,
        saturation,
        sharpen,
        skip_processing,
        strip_color_profile,
        strip_metadata,
        style,
        trim,
        unsharpen,
        video_thumbnail_second,
        watermark,
        watermark_shadow,
        watermark_size,
        watermark_text,
        watermark_url,
        zoom,
    )
}

__all__ = ["TRANSFORMERS", *sorted(TRANSFORMERS)]
