from .application.url.builder import ParamBuilder, pb
from .application.url.chain import ChainInput, chain
from .application.url.modifier_set import ModifierSet, ModifierToken
from .application.url.options import BuildOptions, SignatureOptions
from .application.url.signature import sign
from .core.exceptions import (
    ConfigurationError,
    ImgproxyUrlError,
    InvalidEncodingError,
    InvalidParameterError,
    InvalidSignatureSizeError,
)
from .core.pyd_schemas import (
    GradientDirection,
    Gravity,
    GravityType,
    Offset,
    ResizeType,
    ResizingAlgorithm,
    RGBColor,
    UnsharpeningMode,
    WatermarkPosition,
)

__all__ = [
    "ParamBuilder",
    "pb",
    "ChainInput",
    "chain",
    "ModifierSet",
    "ModifierToken",
    "BuildOptions",
    "SignatureOptions",
    "sign",
    "ConfigurationError",
    "ImgproxyUrlError",
    "InvalidEncodingError",
    "InvalidParameterError",
    "InvalidSignatureSizeError",
    "GradientDirection",
    "Gravity",
    "GravityType",
    "Offset",
    "ResizeType",
    "ResizingAlgorithm",
    "RGBColor",
    "UnsharpeningMode",
    "WatermarkPosition",
]
