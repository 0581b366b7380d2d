from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

DEFAULT_SIGNATURE_SIZE = 32


@dataclass(frozen=True, slots=True)
class SignatureOptions:
    """Hex-encoded signing secrets plus the number of digest bytes to keep."""

    key: str
    salt: str
    size: int = DEFAULT_SIGNATURE_SIZE

    @classmethod
    def coerce(cls, value: Any) -> Optional["SignatureOptions"]:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            size = value.get("size")
            return cls(
                key=value["key"],
                salt=value["salt"],
                size=DEFAULT_SIGNATURE_SIZE if size is None else size,
            )
        raise TypeError(f"Unsupported signature options: {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Options consumed by ``ParamBuilder.build`` and ``chain``.

    - path: source image locator; without it only the modifiers are returned
    - base_url: imgproxy instance prefix, e.g. ``https://img.example.com``
    - plain: embed the path literally after ``plain`` instead of base64url
    - signature: sign the assembled path, else the ``-`` placeholder is used
    """

    path: Optional[str] = None
    base_url: Optional[str] = None
    plain: bool = False
    signature: Optional[SignatureOptions] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "signature", SignatureOptions.coerce(self.signature))

    @classmethod
    def coerce(cls, value: Any) -> "BuildOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(**value)
        raise TypeError(f"Unsupported build options: {type(value).__name__}")

    def merged(self, **overrides: Any) -> "BuildOptions":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
