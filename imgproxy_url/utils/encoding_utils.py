"""
Encoding helpers shared by the locator, the signer and the transformers.

imgproxy expects URL-safe base64 without padding everywhere it accepts
encoded values (source URLs, watermark URLs, texts, styles, signatures).
"""

import base64
import binascii
from typing import Union

from imgproxy_url.core.exceptions import InvalidEncodingError


def encode_base64_url(data: Union[bytes, str]) -> str:
    """
    Encode bytes as unpadded base64url.

    Args:
        data: Raw bytes, or text which is UTF-8 encoded first

    Returns:
        str: Encoded value using ``-`` and ``_`` with every ``=`` stripped
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_base64_url(text: str) -> bytes:
    """Inverse of :func:`encode_base64_url` (restores the stripped padding)."""
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise InvalidEncodingError(f"Invalid base64url value: {text!r}", text) from exc


def decode_hex(text: str) -> bytes:
    """
    Decode a hex string into bytes.

    Unlike ``bytes.fromhex`` whitespace is rejected, so a key copied with a
    stray space fails loudly instead of producing a different secret.

    Raises:
        InvalidEncodingError: odd length or a non-hex character
    """
    if not isinstance(text, str):
        raise InvalidEncodingError("Hex value must be a string")
    if len(text) % 2:
        raise InvalidEncodingError("Hex value must have an even length", text)
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError("Hex value contains non-hex characters", text) from exc
