from __future__ import annotations

import hashlib
import hmac
import logging

from imgproxy_url.application.url.options import DEFAULT_SIGNATURE_SIZE
from imgproxy_url.core.exceptions import InvalidSignatureSizeError
from imgproxy_url.utils.encoding_utils import decode_hex, encode_base64_url

logger = logging.getLogger(__name__)

DIGEST = hashlib.sha256
DIGEST_SIZE = DIGEST().digest_size


def sign(
    path: str,
    key_hex: str,
    salt_hex: str,
    size: int = DEFAULT_SIGNATURE_SIZE,
) -> str:
    """Compute the imgproxy signature of ``path``.

    The digest is HMAC-SHA256 keyed with ``key`` over ``salt + path``,
    truncated to ``size`` bytes and base64url encoded. imgproxy verifies the
    request path including its leading slash, so one is prepended when the
    caller passes the path without it. ``"x"`` and ``"/x"`` therefore sign to
    the same value.

    Raises:
        InvalidEncodingError: key or salt is not valid hex
        InvalidSignatureSizeError: size is not an int in 1..32
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSignatureSizeError(
            f"Signature size must be an integer, got {size!r}", size
        )
    if size < 1 or size > DIGEST_SIZE:
        raise InvalidSignatureSizeError(
            f"Signature size must be between 1 and {DIGEST_SIZE}, got {size}", size
        )

    key = decode_hex(key_hex)
    salt = decode_hex(salt_hex)
    if not path.startswith("/"):
        path = "/" + path

    mac = hmac.new(key, digestmod=DIGEST)
    mac.update(salt)
    mac.update(path.encode("utf-8"))
    signature = encode_base64_url(mac.digest()[:size])
    logger.debug("Signed path of %d chars with %d byte signature", len(path), size)
    return signature
