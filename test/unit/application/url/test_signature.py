import base64
import hashlib
import hmac

import pytest

from imgproxy_url.application.url.signature import sign
from imgproxy_url.core.exceptions import InvalidEncodingError, InvalidSignatureSizeError

DOCS_KEY = "736563726574"
DOCS_SALT = "68656C6C6F"
DOCS_PATH = "/rs:fill:300:400:0/g:sm/aHR0cDovL2V4YW1w/bGUuY29tL2ltYWdl/cy9jdXJpb3NpdHku/anBn.png"
DOCS_SIGNATURE = "oKfUtW34Dvo2BGQehJFR4Nr0_rIjOtdtzJ3QFsUcXH8"


def _reference(path: str, key: str, salt: str, size: int) -> str:
    digest = hmac.new(
        bytes.fromhex(key), bytes.fromhex(salt) + path.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.urlsafe_b64encode(digest[:size]).decode().rstrip("=")


def test_matches_imgproxy_documentation_example():
    assert sign(DOCS_PATH, DOCS_KEY, DOCS_SALT) == DOCS_SIGNATURE


def test_leading_slash_is_implied():
    assert sign(DOCS_PATH.lstrip("/"), DOCS_KEY, DOCS_SALT) == DOCS_SIGNATURE
    assert sign("x", DOCS_KEY, DOCS_SALT) == sign("/x", DOCS_KEY, DOCS_SALT)


def test_matches_reference_hmac_for_truncated_sizes():
    for size in (1, 8, 16, 31, 32):
        assert sign("/rot:90/abc", DOCS_KEY, DOCS_SALT, size) == _reference(
            "/rot:90/abc", DOCS_KEY, DOCS_SALT, size
        )


def test_signature_is_deterministic():
    first = sign("rot:90/bl:10/abc", DOCS_KEY, DOCS_SALT, 32)
    second = sign("rot:90/bl:10/abc", DOCS_KEY, DOCS_SALT, 32)
    assert first == second


def test_signature_changes_with_every_input():
    base = sign("rot:90/abc", DOCS_KEY, DOCS_SALT, 32)
    variants = {
        sign("rot:180/abc", DOCS_KEY, DOCS_SALT, 32),
        sign("rot:90/abc", DOCS_SALT, DOCS_SALT, 32),
        sign("rot:90/abc", DOCS_KEY, DOCS_KEY, 32),
        sign("rot:90/abc", DOCS_KEY, DOCS_SALT, 16),
    }
    assert base not in variants
    assert len(variants) == 4


def test_multibyte_path_is_signed_as_utf8():
    path = "/plain/local:///画像.png"
    assert sign(path, DOCS_KEY, DOCS_SALT) == _reference(path, DOCS_KEY, DOCS_SALT, 32)


@pytest.mark.parametrize("size", [0, -1, 33, 64, 1.5, "32", True])
def test_rejects_invalid_size(size):
    with pytest.raises(InvalidSignatureSizeError) as e:
        sign("/abc", DOCS_KEY, DOCS_SALT, size)
    assert e.value.error_code == "INVALID_SIGNATURE_SIZE"


@pytest.mark.parametrize(
    "key, salt",
    [
        ("abc", DOCS_SALT),
        (DOCS_KEY, "xyz1"),
        ("not-hex!", DOCS_SALT),
    ],
)
def test_rejects_malformed_hex(key, salt):
    with pytest.raises(InvalidEncodingError):
        sign("/abc", key, salt)
