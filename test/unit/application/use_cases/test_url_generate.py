import base64

import pytest

from imgproxy_url import ConfigurationError, InvalidParameterError, SignatureOptions, sign
from imgproxy_url.application.use_cases.url_generate import GenerateUrlUseCase

PATH = "s3://mybucket/myimage.png"
KEY = "736563726574"
SALT = "68656C6C6F"


def _b64(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode().rstrip("=")


@pytest.fixture
def modifiers():
    return [
        {"name": "resize", "args": ["fill", 300, 200]},
        {"name": "blur", "options": {"sigma": 2}},
    ]


@pytest.fixture
def signed_use_case():
    return GenerateUrlUseCase(
        base_url="https://img.example.com",
        signature=SignatureOptions(KEY, SALT),
    )


def test_builder_from_declarative_calls(modifiers):
    builder = GenerateUrlUseCase.builder_from(modifiers)
    assert builder.build() == "rs:fill:300:200/bl:2"


def test_execute_unsigned_defaults(modifiers):
    result = GenerateUrlUseCase().execute({"modifiers": modifiers, "path": PATH})
    assert result == {"url": f"/-/rs:fill:300:200/bl:2/{_b64(PATH)}"}


def test_execute_signs_with_configured_secrets(modifiers, signed_use_case):
    result = signed_use_case.execute({"modifiers": modifiers, "path": PATH})
    assembled = f"rs:fill:300:200/bl:2/{_b64(PATH)}"
    assert result["url"] == f"https://img.example.com/{sign(assembled, KEY, SALT)}/{assembled}"


def test_execute_sign_false_skips_signature(modifiers, signed_use_case):
    result = signed_use_case.execute({"modifiers": modifiers, "path": PATH, "sign": False})
    assert result["url"].startswith("https://img.example.com/-/")


def test_request_overrides_defaults(modifiers, signed_use_case):
    result = signed_use_case.execute(
        {
            "modifiers": modifiers,
            "path": PATH,
            "plain": True,
            "base_url": "https://cdn.test",
            "sign": False,
        }
    )
    assert result["url"] == f"https://cdn.test/-/rs:fill:300:200/bl:2/plain/{PATH}"


def test_default_plain_mode():
    use_case = GenerateUrlUseCase(plain=True)
    assert use_case.execute({"path": PATH}) == {"url": f"/-/plain/{PATH}"}


def test_sign_true_without_secrets_is_configuration_error(modifiers):
    with pytest.raises(ConfigurationError) as e:
        GenerateUrlUseCase().execute({"modifiers": modifiers, "path": PATH, "sign": True})
    assert e.value.config_key == "imgproxy_key"


def test_unknown_modifier_is_rejected():
    with pytest.raises(InvalidParameterError):
        GenerateUrlUseCase().execute({"modifiers": [{"name": "sepia"}], "path": PATH})


def test_execute_chain_signs_once(signed_use_case):
    data = {
        "pipelines": [
            {"modifiers": [{"name": "rotate", "args": [90]}]},
            {"modifiers": [{"name": "blur", "args": [10]}]},
        ],
        "path": PATH,
    }
    result = signed_use_case.execute_chain(data)
    assembled = f"rot:90/-/bl:10/{_b64(PATH)}"
    assert result["url"] == f"https://img.example.com/{sign(assembled, KEY, SALT)}/{assembled}"
