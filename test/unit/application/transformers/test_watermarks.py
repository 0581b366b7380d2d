import base64

import pytest

from imgproxy_url.application.transformers import watermarks as wm
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import Offset, WatermarkPosition


def _b64(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode().rstrip("=")


@pytest.mark.parametrize(
    "args, kwargs, expected",
    [
        ((0.5,), {}, "wm:0.5"),
        ((1, "soea", (10, 20), 0.2), {}, "wm:1:soea:10:20:0.2"),
        ((1,), {"offset": {"x": 5, "y": 5}}, "wm:1::5:5"),
        ((0.3, WatermarkPosition.replicate), {"scale": 0.5}, "wm:0.3:re:::0.5"),
        ((1, "ce", Offset(x=-10, y=4)), {}, "wm:1:ce:-10:4"),
    ],
)
def test_watermark(args, kwargs, expected):
    assert wm.watermark(*args, **kwargs) == expected


@pytest.mark.parametrize(
    "call",
    [
        lambda: wm.watermark(1.5),
        lambda: wm.watermark(1, "middle"),
        lambda: wm.watermark(1, "re", (1, 2)),
        lambda: wm.watermark(1, offset={"x": 1}),
        lambda: wm.watermark(1, scale=-1),
    ],
)
def test_watermark_validation(call):
    with pytest.raises(InvalidParameterError) as e:
        call()
    assert e.value.modifier == "watermark"


def test_watermark_shadow_and_size():
    assert wm.watermark_shadow(2) == "wmsh:2"
    assert wm.watermark_size(100, 50) == "wms:100:50"
    with pytest.raises(InvalidParameterError):
        wm.watermark_shadow(0)
    with pytest.raises(InvalidParameterError):
        wm.watermark_size(10, -1)


def test_watermark_text_and_url_are_base64url():
    assert wm.watermark_text("Hello, world") == f"wmt:{_b64('Hello, world')}"
    url = "https://example.com/logo.png?v=1"
    assert wm.watermark_url(url) == f"wmu:{_b64(url)}"
    with pytest.raises(InvalidParameterError):
        wm.watermark_text("")
