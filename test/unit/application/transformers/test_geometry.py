import pytest

from imgproxy_url.application.transformers import geometry as geo
from imgproxy_url.core.exceptions import InvalidParameterError
from imgproxy_url.core.pyd_schemas import Gravity, GravityType, Offset, ResizeType


def test_resize():
    assert geo.resize(ResizeType.fill, 300, 400) == "rs:fill:300:400"
    assert geo.resize("fill-down", 100) == "rs:fill-down:100"
    assert geo.resize(width=100, height=50) == "rs::100:50"
    with pytest.raises(InvalidParameterError):
        geo.resize("stretch", 10, 10)
    with pytest.raises(InvalidParameterError):
        geo.resize("fit", -1, 10)


def test_resizing_algorithm():
    assert geo.resizing_algorithm("lanczos3") == "ra:lanczos3"
    with pytest.raises(InvalidParameterError):
        geo.resizing_algorithm("bilinear")


@pytest.mark.parametrize(
    "gravity, expected",
    [
        (GravityType.north, "g:no"),
        ("sm", "g:sm"),
        ({"type": "ce", "offset": {"x": 10, "y": 20}}, "g:ce:10:20"),
        (Gravity(type=GravityType.focus_point, offset=Offset(x=0.5, y=0.25)), "g:fp:0.5:0.25"),
        ({"type": "obj", "class_names": ["face", "cat"]}, "g:obj:face:cat"),
    ],
)
def test_gravity(gravity, expected):
    assert geo.gravity(gravity) == expected


@pytest.mark.parametrize(
    "gravity",
    [
        "up",
        {"type": "fp"},
        {"type": "fp", "offset": {"x": 2, "y": 0}},
        {"type": "sm", "offset": {"x": 1, "y": 1}},
        {"type": "obj"},
        {"type": "ce", "class_names": ["face"]},
        {"type": "obj", "class_names": ["face/rot:180"]},
        {"type": "obj", "class_names": ["face", "cat:dog"]},
    ],
)
def test_gravity_rejects_invalid(gravity):
    with pytest.raises(InvalidParameterError) as e:
        geo.gravity(gravity)
    assert e.value.modifier == "gravity"


def test_object_gravity_class_names_cannot_inject_segments():
    with pytest.raises(InvalidParameterError) as e:
        geo.crop(100, 100, {"type": "obj", "class_names": ["face/rot:180"]})
    assert e.value.modifier == "crop"


def test_crop():
    assert geo.crop(100, 50) == "c:100:50"
    assert geo.crop(height=50) == "c:0:50"
    assert (
        geo.crop(100, 50, {"type": "ce", "offset": {"x": 20, "y": 20}})
        == "c:100:50:ce:20:20"
    )
    with pytest.raises(InvalidParameterError):
        geo.crop(-5, 5)


def test_extend_variants():
    assert geo.extend() == "ex:1"
    assert geo.extend({"type": "no", "offset": {"x": 10, "y": 20}}) == "ex:1:no:10:20"
    assert geo.extend_aspect_ratio() == "exar:1"
    assert geo.extend_aspect_ratio("so") == "exar:1:so"
    with pytest.raises(InvalidParameterError):
        geo.extend("sm")
    with pytest.raises(InvalidParameterError):
        geo.extend_aspect_ratio({"type": "obj", "class_names": ["face"]})


def test_pad_fills_missing_sides_css_style():
    assert geo.pad(10) == "pd:10:10:10:10"
    assert geo.pad(10, 20) == "pd:10:20:10:20"
    assert geo.pad(10, 20, 30) == "pd:10:20:30:20"
    assert geo.pad(10, 20, 30, 40) == "pd:10:20:30:40"
    assert geo.pad(right=5) == "pd:0:5:0:5"
    with pytest.raises(InvalidParameterError):
        geo.pad()
    with pytest.raises(InvalidParameterError):
        geo.pad(-1)


def test_scaling_modifiers():
    assert geo.dpr(2) == "dpr:2"
    assert geo.zoom(3) == "z:3"
    assert geo.zoom(1.5, 2) == "z:1.5:2"
    assert geo.min_width(100) == "mw:100"
    assert geo.min_height(100) == "mh:100"
    assert geo.enlarge() == "el:1"
    with pytest.raises(InvalidParameterError):
        geo.dpr(0)
    with pytest.raises(InvalidParameterError):
        geo.zoom(0)


def test_rotate():
    assert geo.rotate(90) == "rot:90"
    assert geo.rotate(-90) == "rot:-90"
    assert geo.rotate(0) == "rot:0"
    with pytest.raises(InvalidParameterError):
        geo.rotate(45)
    assert geo.auto_rotate() == "ar:1"


def test_trim():
    assert geo.trim(10) == "t:10"
    assert geo.trim(10, "FFFFFF", True, False) == "t:10:ffffff:1:0"
    assert geo.trim(10, equal_vertical=True) == "t:10:::1"
    with pytest.raises(InvalidParameterError):
        geo.trim(10, equal_horizontal="yes")
