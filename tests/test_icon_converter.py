"""Tests for the icon type converter, exercised through the assertion helpers."""

import io

import pytest
from PIL import Image
from PIL.PngImagePlugin import PngImageFile

from assertkit.assertions.exceptions import throws, throws_param
from assertkit.converters import Icon, IconConverter, TypeConverter, get_converter
from assertkit.culture import INVARIANT, Culture, culture_scope
from assertkit.errors import ArgumentNullError, UnsupportedConversion


@pytest.fixture
def icon(icon_bytes) -> Icon:
    return Icon(icon_bytes)


@pytest.fixture(params=["direct", "registry"])
def converter(request, icon):
    if request.param == "direct":
        return IconConverter()
    return get_converter(icon)


def test_icon_reads_size(icon):
    assert icon.size == (32, 32)
    assert str(icon) == "(Icon)"


def test_icon_rejects_non_icon_data():
    with pytest.raises(ValueError):
        Icon(b"definitely not an icon")

    png = io.BytesIO()
    Image.new("RGB", (4, 4)).save(png, format="PNG")
    with pytest.raises(ValueError, match="ICO"):
        Icon(png.getvalue())


@pytest.mark.parametrize("source_type", [bytes, bytearray])
def test_can_convert_from_bytes(converter, source_type):
    assert converter.can_convert_from(source_type)
    assert converter.can_convert_from(source_type, context=None)


@pytest.mark.parametrize("source_type", [str, object, int, tuple, Image.Image, Icon])
def test_cannot_convert_from_other_types(converter, source_type):
    assert not converter.can_convert_from(source_type)


@pytest.mark.parametrize("destination_type", [str, bytes, Image.Image, PngImageFile])
def test_can_convert_to(converter, destination_type):
    assert converter.can_convert_to(destination_type)


@pytest.mark.parametrize("destination_type", [object, int, tuple, Icon, bytearray])
def test_cannot_convert_to_other_types(converter, destination_type):
    assert not converter.can_convert_to(destination_type)


def test_convert_from_bytes(converter, icon, icon_bytes):
    new_icon = converter.convert_from(icon_bytes, culture=INVARIANT)
    assert new_icon.height == icon.height
    assert new_icon.width == icon.width
    assert new_icon == icon


@pytest.mark.parametrize(
    "value",
    ["System.Drawing.String", "not-bytes", (10, 10), 10.5, object()],
)
def test_convert_from_unsupported(converter, value):
    exc = throws(UnsupportedConversion, lambda: converter.convert_from(value, culture=INVARIANT))
    assert exc.direction == "from"


def test_convert_from_image_unsupported(converter):
    throws(UnsupportedConversion, lambda: converter.convert_from(Image.new("RGB", (20, 20))))


def test_convert_to_string(converter, icon):
    assert converter.convert_to(icon, str, culture=INVARIANT) == str(icon)
    assert converter.convert_to(icon, str) == str(icon)


def test_convert_to_bytes(converter, icon, icon_bytes):
    assert converter.convert_to(icon, bytes, culture=INVARIANT) == icon_bytes
    assert converter.convert_to(icon, bytes) == icon_bytes


def test_convert_to_image(converter, icon):
    image = converter.convert_to(icon, Image.Image)
    assert isinstance(image, Image.Image)
    assert image.size == (32, 32)


@pytest.mark.parametrize("destination_type", [tuple, Icon, object, int, float])
def test_convert_to_unsupported(converter, icon, destination_type):
    exc = throws(
        UnsupportedConversion,
        lambda: converter.convert_to(icon, destination_type, culture=INVARIANT),
    )
    assert exc.direction == "to"
    assert destination_type.__qualname__ in str(exc)


def test_convert_to_requires_destination(converter, icon):
    throws_param(ArgumentNullError, "destination_type", lambda: converter.convert_to(icon, None))


def test_none_renders_the_same_in_every_culture(converter):
    with culture_scope("fr-FR", INVARIANT):
        assert converter.convert_to(None, str) == "(none)"
        assert converter.convert_to(None, str, culture=Culture.create_specific("ru-RU")) == "(none)"
        assert converter.convert_to(None, str, culture=Culture.create_specific("de-DE")) == "(none)"


def test_get_converter_by_type():
    assert isinstance(get_converter(Icon), IconConverter)


def test_get_converter_unknown_type():
    with pytest.raises(ValueError, match="Available: Icon"):
        get_converter(int)


def test_icon_from_image_multiple_sizes():
    icon = Icon.from_image(Image.new("RGBA", (64, 64)), sizes=[(16, 16), (64, 64)])
    assert icon.size == (64, 64)
    stream = io.BytesIO()
    icon.save(stream)
    assert stream.getvalue() == icon.to_bytes()


def test_converter_base_requires_conversion_hooks():
    with pytest.raises(TypeError):
        TypeConverter()

    class FromOnly(TypeConverter):
        def _convert_from(self, value, context, culture):
            return value

    with pytest.raises(TypeError):
        FromOnly()
