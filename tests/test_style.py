import pytest

from satty.style import Color, Size, Style, default_color


def test_hex_parses_palette_colour():
    assert Color.from_hex("#F0932B") == Color.orange()
    assert Color.from_hex("#f0932bff") == Color.orange()


def test_hex_short_forms_expand():
    assert Color.from_hex("#abc") == Color.from_hex("#aabbcc")
    assert Color.from_hex("#abcd") == Color.from_hex("#aabbccdd")


def test_hex_alpha_component():
    assert Color.from_hex("#aabbcc80").a == 0x80
    assert Color.from_hex("#aabbcc").a == 255


@pytest.mark.parametrize("text", ["F0932B", "#12345", "#zzzzzz", "#"])
def test_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_component_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0, 0)


def test_from_rgba_float_truncates_and_saturates():
    assert Color.from_rgba_float(1.0, 0.0, 0.5, 1.0) == Color(255, 0, 127, 255)
    assert Color.from_rgba_float(2.0, -1.0, 0.0, 1.0) == Color(255, 0, 0, 255)


def test_to_rgba_f64_round_trips():
    for color in (Color.orange(), Color.cove(), Color.pink()):
        assert Color.from_rgba_float(*color.to_rgba_f64()) == color


def test_to_rgba_u32_packs_components():
    assert Color(1, 2, 3, 4).to_rgba_u32() == 0x01020304
    packed = Color.blue().to_rgba_u32()
    blue = Color.blue()
    assert (packed >> 24, (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF) == (
        blue.r,
        blue.g,
        blue.b,
        blue.a,
    )


def test_size_constants_at_unit_factor():
    assert Size.SMALL.to_text_size(1.0) == 36
    assert Size.MEDIUM.to_line_width(1.0) == 5.0
    assert Size.LARGE.to_arrow_tail_width(1.0) == 25.0
    assert Size.MEDIUM.to_arrow_head_length(1.0) == 30.0
    assert Size.LARGE.to_blur_factor(1.0) == 30.0
    assert Size.SMALL.to_highlight_width(1.0) == 15.0


def test_text_size_truncates():
    assert Size.SMALL.to_text_size(1.01) == 36
    assert isinstance(Size.LARGE.to_text_size(0.5), int)


@pytest.mark.parametrize("value", [0, 1, 2])
def test_sizes_scale_linearly(value):
    size = Size(value)
    assert size.to_line_width(2.0) == pytest.approx(2 * size.to_line_width(1.0))
    assert size.to_blur_factor(3.0) == pytest.approx(3 * size.to_blur_factor(1.0))


def test_sizes_are_ordered():
    assert Size.SMALL.to_line_width(1.0) < Size.MEDIUM.to_line_width(1.0) < Size.LARGE.to_line_width(1.0)
    assert Size(2) is Size.LARGE
    with pytest.raises(ValueError):
        Size(3)


def test_default_color_uses_palette_or_red():
    assert default_color([]) == Color.red()
    assert default_color([Color.blue(), Color.green()]) == Color.blue()


def test_style_default():
    style = Style.default([Color.green()], 1.5)
    assert style.color == Color.green()
    assert style.size is Size.MEDIUM
    assert style.fill is False
    assert style.annotation_size_factor == 1.5
    assert Style.default([], 1.0).color == Color.red()