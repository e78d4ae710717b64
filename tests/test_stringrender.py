import math

import pytest

from svgnative.stringrender import (
    AffineTransform,
    StringPath,
    StringRenderer,
    StringTransform,
    format_number,
)
from svgnative.styles import (
    ClippingPath,
    FillStyle,
    Gradient,
    GradientType,
    GraphicStyle,
    LineCap,
    LineJoin,
    Rect,
    SpreadMethod,
    StrokeStyle,
    WindingRule,
)


def _matrix_tuple(t):
    m = t.matrix
    return (m.a, m.b, m.c, m.d, m.e, m.f)


def test_format_number_switches_to_exponent():
    assert format_number(1000.0) == "1e+03"


def test_format_number_strips_trailing_zeros():
    assert format_number(2.0) == "2"
    assert format_number(0.5) == "0.5"


@pytest.mark.parametrize("value", [1 / 3, 2 / 3, 123.456, 0.001234, 9.87654])
def test_format_number_keeps_three_significant_digits(value):
    text = format_number(value)
    assert math.isclose(float(text), value, rel_tol=5e-3)
    digits = text.split("e")[0].replace(".", "").replace("-", "").lstrip("0")
    assert len(digits) <= 3


def test_path_records_commands_in_order():
    path = StringPath()
    path.move_to(1, 2)
    path.line_to(3, 4)
    path.curve_to(1, 1, 2, 2, 3, 3)
    path.curve_to_v(5, 6, 7, 8)
    path.close_path()
    tokens = path.string.split()
    assert [t[0] for t in tokens] == ["M", "L", "C", "Q", "Z"]
    assert tokens[0] == "M1,2"
    assert str(path) == path.string


def test_path_shapes():
    path = StringPath()
    path.rect(0, 0, 10, 20)
    path.rounded_rect(1, 2, 3, 4, 5, 6)
    path.ellipse(5, 5, 2, 3)
    text = path.string
    assert text.startswith(" Rect(0,0,10,20)")
    assert " RoundedRect(1,2,3,4,5,6)" in text
    assert text.endswith(" Ellipse(5,5,2,3)")


def test_transform_string_identity():
    assert str(StringTransform(1, 0, 0, 1, 0, 0)) == "matrix(1,0,0,1,0,0)"


def test_translate_and_scale():
    t = StringTransform()
    t.translate(5, 7)
    assert (t.matrix.e, t.matrix.f) == (5, 7)
    t.scale(2, 3)
    assert (t.matrix.a, t.matrix.d) == (2, 3)
    t.translate(1, 1)
    assert (t.matrix.e, t.matrix.f) == (7, 10)


def test_concat_translation_matches_translate():
    a = StringTransform(2, 0.5, -1, 3, 4, 5)
    b = StringTransform(2, 0.5, -1, 3, 4, 5)
    a.concat(1, 0, 0, 1, 6, -2)
    b.translate(6, -2)
    assert _matrix_tuple(a) == pytest.approx(_matrix_tuple(b))


def test_concat_scale_matches_scale():
    a = StringTransform(1, 2, 3, 4, 5, 6)
    b = StringTransform(1, 2, 3, 4, 5, 6)
    a.concat(3, 0, 0, 0.5, 0, 0)
    b.scale(3, 0.5)
    assert _matrix_tuple(a) == pytest.approx(_matrix_tuple(b))


def test_rotations_compose():
    a = StringTransform()
    a.rotate(30)
    a.rotate(60)
    b = StringTransform()
    b.rotate(90)
    assert _matrix_tuple(a) == pytest.approx(_matrix_tuple(b), abs=1e-12)
    assert b.matrix.b == pytest.approx(1.0)
    assert b.matrix.c == pytest.approx(-1.0)


def test_multiply_identity_is_neutral():
    t = StringTransform(1, 2, 3, 4, 5, 6)
    t.multiply(AffineTransform())
    assert _matrix_tuple(t) == (1, 2, 3, 4, 5, 6)


def test_set_replaces_matrix():
    t = StringTransform()
    t.rotate(45)
    t.set(1, 2, 3, 4, 5, 6)
    assert _matrix_tuple(t) == (1, 2, 3, 4, 5, 6)


def test_renderer_factories():
    renderer = StringRenderer()
    assert renderer.create_path().string == ""
    t = renderer.create_transform(1, 2, 3, 4, 5, 6)
    assert _matrix_tuple(t) == (1, 2, 3, 4, 5, 6)


def test_save_restore_indents_nested_content():
    renderer = StringRenderer()
    renderer.save(GraphicStyle())
    path = renderer.create_path()
    path.rect(0, 0, 1, 1)
    renderer.draw_path(path, GraphicStyle(), FillStyle(), StrokeStyle())
    renderer.restore()
    lines = renderer.string.splitlines()
    assert lines[0] == "[group"
    assert lines[-1] == "]"
    assert lines[1].startswith("    [path Rect(")
    assert lines[2].startswith("        fill: {")


def test_restore_without_save_raises():
    with pytest.raises(RuntimeError):
        StringRenderer().restore()


def test_draw_path_default_styles():
    renderer = StringRenderer()
    renderer.draw_path(StringPath(), GraphicStyle(), FillStyle(), StrokeStyle())
    text = renderer.string
    assert "hasFill: true winding: nonzero" in text
    assert "hasStroke: false" in text
    assert "cap: butt join: miter" in text
    assert "opacity" not in text
    assert text.endswith("]\n")


def test_opacities_and_transform_are_written():
    renderer = StringRenderer()
    transform = StringTransform(1, 0, 0, 1, 3, 4)
    style = GraphicStyle(opacity=0.5, transform=transform)
    fill = FillStyle(fill_opacity=0.25, fill_rule=WindingRule.EVEN_ODD)
    stroke = StrokeStyle(
        has_stroke=True,
        stroke_opacity=0.75,
        line_cap=LineCap.ROUND,
        line_join=LineJoin.BEVEL,
        dash_array=[1, 2],
        dash_offset=3,
    )
    renderer.draw_path(StringPath(), style, fill, stroke)
    text = renderer.string
    assert " opacity: 0.5" in text
    assert f" transform: {transform}" in text
    assert "winding: evenodd opacity: 0.25" in text
    assert "opacity: 0.75 cap: round join: bevel" in text
    assert " dash: 1 2 dashOffset: 3" in text


def test_color_paint():
    renderer = StringRenderer()
    renderer.draw_path(StringPath(), GraphicStyle(), FillStyle(paint=(1.0, 0.0, 0.5, 1.0)), StrokeStyle())
    assert " paint: rgba(1,0,0.5,1)}" in renderer.string


def test_clipping_path_is_written():
    renderer = StringRenderer()
    clip_path = StringPath()
    clip_path.ellipse(1, 1, 1, 1)
    clip = ClippingPath(path=clip_path, clip_rule=WindingRule.EVEN_ODD)
    renderer.save(GraphicStyle(clipping_path=clip))
    renderer.restore()
    first = renderer.string.splitlines()[0]
    assert first.startswith("[group clipping: { winding: evenodd")
    assert first.endswith(f"[path{clip_path}]}}")


def test_clipping_without_path_is_skipped():
    renderer = StringRenderer()
    renderer.save(GraphicStyle(clipping_path=ClippingPath()))
    renderer.restore()
    assert "clipping" not in renderer.string


def test_linear_gradient_skips_missing_coordinates():
    gradient = Gradient(
        type=GradientType.LINEAR,
        method=SpreadMethod.REFLECT,
        x2=10,
        color_stops=[(0.0, (1.0, 0.0, 0.0, 1.0)), (1.0, (0.0, 0.0, 1.0, 1.0))],
    )
    renderer = StringRenderer()
    renderer.draw_path(StringPath(), GraphicStyle(), FillStyle(paint=gradient), StrokeStyle())
    text = renderer.string
    assert "linearGradient: x2: 10 method: reflect stops: {" in text
    assert " x1:" not in text
    assert text.count("offset: ") == 2
    stop_lines = [line for line in text.splitlines() if "offset:" in line]
    assert all(line.startswith(" " * 12) for line in stop_lines)


def test_radial_gradient_fields():
    gradient = Gradient(
        type=GradientType.RADIAL,
        cx=1,
        cy=2,
        r=3,
        transform=StringTransform(2, 0, 0, 2, 0, 0),
    )
    renderer = StringRenderer()
    renderer.draw_path(StringPath(), GraphicStyle(), FillStyle(paint=gradient), StrokeStyle())
    text = renderer.string
    assert "radialGradient: transform: matrix(2,0,0,2,0,0) cx: 1 cy: 2 r: 3 method: pad" in text
    assert " fx:" not in text


def test_draw_image():
    renderer = StringRenderer()
    renderer.draw_image("IMG", GraphicStyle(), Rect(0, 0, 10, 20), Rect(1, 2, 3, 4))
    assert renderer.string == "[image clip(0, 0, 10, 20) fill(1, 2, 3, 4)  IMG]\n"