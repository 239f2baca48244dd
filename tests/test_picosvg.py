import math

import pytest

from skribidi.geometry import Mat2, Vec2, rgba
from skribidi.icon import GradientType, IconShape, PathCommandType, SpreadMethod
from skribidi.picosvg import add_arc, load_svg_icon, parse_path, parse_svg_icon


def _types(shape):
    return [cmd.type for cmd in shape.path]


def test_move_line_close():
    shape = IconShape()
    parse_path(shape, "M 1 2 L 3 4 Z")
    assert _types(shape) == [
        PathCommandType.MOVE_TO,
        PathCommandType.LINE_TO,
        PathCommandType.CLOSE_PATH,
    ]
    assert shape.path[0].pt == Vec2(1, 2)
    assert shape.path[1].pt == Vec2(3, 4)


def test_cubic_with_commas():
    shape = IconShape()
    parse_path(shape, "M1,2C3,4,5,6,7,8")
    cubic = shape.path[1]
    assert cubic.type is PathCommandType.CUBIC_TO
    assert (cubic.cp0, cubic.cp1, cubic.pt) == (Vec2(3, 4), Vec2(5, 6), Vec2(7, 8))


def test_quad():
    shape = IconShape()
    parse_path(shape, "M0 0 Q 1 2 3 4")
    quad = shape.path[1]
    assert quad.type is PathCommandType.QUAD_TO
    assert (quad.cp0, quad.pt) == (Vec2(1, 2), Vec2(3, 4))


def test_negative_numbers_without_separator():
    shape = IconShape()
    parse_path(shape, "M-1-2.5")
    assert shape.path[0].pt == Vec2(-1, -2.5)


def test_relative_commands_are_ignored():
    shape = IconShape()
    parse_path(shape, "m 1 2 l 3 4")
    assert shape.path == []


def test_implicit_repeats_are_ignored():
    shape = IconShape()
    parse_path(shape, "M 1 2 3 4 L 5 6")
    assert [cmd.pt for cmd in shape.path] == [Vec2(1, 2), Vec2(5, 6)]


def test_semicircle_arc_points_lie_on_circle():
    shape = IconShape()
    parse_path(shape, "M 0 0 A 10 10 0 0 1 20 0")
    assert shape.path[0].type is PathCommandType.MOVE_TO
    arcs = shape.path[1:]
    assert arcs
    assert all(cmd.type is PathCommandType.CUBIC_TO for cmd in arcs)
    for cmd in arcs:
        assert math.hypot(cmd.pt.x - 10, cmd.pt.y) == pytest.approx(10, abs=1e-6)
    assert arcs[-1].pt.x == pytest.approx(20, abs=1e-6)
    assert arcs[-1].pt.y == pytest.approx(0, abs=1e-6)


def test_compact_arc_flags():
    shape = IconShape()
    parse_path(shape, "M0 0A5 5 0 0110 0")
    last = shape.path[-1]
    assert last.type is PathCommandType.CUBIC_TO
    assert last.pt.x == pytest.approx(10, abs=1e-6)
    assert last.pt.y == pytest.approx(0, abs=1e-6)


def test_invalid_arc_flag_stops_parsing():
    shape = IconShape()
    parse_path(shape, "M0 0 A 1 1 0 2 0 5 5 L 1 1")
    assert _types(shape) == [PathCommandType.MOVE_TO]


def test_degenerate_arc_becomes_line():
    shape = IconShape()
    parse_path(shape, "M 5 5 A 3 3 0 0 1 5 5")
    assert shape.path[-1].type is PathCommandType.LINE_TO
    assert shape.path[-1].pt == Vec2(5, 5)


def test_zero_radius_arc_becomes_line():
    shape = IconShape()
    shape.move_to(Vec2(0, 0))
    add_arc(shape, [0, 4, 0, 0, 1, 7, 8])
    assert shape.path[-1].type is PathCommandType.LINE_TO
    assert shape.path[-1].pt == Vec2(7, 8)


def test_arc_on_empty_path_adds_nothing():
    shape = IconShape()
    add_arc(shape, [10, 10, 0, 0, 1, 20, 0])
    assert shape.path == []


_DOC = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 32">
<defs>
  <linearGradient id="g1" x1="1" y1="2" x2="3" y2="4" spreadMethod="reflect">
    <stop offset="0" stop-color="red"/>
    <stop offset="1" stop-color="blue" stop-opacity="0"/>
  </linearGradient>
  <radialGradient id="g2" cx="5" cy="6" r="7" fx="8" fy="9" gradientTransform="matrix(1 0 0 1 5 6)"/>
  <path d="M 0 0 L 1 1"/>
</defs>
<path fill="red" d="M0 0 L 1 1"/>
<g opacity="0.5">
  <path fill="url(#g2)" d="M 2 2"/>
</g>
<path fill="url(#missing)" d="M 3 3"/>
</svg>
"""


def test_parse_document_view_and_shapes():
    icon = parse_svg_icon(_DOC)
    assert icon.size() == Vec2(24, 32)
    children = icon.root.children
    assert len(children) == 3
    assert children[0].color == rgba(255, 0, 0, 255)
    assert len(children[0].path) == 2


def test_group_nesting_and_gradient_reference():
    icon = parse_svg_icon(_DOC)
    group = icon.root.children[1]
    assert group.opacity == pytest.approx(0.5)
    assert group.children[0].gradient_idx == 1
    assert group.children[0].path[0].pt == Vec2(2, 2)


def test_unknown_gradient_reference():
    icon = parse_svg_icon(_DOC)
    assert icon.root.children[2].gradient_idx is None


def test_linear_gradient():
    grad = parse_svg_icon(_DOC).gradients[0]
    assert grad.type is GradientType.LINEAR
    assert (grad.p0, grad.p1) == (Vec2(1, 2), Vec2(3, 4))
    assert grad.spread is SpreadMethod.REFLECT
    assert [stop.offset for stop in grad.stops] == [0.0, 1.0]
    assert grad.stops[0].color == rgba(255, 0, 0, 255)
    assert grad.stops[1].color.a == 0


def test_radial_gradient():
    grad = parse_svg_icon(_DOC).gradients[1]
    assert grad.type is GradientType.RADIAL
    assert (grad.p0, grad.p1, grad.radius) == (Vec2(5, 6), Vec2(8, 9), 7)
    assert grad.xform == Mat2(dx=5, dy=6)
    assert grad.stops == []


def test_load_from_file(tmp_path):
    path = tmp_path / "icon.svg"
    path.write_text(_DOC, encoding="utf-8")
    icon = load_svg_icon(path)
    assert icon.size() == Vec2(24, 32)
    assert len(icon.gradients) == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_svg_icon(tmp_path / "nope.svg")